"""MacroService - Macronutrient distribution calculation."""

from typing import Optional, Tuple

from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.goal import Goal
from ..core.value_objects.macro_plan import MacroPlan
from ..core.value_objects.macro_split import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroSplit,
)


class MacroService(IMacroCalculator):
    """Split a calorie target into protein, fat and carbohydrate grams.

    Protein (g/kg body weight, by goal):
        - Lose weight: 2.2
        - Gain weight: 1.8
        - Maintain: 2.0

    Fat (g/kg body weight, by body fat):
        - 0.8 above 15% body fat
        - 1.0 otherwise

    Carbohydrates take the remaining calories and are never negative. If
    protein and fat alone exceed the target, fat is reduced first, then
    protein, so the split never exceeds the target.
    """

    LEAN_FAT_PER_KG = 1.0
    HIGHER_FAT_PER_KG = 0.8
    FAT_PER_KG_BODY_FAT_THRESHOLD = 15.0

    def fat_per_kg(self, body_fat_percent: float) -> float:
        if body_fat_percent > self.FAT_PER_KG_BODY_FAT_THRESHOLD:
            return self.HIGHER_FAT_PER_KG
        return self.LEAN_FAT_PER_KG

    def calculate(
        self,
        calories_target: int,
        weight_kg: float,
        goal: Goal,
        body_fat_percent: float,
    ) -> MacroSplit:
        """Calculate macro distribution.

        Example:
            >>> MacroService().calculate(2120, 80.0, Goal.LOSE_WEIGHT, 20.0)
            MacroSplit(protein_g=176, carbs_g=210, fat_g=64)
        """
        calories_target = int(calories_target)

        # 1. Protein (goal-dependent g/kg)
        protein_g = round(weight_kg * goal.protein_multiplier())

        # 2. Fat (body-fat dependent g/kg)
        fat_g = round(weight_kg * self.fat_per_kg(body_fat_percent))

        protein_cal = protein_g * PROTEIN_KCAL_PER_G
        fat_cal = fat_g * FAT_KCAL_PER_G

        if protein_cal + fat_cal > calories_target:
            if protein_cal > calories_target:
                protein_g = calories_target // PROTEIN_KCAL_PER_G
                protein_cal = protein_g * PROTEIN_KCAL_PER_G
            fat_g = max((calories_target - protein_cal) // FAT_KCAL_PER_G, 0)
            fat_cal = fat_g * FAT_KCAL_PER_G

        # 3. Carbs (remaining calories)
        carb_cal = calories_target - protein_cal - fat_cal
        carbs_g = max(round(carb_cal / CARBS_KCAL_PER_G), 0)

        return MacroSplit(protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g)

    def calculate_from_plan(
        self,
        calories_target: int,
        plan: MacroPlan,
        custom_split: Optional[Tuple[float, float, float]] = None,
    ) -> MacroSplit:
        """Split a calorie figure by a preset percentage plan.

        Grams are truncated, so the split never exceeds the target.
        ``custom_split`` gives (protein, carbs, fat) percentages and is
        required for ``MacroPlan.CUSTOM``.

        Raises:
            ValueError: If a custom split is missing, negative or does not
                sum to 100

        Example:
            >>> MacroService().calculate_from_plan(2000, MacroPlan.BALANCED)
            MacroSplit(protein_g=150, carbs_g=200, fat_g=66)
        """
        protein_pct, carbs_pct, fat_pct = plan.resolve_split(custom_split)

        calories = max(int(calories_target), 0)
        return MacroSplit(
            protein_g=int(calories * protein_pct / 100 / PROTEIN_KCAL_PER_G),
            carbs_g=int(calories * carbs_pct / 100 / CARBS_KCAL_PER_G),
            fat_g=int(calories * fat_pct / 100 / FAT_KCAL_PER_G),
        )
