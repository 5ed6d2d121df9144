"""Fitness goal projection domain.

Pure, deterministic calculators turning a biometric profile and a stated
goal into an energy-balance plan: BMR, TDEE, calorie target, macro split
and projected body composition.
"""
