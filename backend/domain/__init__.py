"""Domain layer for fitness goal projection.

Pure calculation logic, free of persistence and presentation concerns.
"""
