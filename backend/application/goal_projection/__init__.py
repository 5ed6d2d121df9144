"""Application layer for goal projection."""
