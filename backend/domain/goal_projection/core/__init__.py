"""Core model of the goal projection domain."""
