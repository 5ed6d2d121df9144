"""Goal projection wiring."""
