"""Output layer — human (Rich) and machine (JSON) result rendering."""
