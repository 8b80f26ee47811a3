"""Domain models for the food diary."""
