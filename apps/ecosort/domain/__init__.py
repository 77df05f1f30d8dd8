"""EcoSort domain layer."""
