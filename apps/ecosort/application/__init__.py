"""EcoSort application layer."""
