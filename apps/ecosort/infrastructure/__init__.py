"""EcoSort infrastructure adapters."""
