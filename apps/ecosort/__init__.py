"""EcoSort waste classification service."""
