"""Static content use case."""
