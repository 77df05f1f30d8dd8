"""Classify use case."""
