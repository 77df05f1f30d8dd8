"""Async client for the EcoSort API with a local session history."""

from ecosort.client.session import EcoSortClientError, EcoSortSession

__all__ = ["EcoSortClientError", "EcoSortSession"]
