"""Service setup: configuration, logging, dependency wiring."""

from ecosort.setup.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
