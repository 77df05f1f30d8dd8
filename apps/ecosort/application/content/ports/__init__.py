"""Content Ports."""

from ecosort.application.content.ports.content_repository import ContentRepository

__all__ = ["ContentRepository"]
