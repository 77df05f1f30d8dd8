"""YAML Content Repository Adapter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ecosort.application.content.ports import ContentRepository

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_PATH = Path(__file__).resolve().parents[2] / "assets" / "content.yaml"


class YamlContentRepository(ContentRepository):
    """Content loaded once from a YAML file and cached."""

    def __init__(self, path: str | Path = DEFAULT_CONTENT_PATH):
        """Initialize.

        Args:
            path: YAML file with categories, learn_topics and quick_picks
        """
        self._path = Path(path)
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is None:
            with self._path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            logger.info(
                "Content loaded (path=%s, topics=%d)",
                self._path,
                len(data.get("learn_topics", [])),
            )
            self._data = data
        return self._data

    def get_categories(self) -> list[dict[str, Any]]:
        return list(self._load().get("categories", []))

    def get_learn_topics(self) -> list[dict[str, Any]]:
        return list(self._load().get("learn_topics", []))

    def get_quick_picks(self) -> list[str]:
        return [str(item) for item in self._load().get("quick_picks", [])]
