"""Content adapters."""

from ecosort.infrastructure.content.yaml_content_repository import YamlContentRepository

__all__ = ["YamlContentRepository"]
