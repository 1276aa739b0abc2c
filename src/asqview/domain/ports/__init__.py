"""Domain ports (interfaces)."""

from asqview.domain.ports.content_source import ContentSourcePort

__all__ = ["ContentSourcePort"]
