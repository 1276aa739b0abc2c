"""Infrastructure layer: process and filesystem adapters."""

from asqview.infrastructure.content import GitContentSource, WorkingTreeContentSource

__all__ = [
    "GitContentSource",
    "WorkingTreeContentSource",
]
