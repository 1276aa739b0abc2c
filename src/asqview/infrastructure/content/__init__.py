"""Content source adapters implementing ContentSourcePort."""

from asqview.infrastructure.content.git import GitContentSource
from asqview.infrastructure.content.working_tree import WorkingTreeContentSource

__all__ = [
    "GitContentSource",
    "WorkingTreeContentSource",
]
