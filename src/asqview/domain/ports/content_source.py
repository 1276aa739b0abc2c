"""Content source port (interface)."""

from __future__ import annotations

from typing import Protocol


class ContentSourcePort(Protocol):
    """Contract for anything that can return the text of a file.

    Infrastructure provides the git snapshot and working tree sources.
    Tests substitute in-memory fakes.

    Attributes:
        name: Short source name used in messages
        error_prefix: Prefix for the inline error shown in place of content
    """

    name: str
    error_prefix: str

    def title(self, path: str) -> str:
        """Pane caption for path."""
        ...

    def read(self, path: str) -> str:
        """Return full text of path.

        Raises:
            ContentRetrievalError: If content cannot be obtained
        """
        ...
