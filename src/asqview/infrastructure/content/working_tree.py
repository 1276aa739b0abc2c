"""Working tree content source: files as they are on disk."""

from __future__ import annotations

from pathlib import Path

from asqview.domain.exceptions import ContentRetrievalError


class WorkingTreeContentSource:
    """Read files from the local filesystem.

    Relative paths resolve against root (process cwd when None).
    """

    name = "working tree"
    error_prefix = "Error reading file"

    def __init__(self, root: Path | None = None, *, encoding: str = "utf-8") -> None:
        self._root = root
        self._encoding = encoding

    def title(self, path: str) -> str:
        return path

    def read(self, path: str) -> str:
        """Return current content of path.

        Raises:
            ContentRetrievalError: File missing, unreadable, undecodable or unknown encoding
        """
        target = Path(path)
        if self._root is not None and not target.is_absolute():
            target = self._root / target
        try:
            return target.read_text(encoding=self._encoding)
        except (OSError, UnicodeError, LookupError) as e:
            raise ContentRetrievalError(path=path, source=self.name, reason=str(e)) from e
