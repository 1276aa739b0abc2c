"""Git snapshot content source.

Implements ContentSourcePort with `git show <ref>:<path>`.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from asqview.domain.exceptions import ContentRetrievalError
from asqview.domain.model.configuration import DEFAULT_REF


class GitContentSource:
    """Read files as committed in a git ref.

    Runs git once per read(), nothing is cached.
    """

    name = "git"
    error_prefix = "Error reading git file"

    def __init__(
        self,
        ref: str = DEFAULT_REF,
        *,
        git: str = "git",
        cwd: Path | None = None,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize source.

        Args:
            ref: Commit-ish to read from
            git: Git executable
            cwd: Directory git runs in. None = process cwd.
            encoding: Decoding for file content

        Raises:
            ValueError: If ref or git is empty
        """
        if not ref:
            raise ValueError("ref must be non-empty")
        if not git:
            raise ValueError("git must be non-empty")

        self._ref = ref
        self._git = git
        self._cwd = cwd
        self._encoding = encoding

    @property
    def ref(self) -> str:
        return self._ref

    def title(self, path: str) -> str:
        return f"{self._ref}:{path}"

    def read(self, path: str) -> str:
        """Return content of path at ref.

        Raises:
            ContentRetrievalError: git missing, non-zero exit, undecodable output or unknown encoding
        """
        command = [self._git, "show", f"{self._ref}:{path}"]
        try:
            completed = subprocess.run(
                command,
                cwd=self._cwd,
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise ContentRetrievalError(path=path, source=self.name, reason=str(e)) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            reason = stderr or f"git exited with status {completed.returncode}"
            raise ContentRetrievalError(path=path, source=self.name, reason=reason)

        try:
            return completed.stdout.decode(self._encoding)
        except (UnicodeError, LookupError) as e:
            raise ContentRetrievalError(path=path, source=self.name, reason=str(e)) from e
