"""Domain exceptions: all public errors of asqview.

Infrastructure/Application raise these, not their own public exceptions.
"""


class AsqViewError(Exception):
    """Base for all asqview error exceptions.

    Allows: except AsqViewError to catch all library errors.
    """


class LocationFileError(AsqViewError, OSError):
    """Location list file cannot be read.

    Inherits OSError for semantic correctness (I/O failure).

    Attributes:
        path: File that failed.
        reason: Error description.
    """

    def __init__(self, *, path: str, reason: str) -> None:
        """Initialize with file path and error reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read location file {path}: {reason}")


class ContentRetrievalError(AsqViewError, OSError):
    """Content of a file could not be obtained from a source.

    Raised by content sources (git snapshot, working tree).
    The session turns it into an inline pane message.

    Attributes:
        path: Requested path.
        source: Source name ("git", "working tree").
        reason: Error description.
    """

    def __init__(self, *, path: str, source: str, reason: str) -> None:
        """Initialize with path, source name and error reason."""
        self.path = path
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {path}: {reason}")
