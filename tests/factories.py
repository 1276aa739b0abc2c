"""Test factories for creating domain objects and fake content sources.

Centralized factory functions to avoid duplication across test modules.
"""

from collections.abc import Mapping

from asqview.application.session import ViewerSession
from asqview.domain.exceptions import ContentRetrievalError
from asqview.domain.model.location import Location
from asqview.domain.model.pane import PaneContent, RowRole, Selection

DEFAULT_TEST_PATH = "src/main.go"

SAMPLE_CONTENT = "package main\n\nfunc main() {\n\tprintln(1)\n}\n"


def make_location(
    path: str = DEFAULT_TEST_PATH,
    line: int = 1,
    column: int = 1,
    span_line_count: int = 0,
) -> Location:
    """Create a Location for tests."""
    return Location(path=path, line=line, column=column, span_line_count=span_line_count)


def make_pane(
    lines: tuple[str, ...] = ("a", "b", "c"),
    matched: frozenset[int] = frozenset(),
    title: str = DEFAULT_TEST_PATH,
    error: str | None = None,
) -> PaneContent:
    """Create a PaneContent with the given 0-based rows matched."""
    roles = tuple(RowRole.MATCHED if row in matched else RowRole.DEFAULT for row in range(len(lines)))
    return PaneContent(title=title, lines=lines, roles=roles, error=error)


def make_selection(
    location: Location | None = None,
    committed: PaneContent | None = None,
    working: PaneContent | None = None,
    index: int = 0,
) -> Selection:
    """Create a Selection for tests."""
    return Selection(
        index=index,
        location=location or make_location(),
        committed=committed or make_pane(title=f"HEAD:{DEFAULT_TEST_PATH}"),
        working=working or make_pane(),
    )


class FakeContentSource:
    """In-memory ContentSourcePort. Missing paths raise ContentRetrievalError.

    Attributes:
        reads: Paths requested, in order
    """

    def __init__(
        self,
        files: Mapping[str, str] | None = None,
        *,
        name: str = "fake",
        error_prefix: str = "Error reading file",
    ) -> None:
        self.files = dict(files or {})
        self.name = name
        self.error_prefix = error_prefix
        self.reads: list[str] = []

    def title(self, path: str) -> str:
        return f"{self.name}:{path}"

    def read(self, path: str) -> str:
        self.reads.append(path)
        if path not in self.files:
            raise ContentRetrievalError(path=path, source=self.name, reason="no such file")
        return self.files[path]


def make_session(
    locations: tuple[Location, ...] = (),
    committed: Mapping[str, str] | None = None,
    working: Mapping[str, str] | None = None,
) -> ViewerSession:
    """Create a ViewerSession backed by fake sources."""
    return ViewerSession(
        committed_source=FakeContentSource(committed, name="HEAD", error_prefix="Error reading git file"),
        working_source=FakeContentSource(working, name="work"),
        locations=locations,
    )
