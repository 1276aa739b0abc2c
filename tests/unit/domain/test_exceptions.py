"""Tests for domain/exceptions.py."""

import pytest

from asqview.domain.exceptions import AsqViewError, ContentRetrievalError, LocationFileError


class TestLocationFileError:
    """Tests for LocationFileError."""

    def test_hierarchy(self) -> None:
        assert issubclass(LocationFileError, AsqViewError)
        assert issubclass(LocationFileError, OSError)

    def test_attributes_and_message(self) -> None:
        err = LocationFileError(path="locs.txt", reason="No such file")
        assert err.path == "locs.txt"
        assert err.reason == "No such file"
        assert str(err) == "Cannot read location file locs.txt: No such file"


class TestContentRetrievalError:
    """Tests for ContentRetrievalError."""

    def test_hierarchy(self) -> None:
        assert issubclass(ContentRetrievalError, AsqViewError)
        assert issubclass(ContentRetrievalError, OSError)

    def test_attributes_and_message(self) -> None:
        err = ContentRetrievalError(path="a.go", source="git", reason="bad revision")
        assert err.path == "a.go"
        assert err.source == "git"
        assert err.reason == "bad revision"
        assert str(err) == "git: a.go: bad revision"

    def test_can_catch_as_asqview_error(self) -> None:
        with pytest.raises(AsqViewError):
            raise ContentRetrievalError(path="a.go", source="git", reason="x")
