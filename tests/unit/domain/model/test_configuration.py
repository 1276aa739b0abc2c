"""Tests for domain/model/configuration.py."""

import pytest

from asqview.domain.model.configuration import DEFAULT_MARKER, ViewerConfig, ViewerTheme


class TestViewerTheme:
    """Tests for ViewerTheme."""

    def test_default_colours(self) -> None:
        theme = ViewerTheme()
        assert theme.background == "#000000"
        assert theme.foreground == "#00ff00"
        assert theme.disabled == "#008000"
        assert theme.matched == "#0000ff"
        assert theme.separator == "#808080"

    def test_empty_colour_raises(self) -> None:
        with pytest.raises(ValueError, match="matched must be non-empty"):
            ViewerTheme(matched="")


class TestViewerConfig:
    """Tests for ViewerConfig."""

    def test_default_values(self) -> None:
        config = ViewerConfig()
        assert config.marker == DEFAULT_MARKER == "//asq_match "
        assert config.ref == "HEAD"
        assert config.git == "git"
        assert config.encoding == "utf-8"
        assert config.list_ratio == 0.3
        assert config.pane_ratio == 0.5
        assert config.theme == ViewerTheme()

    def test_custom_values(self) -> None:
        config = ViewerConfig(marker="@@ ", ref="main~1", list_ratio=0.4)
        assert config.marker == "@@ "
        assert config.ref == "main~1"
        assert config.list_ratio == 0.4

    def test_empty_marker_raises(self) -> None:
        with pytest.raises(ValueError, match="marker must be non-empty"):
            ViewerConfig(marker="")

    def test_empty_ref_raises(self) -> None:
        with pytest.raises(ValueError, match="ref must be non-empty"):
            ViewerConfig(ref="")

    @pytest.mark.parametrize("ratio", [0, 1, 1.5, -0.1])
    def test_ratio_out_of_range_raises(self, ratio: float) -> None:
        with pytest.raises(ValueError, match="list_ratio must be in"):
            ViewerConfig(list_ratio=ratio)
        with pytest.raises(ValueError, match="pane_ratio must be in"):
            ViewerConfig(pane_ratio=ratio)

    def test_is_frozen(self) -> None:
        config = ViewerConfig()
        with pytest.raises(AttributeError):
            config.ref = "other"  # type: ignore[misc]

    def test_unknown_encoding_raises(self) -> None:
        with pytest.raises(ValueError, match="unknown encoding: bogus"):
            ViewerConfig(encoding="bogus")

    def test_encoding_alias_accepted(self) -> None:
        assert ViewerConfig(encoding="latin-1").encoding == "latin-1"
