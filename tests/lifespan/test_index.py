"""Tests for the lifespan index."""

import pytest

from apiscope.core.errors import ErrorCode, LifespanError
from apiscope.core.kinds import EntryKind
from apiscope.lifespan import (
    ReleaseHeadings,
    SymbolLifespan,
    build_lifespan_index,
)

PAGE_WITH_CLOSE = """\
# API

### class: Page

Page provides methods to interact with a single tab.

#### event: 'load'

#### page.close([options])

#### page.keyboard
"""

PAGE_WITHOUT_CLOSE = """\
### class: Page

#### event: 'load'

#### page.keyboard

### class: Dialog

#### dialog.accept([promptText])
"""


@pytest.fixture
def index():
    """Releases v0.9.0 -> v1.0.0 -> v1.1.0 where Page.close skips v1.0.0."""
    return build_lifespan_index(
        [
            ReleaseHeadings.from_api_text("v1.1.0", PAGE_WITH_CLOSE),
            ReleaseHeadings.from_api_text("v1.0.0", PAGE_WITHOUT_CLOSE),
            ReleaseHeadings.from_api_text("v0.9.0", PAGE_WITH_CLOSE),
        ]
    )


class TestReintroducedMember:
    """Point-sample reconstruction of a method removed and re-added."""

    def test_given_oldest_release_when_lookup_then_removed_at_gap(self, index) -> None:
        # When
        close = index.lookup_symbol("v0.9.0", "Page", EntryKind.METHOD, "close")

        # Then
        assert close == SymbolLifespan(since="v0.9.0", until="v1.0.0")
        assert close.removed

    def test_given_newest_release_when_lookup_then_newly_introduced(self, index) -> None:
        close = index.lookup_symbol("v1.1.0", "Page", EntryKind.METHOD, "close")

        assert close == SymbolLifespan(since="v1.1.0", until=None)
        assert not close.removed

    def test_given_gap_release_when_lookup_then_not_found(self, index) -> None:
        assert index.lookup_symbol("v1.0.0", "Page", EntryKind.METHOD, "close") is None


class TestLifespanIndex:
    """Index query tests."""

    def test_versions_keep_input_order(self, index) -> None:
        assert index.versions == ("v1.1.0", "v1.0.0", "v0.9.0")
        assert len(index) == 3
        assert "v1.0.0" in index
        assert "v2.0.0" not in index

    def test_symbol_present_everywhere_since_oldest(self, index) -> None:
        for version in index.versions:
            load = index.lookup_symbol(version, "Page", EntryKind.EVENT, "load")
            keyboard = index.lookup_symbol(version, "Page", EntryKind.NAMESPACE, "keyboard")
            assert load == SymbolLifespan(since="v0.9.0")
            assert keyboard == SymbolLifespan(since="v0.9.0")

    def test_class_lookup(self, index) -> None:
        page = index.lookup_symbol("v1.1.0", "Page", EntryKind.CLASS, "Page")
        dialog = index.lookup_symbol("v1.0.0", "Dialog", EntryKind.CLASS, "Dialog")

        assert page == SymbolLifespan(since="v0.9.0")
        assert dialog == SymbolLifespan(since="v1.0.0", until="v1.1.0")

    def test_class_lookup_with_mismatched_name_is_not_found(self, index) -> None:
        assert index.lookup_symbol("v1.1.0", "Page", EntryKind.CLASS, "Dialog") is None

    @pytest.mark.parametrize(
        ("version", "class_name", "kind", "name"),
        [
            ("v9.9.9", "Page", EntryKind.METHOD, "close"),
            ("v1.1.0", "Frame", EntryKind.METHOD, "close"),
            ("v1.1.0", "Page", EntryKind.METHOD, "goto"),
            ("v1.1.0", "Page", EntryKind.EVENT, "close"),
        ],
    )
    def test_unknown_lookups_return_none(
        self, index, version: str, class_name: str, kind: EntryKind, name: str
    ) -> None:
        """Lookups answer 'not found' instead of raising."""
        assert index.lookup_symbol(version, class_name, kind, name) is None

    def test_classes_lifespan_per_release(self, index) -> None:
        # When
        classes = index.classes_lifespan("v1.0.0")

        # Then
        assert set(classes) == {"Page", "Dialog"}
        assert classes["Dialog"].to_dict()["until"] == "v1.1.0"
        assert index.classes_lifespan("v9.9.9") is None

    def test_classes_lifespan_is_read_only(self, index) -> None:
        classes = index.classes_lifespan("v1.1.0")

        with pytest.raises(TypeError):
            classes["Page"] = classes["Page"]  # type: ignore[index]
        with pytest.raises(TypeError):
            classes["Page"].methods_since["close"] = "v0.1.0"  # type: ignore[index]


class TestBuildLifespanIndex:
    """Index construction tests."""

    def test_given_duplicate_release_when_built_then_raises(self) -> None:
        releases = [
            ReleaseHeadings.from_api_text("v1.0.0", PAGE_WITH_CLOSE),
            ReleaseHeadings.from_api_text("v1.0.0", PAGE_WITHOUT_CLOSE),
        ]

        with pytest.raises(LifespanError) as exc_info:
            build_lifespan_index(releases)

        assert exc_info.value.code == ErrorCode.DUPLICATE_RELEASE

    def test_given_malformed_release_when_built_then_whole_index_fails(self) -> None:
        # Given - the oldest release is malformed
        releases = [
            ReleaseHeadings.from_api_text("v1.1.0", PAGE_WITH_CLOSE),
            ReleaseHeadings.from_api_text("v1.0.0", "#### page.close()\n### class: Page\n"),
        ]

        # When / Then
        with pytest.raises(LifespanError) as exc_info:
            build_lifespan_index(releases)

        assert exc_info.value.details["release"] == "v1.0.0"

    def test_empty_history(self) -> None:
        index = build_lifespan_index([])

        assert len(index) == 0
        assert index.lookup_class("v1.0.0", "Page") is None
