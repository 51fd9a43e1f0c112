"""Tests for ReleaseHistory and per-version views."""

from datetime import date, datetime, timedelta, timezone

import pytest

from apiscope.core.errors import LifespanError
from apiscope.core.kinds import EntryKind
from apiscope.lifespan import SymbolLifespan
from apiscope.releases.history import ReleaseHistory
from apiscope.releases.models import Release

V090 = """\
### class: Page

Page provides methods to interact with a single tab.

#### page.close()

#### page.keyboard
"""

V100 = """\
### class: Page

#### page.keyboard

### class: Dialog

#### dialog.accept([promptText])
"""

V110 = """\
### class: Page

#### event: 'close'

#### page.close([options])

#### page.keyboard
"""


@pytest.fixture
def history() -> ReleaseHistory:
    return ReleaseHistory(
        [
            Release("v0.9.0", V090, published=date(2017, 10, 10)),
            Release("v1.1.0", V110, release_notes="Chromium 66.0.3347.0 (r536395)"),
            Release("main", V110),
            Release("v1.0.0", V100, release_notes="Chromium 65.0.3312.0 (r532291)"),
        ],
        fetched_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )


class TestReleaseHistory:
    """History-level queries."""

    def test_versions_sorted_with_tip_first(self, history: ReleaseHistory) -> None:
        assert history.version_names() == ["main", "v1.1.0", "v1.0.0", "v0.9.0"]
        assert history.lifespan_index.versions == ("main", "v1.1.0", "v1.0.0", "v0.9.0")

    def test_default_version_is_newest_tagged(self, history: ReleaseHistory) -> None:
        assert history.default_version_name() == "v1.1.0"

    def test_default_version_falls_back_to_tip(self) -> None:
        history = ReleaseHistory([Release("main", V110)])

        assert history.default_version_name() == "main"

    def test_default_version_of_empty_history(self) -> None:
        assert ReleaseHistory([]).default_version_name() is None

    def test_version_descriptions(self, history: ReleaseHistory) -> None:
        # When
        descriptions = {d.name: d for d in history.version_descriptions()}

        # Then
        assert descriptions["main"].description == "N/A"
        assert descriptions["v1.0.0"].description == "Chromium 65.0.3312.0 (r532291)"
        assert descriptions["v0.9.0"].description == "Chromium 62.0.3188.0 (r494755)"
        assert descriptions["v0.9.0"].published == date(2017, 10, 10)

    def test_unknown_version(self, history: ReleaseHistory) -> None:
        assert history.get_version("v9.9.9") is None

    def test_views_are_cached(self, history: ReleaseHistory) -> None:
        assert history.get_version("v1.0.0") is history.get_version("v1.0.0")

    def test_malformed_release_fails_construction(self) -> None:
        with pytest.raises(LifespanError):
            ReleaseHistory([Release("v1.0.0", "#### page.close()\n")])

    @pytest.mark.parametrize(
        ("elapsed", "expected"),
        [
            (timedelta(seconds=0), "Just Now"),
            (timedelta(minutes=5), "5 minutes ago"),
            (timedelta(days=2), "2 days ago"),
        ],
    )
    def test_freshness(self, history: ReleaseHistory, elapsed: timedelta, expected: str) -> None:
        now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc) + elapsed

        assert history.freshness(now) == expected

    def test_freshness_without_fetch_time(self) -> None:
        assert ReleaseHistory([Release("v1.0.0", V100)]).freshness() is None

    def test_freshness_accepts_naive_datetimes(self) -> None:
        history = ReleaseHistory([], fetched_at=datetime(2024, 5, 1, 12, 0))

        assert history.freshness(datetime(2024, 5, 1, 12, 0, 30)) == "30 seconds ago"


class TestVersionView:
    """Per-version view tests."""

    def test_classes_extracted_from_release(self, history: ReleaseHistory) -> None:
        view = history.get_version("v1.0.0")

        assert view is not None
        assert [c.name for c in view.classes] == ["Page", "Dialog"]

    def test_search_items_in_listing_order(self, history: ReleaseHistory) -> None:
        view = history.get_version("v1.1.0")

        assert view is not None
        assert [item.text for item in view.search_items] == [
            "Page",
            "page.on('close')",
            "page.keyboard",
            "page.close([options])",
        ]

    def test_classes_lifespan(self, history: ReleaseHistory) -> None:
        view = history.get_version("v1.0.0")

        assert view is not None
        assert view.classes_lifespan["Dialog"].until == "v1.1.0"

    def test_lifespan_of_entries(self, history: ReleaseHistory) -> None:
        # Given
        old = history.get_version("v0.9.0")
        new = history.get_version("v1.1.0")
        assert old is not None and new is not None

        # When
        old_close = old.lifespan_of(old.classes[0].methods[0])
        new_close = new.lifespan_of(new.classes[0].methods[0])
        page = new.lifespan_of(new.classes[0])

        # Then
        assert old_close == SymbolLifespan(since="v0.9.0", until="v1.0.0")
        assert new_close == SymbolLifespan(since="v1.1.0")
        assert page == SymbolLifespan(since="v0.9.0")

    def test_lifespan_of_event(self, history: ReleaseHistory) -> None:
        view = history.get_version("main")
        assert view is not None

        event = view.classes[0].events[0]

        assert event.kind is EntryKind.EVENT
        assert view.lifespan_of(event) == SymbolLifespan(since="v1.1.0")

    def test_search(self, history: ReleaseHistory) -> None:
        view = history.get_version("v1.1.0")
        assert view is not None

        results = view.search("kb", limit=5)

        assert [r.item.text for r in results] == ["page.keyboard"]
        assert results[0].matches == (5, 8)
