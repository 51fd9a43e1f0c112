"""Tests for CLI utilities.

Covers:
- get_config() fallback
- load_history() error wrapping
- resolve_version() default and unknown versions
"""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from apiscope.cli.utils import get_config, load_history, resolve_version
from apiscope.config.models import ApiScopeConfig, ReleasesConfig
from apiscope.releases import Release, ReleaseHistory


class TestGetConfig:
    """Tests for get_config function."""

    def test_returns_stored_config(self) -> None:
        config = ApiScopeConfig(releases=ReleasesConfig(tip_of_tree="trunk"))
        ctx = click.Context(click.Command("x"), obj={"config": config})

        assert get_config(ctx) is config

    def test_falls_back_to_defaults(self) -> None:
        ctx = click.Context(click.Command("x"))

        assert get_config(ctx) == ApiScopeConfig()


class TestLoadHistory:
    """Tests for load_history function."""

    def test_loads_directory(self, tmp_path: Path) -> None:
        (tmp_path / "v1.0.0.md").write_text("### class: Page\n")
        (tmp_path / "main.md").write_text("### class: Page\n")

        history = load_history(tmp_path, ApiScopeConfig())

        assert history.version_names() == ["main", "v1.0.0"]

    def test_wraps_errors_as_click_exceptions(self, tmp_path: Path) -> None:
        """Structured errors become ClickException with the error string."""
        with pytest.raises(click.ClickException, match="RELEASE_SOURCE_NOT_FOUND"):
            load_history(tmp_path, ApiScopeConfig())

    def test_uses_configured_tip_of_tree(self, tmp_path: Path) -> None:
        (tmp_path / "trunk.md").write_text("### class: Page\n")
        config = ApiScopeConfig(releases=ReleasesConfig(tip_of_tree="trunk"))

        history = load_history(tmp_path, config)

        assert history.default_version_name() == "trunk"


class TestResolveVersion:
    """Tests for resolve_version function."""

    @pytest.fixture
    def history(self) -> ReleaseHistory:
        return ReleaseHistory(
            [Release("v1.0.0", "### class: Page\n"), Release("v1.1.0", "### class: Page\n")]
        )

    def test_default_version(self, history: ReleaseHistory) -> None:
        assert resolve_version(history, None).name == "v1.1.0"

    def test_explicit_version(self, history: ReleaseHistory) -> None:
        assert resolve_version(history, "v1.0.0").name == "v1.0.0"

    def test_unknown_version_lists_known(self, history: ReleaseHistory) -> None:
        with pytest.raises(click.ClickException, match="Known versions: v1.1.0, v1.0.0"):
            resolve_version(history, "v2.0.0")

    def test_empty_history(self) -> None:
        with pytest.raises(click.ClickException):
            resolve_version(ReleaseHistory([]), None)
