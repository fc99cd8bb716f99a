"""Pytest fixtures for persist tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from persist.io import locations
from persist.ui.logging import close_logging


@pytest.fixture
def platform_calls() -> list[dict[str, object]]:
    """Arguments received by the fake platform directory lookup."""
    return []


@pytest.fixture
def config_root(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    platform_calls: list[dict[str, object]],
) -> Path:
    """Redirect the platform configuration directory into *tmp_path*."""
    root = tmp_path / "config"

    def fake_user_config_path(
        appname: str | None = None,
        appauthor: str | bool | None = None,
        version: str | None = None,
        roaming: bool = False,
        ensure_exists: bool = False,
    ) -> Path:
        platform_calls.append({"appname": appname, "appauthor": appauthor, "roaming": roaming})
        return root / str(appname)

    monkeypatch.setattr(locations, "user_config_path", fake_user_config_path)
    return root


@pytest.fixture(autouse=True)
def reset_logging():
    """Leave logging disabled after every test."""
    yield
    close_logging()
