"""Shared pytest fixtures for elapsed tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from elapsed.domain.dates import CalendarDate


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ELAPSED_* environment out of every test."""
    for name in ("ELAPSED_CONFIG", "ELAPSED_QUIET", "ELAPSED_VERBOSE", "ELAPSED_SINCE__FORMAT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to an empty temp dir so no stray elapsed.toml is found.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def frozen_today(monkeypatch: pytest.MonkeyPatch) -> list[bool]:
    """Pin ``CalendarDate.today()`` to 2020-03-01.

    Returns the list of ``utc`` arguments it was called with.
    """
    calls: list[bool] = []

    def fake_today(cls: type[CalendarDate], *, utc: bool = True) -> CalendarDate:
        calls.append(utc)
        return CalendarDate(2020, 3, 1)

    monkeypatch.setattr(CalendarDate, "today", classmethod(fake_today))
    return calls
