"""Shared pytest fixtures for epochctl tests."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    epoch = logging.getLogger("epochctl")
    epoch_level = epoch.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    epoch.setLevel(epoch_level)


def _set_tz(monkeypatch: pytest.MonkeyPatch, spec: str) -> None:
    monkeypatch.setenv("TZ", spec)
    time.tzset()


@pytest.fixture
def fixed_local_tz(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Local zone fixed at UTC+01:00 with no DST (POSIX TZ, no tzdata needed)."""
    _set_tz(monkeypatch, "CET-1")
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def dst_local_tz(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """US Eastern rules: UTC-05:00, UTC-04:00 from 2nd Sunday of March to 1st Sunday of November."""
    _set_tz(monkeypatch, "EST+5EDT,M3.2.0/2,M11.1.0/2")
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def lmt_local_tz(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Local zone at UTC-04:56:02, an offset with a seconds part."""
    _set_tz(monkeypatch, "LMT+4:56:02")
    yield
    monkeypatch.undo()
    time.tzset()
