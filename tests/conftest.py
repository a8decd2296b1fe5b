from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from agecalc.config.cli import LOG_LEVEL_VAR, REFERENCE_DATE_VAR

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime


class CountingClock:
    """Clock returning a fixed instant and recording how often it was read."""

    def __init__(self, reference: datetime) -> None:
        self.reference = reference
        self.calls = 0

    def __call__(self) -> datetime:
        self.calls += 1
        return self.reference


@pytest.fixture
def make_clock() -> Callable[[datetime], CountingClock]:
    def _make(reference: datetime) -> CountingClock:
        return CountingClock(reference)

    return _make


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)
    monkeypatch.delenv(REFERENCE_DATE_VAR, raising=False)
    return monkeypatch
