"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from feedtext.core.enums import FeedEventSource, FeedEventType
from feedtext.core.models import EventClassification, FeedEvent

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"

EventFactory = Callable[..., FeedEvent]


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for Qt worker tests."""
    qt_core = pytest.importorskip("PyQt6.QtCore")

    app = qt_core.QCoreApplication.instance()
    if app is None:
        app = qt_core.QCoreApplication([])
    yield app


def _event_factory(default_type: EventClassification) -> EventFactory:
    def make(
        text: str,
        *,
        event_type: EventClassification = default_type,
        season: int = 3,
        day: int | None = 50,
        source: FeedEventSource = FeedEventSource.UMPIRE,
    ) -> FeedEvent:
        return FeedEvent(
            text=text, event_type=event_type, season=season, day=day, source=source
        )

    return make


@pytest.fixture
def augment_event() -> EventFactory:
    """Build augment feed events; defaults to a late-era umpire event."""
    return _event_factory(FeedEventType.AUGMENT)


@pytest.fixture
def game_event() -> EventFactory:
    """Build game feed events; defaults to a late-era umpire event."""
    return _event_factory(FeedEventType.GAME)
