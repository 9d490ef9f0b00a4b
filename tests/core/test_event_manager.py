"""
test_event_manager.py
---------------------
Unit tests for the pub-sub EventManager.
"""

import dataclasses

import pytest
from unittest.mock import MagicMock

from frogger.core.services import event_manager as events_module
from frogger.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    GemCollectedEvent,
    get_events,
    reset_events,
)


@pytest.fixture
def events():
    return EventManager()


class TestSubscription:

    def test_dispatch_reaches_subscriber(self, events):
        callback = MagicMock()
        events.subscribe(GameOverEvent, callback)

        events.dispatch(GameOverEvent(score=-1))

        callback.assert_called_once_with(GameOverEvent(score=-1))

    def test_dispatch_is_type_specific(self, events):
        callback = MagicMock()
        events.subscribe(GameOverEvent, callback)

        events.dispatch(GemCollectedEvent(score=2, points=2))

        callback.assert_not_called()

    def test_duplicate_subscription_ignored(self, events):
        callback = MagicMock()
        events.subscribe(GameOverEvent, callback)
        events.subscribe(GameOverEvent, callback)

        assert events.get_subscriber_count(GameOverEvent) == 1

    def test_unsubscribe(self, events):
        callback = MagicMock()
        events.subscribe(GameOverEvent, callback)
        events.unsubscribe(GameOverEvent, callback)
        events.unsubscribe(GameOverEvent, callback)

        events.dispatch(GameOverEvent(score=0))
        callback.assert_not_called()

    def test_clear_all(self, events):
        events.subscribe(GameOverEvent, MagicMock())
        events.subscribe(GemCollectedEvent, MagicMock())
        assert events.get_subscriber_count() == 2

        events.clear_all()
        assert events.get_subscriber_count() == 0


class TestDispatch:

    def test_failing_callback_does_not_stop_others(self, events):
        failing = MagicMock(side_effect=RuntimeError("boom"))
        healthy = MagicMock()
        events.subscribe(GameOverEvent, failing)
        events.subscribe(GameOverEvent, healthy)

        events.dispatch(GameOverEvent(score=-1))

        healthy.assert_called_once()

    def test_events_are_frozen(self):
        event = GameOverEvent(score=-1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.score = 5


class TestSingleton:

    def test_get_events_returns_same_instance(self):
        reset_events()
        try:
            assert get_events() is get_events()
        finally:
            reset_events()

    def test_reset_events(self):
        first = get_events()
        reset_events()
        assert events_module._EVENTS is None
        assert get_events() is not first
        reset_events()
