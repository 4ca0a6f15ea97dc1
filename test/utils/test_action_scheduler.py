from unittest.mock import MagicMock, call

import pytest
from release_reconciler.utils.action_scheduler import ActionScheduler


@pytest.fixture
def sleep():
    return MagicMock()


def test_perform_returns_result_and_waits(sleep):
    scheduler = ActionScheduler(2500, sleep=sleep)
    assert scheduler.perform(lambda: "result") == "result"
    sleep.assert_called_once_with(2.5)
    assert scheduler.performed == 1


def test_perform_waits_after_every_action(sleep):
    scheduler = ActionScheduler(100, sleep=sleep)
    events = []
    sleep.side_effect = lambda seconds: events.append(("sleep", seconds))
    scheduler.perform(lambda: events.append(("action", 1)))
    scheduler.perform(lambda: events.append(("action", 2)))
    assert events == [("action", 1), ("sleep", 0.1), ("action", 2), ("sleep", 0.1)]


def test_failed_action_propagates_without_waiting(sleep):
    scheduler = ActionScheduler(2500, sleep=sleep)
    action = MagicMock(side_effect=RuntimeError("boom"))
    with pytest.raises(RuntimeError, match="boom"):
        scheduler.perform(action)
    action.assert_called_once()
    sleep.assert_not_called()
    assert scheduler.performed == 0


def test_default_delay():
    assert ActionScheduler().delay_ms == 2500
