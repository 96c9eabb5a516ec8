import pytest

from promptdeck_commons.api_schema.prompt_schema import Variable
from promptdeck.services.drag_reorder import DragReorderTracker, DragState


@pytest.fixture
def variables():
    return [Variable(id=f"v{i}", name=f"n{i}") for i in range(4)]


def _ids(items):
    return [item.id for item in items]


def test_completed_gesture_moves_entry(variables):
    tracker = DragReorderTracker()
    tracker.start("v0")
    assert tracker.state is DragState.DRAGGING
    result = tracker.end(variables, target_id="v2")
    assert _ids(result) == ["v1", "v2", "v0", "v3"]
    assert tracker.state is DragState.IDLE


def test_target_recorded_by_over(variables):
    tracker = DragReorderTracker()
    tracker.start("v3")
    tracker.over("v1")
    assert _ids(tracker.end(variables)) == ["v0", "v3", "v1", "v2"]


def test_end_without_start_keeps_order(variables):
    tracker = DragReorderTracker()
    assert tracker.end(variables, target_id="v1") is variables
    assert tracker.state is DragState.IDLE


def test_cancelled_gesture_keeps_order(variables):
    tracker = DragReorderTracker()
    tracker.start("v0")
    tracker.over("v3")
    tracker.cancel()
    assert tracker.state is DragState.IDLE
    assert tracker.end(variables) is variables


def test_drop_outside_any_target_keeps_order(variables):
    tracker = DragReorderTracker()
    tracker.start("v0")
    tracker.over("v2")
    tracker.over(None)
    assert tracker.end(variables) is variables


@pytest.mark.parametrize("origin,target", [("v1", "v1"), ("gone", "v1"), ("v1", "gone")])
def test_invalid_drop_keeps_order(variables, origin, target):
    tracker = DragReorderTracker()
    tracker.start(origin)
    assert tracker.end(variables, target_id=target) is variables
    assert tracker.state is DragState.IDLE


def test_over_is_ignored_when_idle():
    tracker = DragReorderTracker()
    tracker.over("v1")
    assert tracker.target_id is None
