from action_history import ActionHistory
from models import ResultKind


def test_record_keeps_order():
    h = ActionHistory()
    h.record("Set Volume 15")
    h.record("Mute")

    assert h.snapshot() == ("Set Volume 15", "Mute")
    assert h.peek() == "Mute"
    assert h.size() == 2


def test_undo_removes_most_recent():
    h = ActionHistory()
    h.record("Volume Up")
    h.record("Mute")
    h.record("Volume Down")

    result = h.undo_last()
    assert result.kind == ResultKind.VALUE
    assert result.action == "Volume Down"
    assert h.snapshot() == ("Volume Up", "Mute")

    assert h.undo_last().action == "Mute"
    assert h.snapshot() == ("Volume Up",)

    assert h.undo_last().action == "Volume Up"
    assert h.undo_last().is_empty
    assert h.snapshot() == ()


def test_undo_on_empty_history_is_noop():
    h = ActionHistory()
    result = h.undo_last()

    assert result.is_empty
    assert result.action is None
    assert h.is_empty()


def test_undo_after_new_record_is_lifo():
    h = ActionHistory()
    h.record("a")
    h.record("b")
    h.undo_last()
    h.record("c")

    assert h.undo_last().action == "c"
    assert h.undo_last().action == "a"


def test_snapshot_is_read_only_view():
    h = ActionHistory()
    h.record("Play")
    snap = h.snapshot()
    h.record("Pause")

    assert snap == ("Play",)
    assert list(h) == ["Play", "Pause"]


def test_clear():
    h = ActionHistory()
    h.record("Play")
    h.clear()
    assert h.is_empty()
    assert h.peek() is None
