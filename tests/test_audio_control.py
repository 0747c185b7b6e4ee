from models import ResultKind


def test_process_events_on_fresh_system_is_empty(audio_system):
    result = audio_system.process_events()
    assert result.kind == ResultKind.EMPTY
    assert result.events == ()
    assert audio_system.list_pending_events() == ()


def test_process_events_drains_in_order(audio_system):
    audio_system.add_event("MouseClick")
    audio_system.add_event("KeyPress")
    audio_system.add_priority_event("EmergencyStop")
    assert audio_system.list_pending_events() == ("EmergencyStop", "MouseClick", "KeyPress")

    result = audio_system.process_events()
    assert result.kind == ResultKind.VALUE
    assert result.events == ("EmergencyStop", "MouseClick", "KeyPress")

    assert audio_system.list_pending_events() == ()
    assert audio_system.process_events().is_empty


def test_undo_sequence(audio_system):
    for action in ("Volume Up", "Mute", "Volume Down"):
        audio_system.record_action(action)

    audio_system.undo_last()
    assert audio_system.list_history() == ("Volume Up", "Mute")
    audio_system.undo_last()
    assert audio_system.list_history() == ("Volume Up",)
    audio_system.undo_last()
    assert audio_system.undo_last().is_empty
    assert audio_system.list_history() == ()


def test_volume_presets_do_not_accumulate(audio_system):
    assert audio_system.volume_presets == [5, 10, 15, 20, 25]
    assert audio_system.update_volume_presets(30) == [5, 10, 15, 20, 25, 30]
    assert audio_system.update_volume_presets(40) == [5, 10, 15, 20, 25, 40]
    assert audio_system.update_volume_presets(-5) == [5, 10, 15, 20, 25]
    assert audio_system.volume_presets == [5, 10, 15, 20, 25]


def test_reset(audio_system):
    audio_system.add_event("a")
    audio_system.record_action("b")
    audio_system.update_volume_presets(30)
    audio_system.reset()

    assert audio_system.list_pending_events() == ()
    assert audio_system.list_history() == ()
    assert audio_system.volume_presets == [5, 10, 15, 20, 25]
