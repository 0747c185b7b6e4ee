from __future__ import annotations

import logging
import os
from typing import Callable, Iterable, List

from audio_control import AudioControlSystem
from models import DrainResult, UndoResult


# -------------------------
# 表示用フォーマット
# -------------------------
def format_volume_presets(presets: Iterable[int]) -> str:
    return "Current Volume Presets: " + "".join(f"{p} " for p in presets)


def describe_drain(result: DrainResult) -> List[str]:
    if result.is_empty:
        return ["No events to process."]
    return [f"Processing event: {e}" for e in result.events]


def describe_undo(result: UndoResult) -> str:
    if result.is_empty:
        return "No actions to undo."
    return f"Undoing action: {result.action}"


def format_history(actions: Iterable[str]) -> str:
    return "Audio Control History: " + "".join(f"{a} | " for a in actions)


# -------------------------
# デモ
# -------------------------
def run_demo(system: AudioControlSystem, out: Callable[[str], None] = print) -> None:
    # 音量プリセット（負の値は追加されない）
    out(format_volume_presets(system.update_volume_presets(30)))
    out(format_volume_presets(system.update_volume_presets(-5)))

    # 入力イベント（空キューの処理も確認）
    for line in describe_drain(system.process_events()):
        out(line)
    system.add_event("MouseClick")
    system.add_event("KeyPress")
    system.add_priority_event("EmergencyStop")
    for line in describe_drain(system.process_events()):
        out(line)

    # 操作履歴
    for action in ("Volume Up", "Mute", "Volume Down"):
        system.record_action(action)
    out(format_history(system.list_history()))
    out(describe_undo(system.undo_last()))
    out(format_history(system.list_history()))


def main() -> None:
    logging.basicConfig(level=os.environ.get("AUDIO_CONTROL_LOG_LEVEL", "WARNING").upper())
    run_demo(AudioControlSystem())


if __name__ == "__main__":
    main()
