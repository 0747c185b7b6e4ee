from __future__ import annotations

import logging
from typing import List, Tuple

from action_history import ActionHistory
from event_queue import EventQueue
from models import DrainResult, UndoResult
from volume_presets import DEFAULT_VOLUME_PRESETS, get_updated_volume_presets

logger = logging.getLogger(__name__)


class AudioControlSystem:
    """
    音声コントロールの中枢

    - 入力イベント: EventQueue（通常は末尾 / 優先は先頭）
    - 操作履歴: ActionHistory（Stack / LIFO）
    - 音量プリセット: 既定値 + 任意の追加値
    """

    def __init__(self) -> None:
        self.event_queue = EventQueue()
        self.history = ActionHistory()
        self.volume_presets: List[int] = list(DEFAULT_VOLUME_PRESETS)

    # -------------------------
    # 初期化
    # -------------------------
    def reset(self) -> None:
        self.event_queue = EventQueue()
        self.history = ActionHistory()
        self.volume_presets = list(DEFAULT_VOLUME_PRESETS)
        logger.debug("Audio control state reset")

    # -------------------------
    # 入力イベント
    # -------------------------
    def add_event(self, event: str) -> None:
        self.event_queue.enqueue(event)
        logger.debug(f"Queued event: {event!r}")

    def add_priority_event(self, event: str) -> None:
        self.event_queue.enqueue_priority(event)
        logger.debug(f"Queued priority event: {event!r}")

    def process_events(self) -> DrainResult:
        result = DrainResult.of(tuple(self.event_queue.drain_all()))
        if result.is_empty:
            logger.info("No events to process")
        else:
            logger.info(f"Processed {len(result.events)} event(s)")
        return result

    def list_pending_events(self) -> Tuple[str, ...]:
        return self.event_queue.snapshot()

    # -------------------------
    # 操作履歴 / Undo
    # -------------------------
    def record_action(self, action: str) -> None:
        self.history.record(action)
        logger.debug(f"Recorded action: {action!r}")

    def undo_last(self) -> UndoResult:
        result = self.history.undo_last()
        if result.is_empty:
            logger.info("No actions to undo")
        else:
            logger.info(f"Undid action: {result.action!r}")
        return result

    def list_history(self) -> Tuple[str, ...]:
        return self.history.snapshot()

    # -------------------------
    # 音量プリセット
    # -------------------------
    def update_volume_presets(self, new_preset: int) -> List[int]:
        # 毎回既定値から作り直す（追加値は累積しない）
        self.volume_presets = get_updated_volume_presets(new_preset)
        logger.debug(f"Volume presets: {self.volume_presets}")
        return list(self.volume_presets)
