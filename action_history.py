from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from models import UndoResult


class ActionHistory:
    """
    音声操作の履歴（Stack / LIFO）
    record   : O(1)
    undo_last: O(1)

    Undo は直前1操作だけ取り消す。空のときは何もしない。
    """

    def __init__(self) -> None:
        self._data: List[str] = []

    def record(self, action: str) -> None:
        self._data.append(action)

    def undo_last(self) -> UndoResult:
        if not self._data:
            return UndoResult.nothing()
        return UndoResult.undone(self._data.pop())

    def peek(self) -> Optional[str]:
        if not self._data:
            return None
        return self._data[-1]

    def snapshot(self) -> Tuple[str, ...]:
        # 古い順
        return tuple(self._data)

    def clear(self) -> None:
        self._data.clear()

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._data))
