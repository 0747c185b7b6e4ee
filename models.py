from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ResultKind(Enum):
    VALUE = "VALUE"
    EMPTY = "EMPTY"


@dataclass(frozen=True)
class DrainResult:
    """
    イベントキューを全件処理した結果
    キューが空だった場合は EMPTY（エラーではない）
    """
    kind: ResultKind
    events: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return self.kind == ResultKind.EMPTY

    @classmethod
    def of(cls, events: Tuple[str, ...]) -> "DrainResult":
        if not events:
            return cls(kind=ResultKind.EMPTY)
        return cls(kind=ResultKind.VALUE, events=events)


@dataclass(frozen=True)
class UndoResult:
    """
    Undo の結果
    履歴が空だった場合は EMPTY（何も変更しない）
    """
    kind: ResultKind
    action: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.kind == ResultKind.EMPTY

    @classmethod
    def undone(cls, action: str) -> "UndoResult":
        return cls(kind=ResultKind.VALUE, action=action)

    @classmethod
    def nothing(cls) -> "UndoResult":
        return cls(kind=ResultKind.EMPTY)
