from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


@dataclass
class _Node:
    value: str
    next: Optional["_Node"] = None


class EventQueue:
    """
    単方向リンクで実装したユーザー入力イベントの Queue
    enqueue / enqueue_priority / 先頭からの取り出し: O(1)

    - 通常イベント: 末尾に追加（FIFO）
    - 優先イベント: 先頭に追加（優先イベント同士は後から入れた方が前）
    """

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size: int = 0

    def enqueue(self, event: str) -> None:
        node = _Node(value=event)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def enqueue_priority(self, event: str) -> None:
        """
        先頭に追加（優先イベント）
        """
        node = _Node(value=event, next=self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def _dequeue(self) -> Optional[str]:
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def drain_all(self) -> Iterator[str]:
        """
        先頭から順に取り出しながら返す（遅延評価）
        取り出したイベントは保持しない。途中で止めた場合、残りはキューに残る。
        """
        while self._head is not None:
            yield self._dequeue()

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self)

    def clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def peek(self) -> Optional[str]:
        return None if self._head is None else self._head.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        # 非破壊の走査
        node = self._head
        while node is not None:
            yield node.value
            node = node.next
