"""Binary-heap priority queue used for the debtor and creditor sides.

A single queue type is parameterized by an ordering key; the debtor and
creditor queues differ only in that key.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable, Generic, Iterable, TypeVar

from ..errors import EmptyQueueError
from ..models.balance import NetBalance

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-heap over ``key(item)``; the smallest key is extracted first.

    Entries are stored as ``(key, sequence, item)`` so items themselves never
    need to be comparable and equal keys fall back to insertion order.
    """

    def __init__(self, items: Iterable[T] = (), *, key: Callable[[T], Any], name: str = "queue") -> None:
        self._key = key
        self.name = name
        self._counter = itertools.count()
        self._heap: list[tuple[Any, int, T]] = [(key(item), next(self._counter), item) for item in items]
        heapq.heapify(self._heap)

    def insert(self, item: T) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def extract_extreme(self) -> T:
        """Remove and return the top item."""

        if not self._heap:
            raise EmptyQueueError(f"Cannot extract from empty {self.name}")
        return heapq.heappop(self._heap)[2]

    def peek_size(self) -> int:
        return len(self._heap)

    def snapshot(self) -> list[T]:
        """Items in backing-heap order (index 0 is the top)."""

        return [entry[2] for entry in self._heap]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(name={self.name!r}, size={len(self._heap)})"


def _debtor_key(entry: NetBalance):
    # Largest balance first; ties by ascending party id.
    return (entry.balance.copy_negate(), entry.party_id)


def _creditor_key(entry: NetBalance):
    # Most negative balance first; ties by ascending party id.
    return (entry.balance, entry.party_id)


def debtor_queue(entries: Iterable[NetBalance] = ()) -> PriorityQueue[NetBalance]:
    """Max-ordered queue over positive balances."""

    return PriorityQueue(entries, key=_debtor_key, name="debtor queue")


def creditor_queue(entries: Iterable[NetBalance] = ()) -> PriorityQueue[NetBalance]:
    """Min-ordered queue over negative balances."""

    return PriorityQueue(entries, key=_creditor_key, name="creditor queue")
