"""
In‑memory storage for memos.

``MemoRepository`` describes the operations the service layer relies
on; ``InMemoryMemoRepository`` implements them with a plain list and
an auto‑incrementing counter.  Lookups are linear scans, which is
fine for the handful of notes this service is meant to hold.

The store may be shared by several threads (a threaded server, or
scripts using it directly), so the list is guarded by a single lock
and identifiers are drawn from a counter with its own lock.
Identifiers start at 1 and are never reused, even after
the memo holding them has been deleted.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import List, Optional

from memo_api.app.models import Memo


class MemoRepository(ABC):
    """Abstract store of memo records."""

    @abstractmethod
    def add(self, content: str) -> Memo:
        """Create a memo with the next identifier and store it."""

    @abstractmethod
    def list(self) -> List[Memo]:
        """Return all memos in insertion order."""

    @abstractmethod
    def find_by_id(self, memo_id: int) -> Optional[Memo]:
        """Return the memo with ``memo_id`` or ``None``."""

    @abstractmethod
    def update_content(self, memo_id: int, content: str) -> Optional[Memo]:
        """Replace the content of an existing memo.

        Returns the updated memo or ``None`` if no memo has that id.
        """

    @abstractmethod
    def delete_by_id(self, memo_id: int) -> bool:
        """Remove the memo with ``memo_id``; return whether one was removed."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored memos."""


class _IdCounter:
    """Monotonic integer sequence safe to use from several threads."""

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value


class InMemoryMemoRepository(MemoRepository):
    """List‑backed memo store."""

    def __init__(self) -> None:
        self._memos: List[Memo] = []
        self._lock = threading.Lock()
        self._ids = _IdCounter(start=1)

    def add(self, content: str) -> Memo:
        with self._lock:
            # Allocated under the list lock so insertion order matches id order.
            memo = Memo(id=self._ids.next(), content=content)
            self._memos.append(memo)
        return memo

    def list(self) -> List[Memo]:
        # Callers get a copy of the list; the records themselves are shared.
        with self._lock:
            return list(self._memos)

    def find_by_id(self, memo_id: int) -> Optional[Memo]:
        with self._lock:
            return self._find(memo_id)

    def update_content(self, memo_id: int, content: str) -> Optional[Memo]:
        with self._lock:
            memo = self._find(memo_id)
            if memo is None:
                return None
            memo.content = content
            return memo

    def delete_by_id(self, memo_id: int) -> bool:
        with self._lock:
            for index, memo in enumerate(self._memos):
                if memo.id == memo_id:
                    del self._memos[index]
                    return True
            return False

    def count(self) -> int:
        with self._lock:
            return len(self._memos)

    def _find(self, memo_id: int) -> Optional[Memo]:
        # Must be called with self._lock held.
        for memo in self._memos:
            if memo.id == memo_id:
                return memo
        return None
