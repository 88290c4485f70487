"""Word table kept as a list sorted by key, searched by bisection."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace
from typing import Optional

from labkit.words import WordStats


class SortedVector:
    """Ordered list of ``(key, stats)`` pairs."""

    def __init__(self) -> None:
        self._entries: list[tuple[str, WordStats]] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[str, WordStats]]:
        return iter(self._entries)

    def _search(self, key: str) -> tuple[int, bool]:
        low, high = 0, len(self._entries) - 1
        while low <= high:
            middle = (low + high) // 2
            current = self._entries[middle][0]
            if current == key:
                return middle, True
            if current < key:
                low = middle + 1
            else:
                high = middle - 1
        return low, False

    def insert(self, key: str, stats: WordStats) -> int:
        """Insert a copy of ``stats`` under ``key`` and return its position.

        An equal key already present does not prevent the insertion; the new
        entry goes where the search met the existing one.
        """
        index, _ = self._search(key)
        self._entries.insert(index, (key, replace(stats)))
        return index

    def find(self, key: str) -> Optional[WordStats]:
        """Return the stored stats of ``key`` (updatable in place) or ``None``."""
        index, found = self._search(key)
        return self._entries[index][1] if found else None

    def add(self, key: str, stats: WordStats) -> None:
        """Insert ``key`` or count one more occurrence of it."""
        existing = self.find(key)
        if existing is None:
            self.insert(key, stats)
        else:
            existing.frequency += 1

    def items(self) -> list[tuple[str, WordStats]]:
        return list(self._entries)