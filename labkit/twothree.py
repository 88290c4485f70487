"""2-3 search tree of word statistics."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Optional

from labkit.words import WordStats


@dataclass(eq=False)
class _Node:
    keys: list[str]
    stats: list[WordStats]
    children: list[_Node] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_three(self) -> bool:
        return len(self.keys) == 2


_Split = tuple[str, WordStats, _Node]


def _distinct(stats: WordStats) -> int:
    return stats.vowels - stats.repeated_vowels


class TwoThreeTree:
    """Word table backed by a balanced 2-3 tree."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def _find(self, key: str) -> Optional[WordStats]:
        node = self._root
        while node is not None:
            pos = bisect_left(node.keys, key)
            if pos < len(node.keys) and node.keys[pos] == key:
                return node.stats[pos]
            if node.is_leaf:
                return None
            node = node.children[pos]
        return None

    def _insert(self, node: _Node, key: str, stats: WordStats) -> Optional[_Split]:
        pos = bisect_left(node.keys, key)
        if node.is_leaf:
            node.keys.insert(pos, key)
            node.stats.insert(pos, stats)
        else:
            split = self._insert(node.children[pos], key, stats)
            if split is None:
                return None
            middle_key, middle_stats, right = split
            node.keys.insert(pos, middle_key)
            node.stats.insert(pos, middle_stats)
            node.children.insert(pos + 1, right)
        if len(node.keys) <= 2:
            return None
        right = _Node(node.keys[2:], node.stats[2:], node.children[2:])
        promoted = (node.keys[1], node.stats[1], right)
        node.keys = node.keys[:1]
        node.stats = node.stats[:1]
        node.children = node.children[:2]
        return promoted

    def _inorder(self, node: Optional[_Node]) -> Iterator[tuple[str, WordStats]]:
        if node is None:
            return
        for index, (key, stats) in enumerate(zip(node.keys, node.stats)):
            if not node.is_leaf:
                yield from self._inorder(node.children[index])
            yield key, stats
        if not node.is_leaf:
            yield from self._inorder(node.children[-1])

    def _preorder(self, node: Optional[_Node]) -> Iterator[tuple[str, WordStats]]:
        if node is None:
            return
        yield from zip(node.keys, node.stats)
        for child in node.children:
            yield from self._preorder(child)

    def add(self, key: str, stats: WordStats) -> None:
        """Insert ``key`` with a copy of ``stats``, or count one more occurrence.

        Empty keys are ignored.
        """
        if not key:
            return
        existing = self._find(key)
        if existing is not None:
            existing.frequency += 1
            return
        self._size += 1
        copy = replace(stats)
        if self._root is None:
            self._root = _Node([key], [copy])
            return
        split = self._insert(self._root, key, copy)
        if split is not None:
            middle_key, middle_stats, right = split
            self._root = _Node([middle_key], [middle_stats], [self._root, right])

    def get(self, key: str) -> WordStats:
        """Return a copy of the stats of ``key``; empty stats if it is absent."""
        stats = self._find(key)
        return replace(stats) if stats is not None else WordStats()

    def items(self) -> list[tuple[str, WordStats]]:
        """Return ``(key, stats)`` pairs in key order."""
        return [(key, replace(stats)) for key, stats in self._inorder(self._root)]

    def max_frequency(self) -> int:
        return max((stats.frequency for _, stats in self._inorder(self._root)), default=0)

    def with_frequency(self, frequency: int) -> list[str]:
        return [key for key, stats in self._inorder(self._root) if stats.frequency == frequency]

    def _longest(self, node: Optional[_Node], repeats: Optional[int]) -> int:
        if node is None:
            return 0
        if repeats is not None and node.is_leaf and node.stats[0].repeats != repeats:
            return 0
        own = max(
            (s.length for s in node.stats if repeats is None or s.repeats == repeats),
            default=0,
        )
        return max([own, *(self._longest(child, repeats) for child in node.children)])

    def longest_length(self, repeats: Optional[int] = None) -> int:
        """Longest word length, among words with ``repeats`` repeats if given.

        A leaf whose smaller key does not have ``repeats`` repeats is skipped
        as a whole.
        """
        return self._longest(self._root, repeats)

    def with_length(self, length: int) -> list[str]:
        """Keys whose length equals ``length``, in key order."""
        return [key for key, stats in self._inorder(self._root) if stats.length == length]

    def with_length_and_repeats(self, length: int, repeats: int) -> list[str]:
        return [
            key
            for key, stats in self._inorder(self._root)
            if stats.length == length and stats.repeats == repeats
        ]

    def _max_distinct(self, node: Optional[_Node]) -> int:
        if node is None:
            return 0
        left = node.children[0] if node.children else None
        right = node.children[-1] if node.children else None
        best = max(
            self._max_distinct(left),
            self._max_distinct(right),
            max(0, _distinct(node.stats[0])),
        )
        if left is not None:
            best = max(best, _distinct(left.stats[-1]))
            if node.is_three:
                best = max(best, _distinct(node.children[1].stats[-1]))
        return best

    def max_distinct_vowels(self) -> int:
        """Largest distinct-vowel count seen by the tree's sampling walk.

        The walk looks at the smaller key of every node on outer branches and
        at the largest key of each left and middle child; never below zero.
        """
        return self._max_distinct(self._root)

    def shortest_with_distinct_vowels(self, distinct: int) -> Optional[int]:
        """Shortest key length among words with ``distinct`` distinct vowels."""
        return min(
            (
                len(key)
                for key, stats in self._inorder(self._root)
                if _distinct(stats) == distinct
            ),
            default=None,
        )

    def with_distinct_vowels(self, length: int, distinct: int) -> list[str]:
        """Keys of the given length and distinct-vowel count, in pre-order."""
        return [
            key
            for key, stats in self._preorder(self._root)
            if _distinct(stats) == distinct and stats.length == length
        ]