"""Rebuild a sequence from overlapping fragments through a graph of overlaps."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Optional, Union

_HEADER = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)")


def overlaps(first: str, second: str, k: int) -> bool:
    """True when the last ``k`` characters of ``first`` open ``second``."""
    if k < 0:
        raise ValueError("overlap length must not be negative")
    if len(first) < k or len(second) < k:
        return False
    return first[len(first) - k:] == second[:k]


def merge_overlap(first: str, second: str) -> str:
    """Join two strings, sharing the longest suffix of ``first`` that prefixes ``second``."""
    common = 0
    for size in range(1, min(len(first), len(second)) + 1):
        if first[len(first) - size:] == second[:size]:
            common = size
    return first + second[common:]


def read_fragments(path: Union[str, Path]) -> tuple[list[str], int]:
    """Read a fragment file: a count and an overlap length, then the fragments.

    Lines are read right after the two numbers, so the rest of the header
    line counts as the first of the ``count`` fragments.
    """
    text = Path(path).read_text(encoding="utf-8")
    header = _HEADER.match(text)
    if header is None:
        raise ValueError("missing fragment count and overlap length")
    count, k = int(header.group(1)), int(header.group(2))
    lines = text[header.end():].split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    fragments = [line.rstrip("\r") for line in lines[: max(count, 0)]]
    return fragments, k


class FragmentGraph:
    """Directed graph with an arc from each fragment to every fragment it overlaps.

    Overlaps are looked for at length ``k`` and at every greater length
    while some pair of fragments still overlaps; each length that matches
    adds its own arc.
    """

    def __init__(self, fragments: Iterable[str] = (), k: int = 1) -> None:
        if k < 0:
            raise ValueError("overlap length must not be negative")
        self.fragments = list(fragments)
        self.k = k
        self.adjacency: dict[str, list[str]] = {}
        self._build()

    def _build(self) -> None:
        length = self.k
        while True:
            added = 0
            for i, u in enumerate(self.fragments):
                for j, v in enumerate(self.fragments):
                    if i != j and overlaps(u, v, length):
                        self.add_arc(u, v)
                        added += 1
            if not added:
                break
            length += 1

    def add_arc(self, u: str, v: str) -> None:
        self.adjacency.setdefault(u, []).append(v)

    def has_path(self, u: str, v: str) -> bool:
        """True when ``v`` can be reached from ``u`` (always for ``u == v``)."""
        seen = {u}
        stack = [u]
        while stack:
            vertex = stack.pop()
            if vertex == v:
                return True
            for neighbour in self.adjacency.get(vertex, ()):
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
        return False

    def remove_cycles(self) -> None:
        """Drop every arc ``u -> v`` whose head leads back to its tail."""
        for u in list(self.adjacency):
            for v in list(dict.fromkeys(self.adjacency[u])):
                if self.has_path(v, u):
                    self.adjacency[u] = [w for w in self.adjacency[u] if w != v]

    def longest_path(self) -> str:
        """Remove cycles, then return the longest string spelled by any path.

        Only fragments that took part in some arc are used as starting points.
        """
        self.remove_cycles()
        vertices: dict[str, None] = {}
        for u, neighbours in self.adjacency.items():
            vertices[u] = None
            vertices.update(dict.fromkeys(neighbours))
        best = ""
        for start in vertices:
            stack = [(start, start)]
            while stack:
                vertex, path = stack.pop()
                if len(path) > len(best):
                    best = path
                for neighbour in reversed(self.adjacency.get(vertex, [])):
                    stack.append((neighbour, merge_overlap(path, neighbour)))
        return best


def main(argv: Optional[list[str]] = None) -> int:
    """Read a fragment file and print the longest sequence assembled from it."""
    parser = argparse.ArgumentParser(description="Assemble DNA fragments.")
    parser.add_argument("file", nargs="?", help="fragment file; asked on stdin if omitted")
    args = parser.parse_args(argv)
    path = args.file
    if path is None:
        sys.stdout.write("Digite o nome do arquivo com a sequencia de DNA: ")
        sys.stdout.flush()
        tokens = sys.stdin.read().split()
        if not tokens:
            print("missing file name", file=sys.stderr)
            return 1
        path = tokens[0]
    try:
        fragments, k = read_fragments(path)
        graph = FragmentGraph(fragments, k)
    except OSError:
        print("Erro ao abrir o arquivo.")
        return 1
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1
    print(f"Caminho máximo encontrado: {graph.longest_path()}")
    return 0