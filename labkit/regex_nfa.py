"""Epsilon-transition graph of a regular expression and a matcher over it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Optional


class RegexGraph:
    """Vertices are pattern positions plus one final state; edges are epsilon moves."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.vertices = len(pattern) + 1
        self.adjacency: list[list[int]] = [[] for _ in range(self.vertices)]
        self.sets: list[str] = []

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self.adjacency[u].append(v)

    def reachable(self, start: int) -> set[int]:
        """Vertices reachable from ``start`` through epsilon edges, itself included."""
        self._check(start)
        seen = {start}
        stack = [start]
        while stack:
            vertex = stack.pop()
            for neighbour in self.adjacency[vertex]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
        return seen


def build_graph(pattern: str) -> RegexGraph:
    """Build the epsilon graph of ``pattern``.

    Uppercase letters take no part in the construction, so a star after one
    adds no edges. A ``[...]`` set becomes a chain of epsilon edges through
    its positions; a ``[^...]`` complement adds no edges at all.
    """
    graph = RegexGraph(pattern)
    ops: list[int] = []
    length = len(pattern)
    i = 0
    while i < length:
        lp = i
        char = pattern[i]
        if char == "[":
            complement = i + 1 < length and pattern[i + 1] == "^"
            close = pattern.find("]", i + 2 if complement else i + 1)
            if close == -1:
                raise ValueError("unterminated '['")
            if complement:
                graph.sets.append("&" + pattern[i + 2:close])
            else:
                for position in range(i, close):
                    graph.add_edge(position, position + 1)
                graph.add_edge(close, close + 1)
                graph.sets.append(pattern[i:close])
            i = close + 1
            continue
        if char in "(|":
            ops.append(i)
        else:
            if "A" <= char <= "Z":
                i += 1
                continue
            if char == ")":
                if not ops:
                    raise ValueError("unbalanced ')'")
                op = ops.pop()
                if pattern[op] == "|":
                    if not ops:
                        raise ValueError("'|' outside parentheses")
                    lp = ops.pop()
                    graph.add_edge(lp, op + 1)
                    graph.add_edge(op, i)
                else:
                    lp = op
        if i < length - 1 and pattern[i + 1] == "*":
            graph.add_edge(lp, i + 1)
            graph.add_edge(i + 1, lp)
        if char in "(*)":
            graph.add_edge(i, i + 1)
        i += 1
    return graph


def recognizes(graph: RegexGraph, text: str) -> bool:
    """Run ``text`` through the graph.

    States once reached stay active for the rest of the run. The text is
    rejected as soon as a character has no transition from the active
    states; otherwise it is accepted if the final state was ever reached.
    """
    pattern = graph.pattern
    active = graph.reachable(0)
    for char in text:
        following = {
            state + 1 for state in active if state < len(pattern) and pattern[state] == char
        }
        if not following:
            return False
        for state in following:
            active |= graph.reachable(state)
    return graph.vertices - 1 in active


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def main(argv: Optional[list[str]] = None) -> int:
    """Read a pattern, a count and that many words; print S or N for each."""
    argparse.ArgumentParser(
        description="Match words against a regular expression read from stdin."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    out = sys.stdout
    try:
        out.write("Digite uma expressão regular: ")
        graph = build_graph(next(tokens))
        out.write("Digite o número de testes: ")
        count = int(next(tokens))
        for _ in range(count):
            out.write("Digite uma palavra para verificar: ")
            word = next(tokens)
            out.write("S\n" if recognizes(graph, word) else "N\n")
    except StopIteration:
        print("missing input", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1
    return 0