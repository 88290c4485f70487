"""Fixed-point iteration for the roots of e^x = 2x^2."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Optional

TOLERANCE = 1e-6
MAX_ITERATIONS = 200


def _newton_map(t: float) -> float:
    return t - (math.exp(t) - 2 * t * t) / (math.exp(t) - 4 * t)


def _sqrt_map(t: float) -> float:
    return math.sqrt(math.exp(t) / 2)


def _log_map(t: float) -> float:
    return math.log(2 * t * t)


def _choose_map(x: float) -> Callable[[float], float]:
    if x < -0.2:
        return _newton_map
    if x < 2:
        return _sqrt_map
    return _log_map


def fixed_point(x: float) -> float:
    """Iterate from ``x`` with the map suited to its region and return the result."""
    step = _choose_map(x)
    y = step(x)
    for iteration in range(MAX_ITERATIONS):
        if abs(y - x) <= TOLERANCE:
            break
        if iteration:
            x = y
        y = step(x)
    return y


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    """Whitespace-separated tokens of ``lines``, in order."""
    for line in lines:
        yield from line.split()


def main(argv: Optional[list[str]] = None) -> int:
    """Read a count and that many starting points from stdin; print each result."""
    argparse.ArgumentParser(
        description="Read N and N starting points from standard input."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        count = int(next(tokens))
        for _ in range(count):
            start = float(next(tokens))
            print(f"{fixed_point(start):.6f}")
    except StopIteration:
        return 0
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1
    return 0