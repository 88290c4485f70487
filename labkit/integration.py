"""Lagrange interpolation, composite quadrature and Monte Carlo integration."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Callable, Sequence
from typing import Optional

from labkit.fixedpoint import _tokens

TABLE_X = (0.0, 5.0, 10.0, 15.0, 20.0, 25.0, 30.0)
TABLE_Y = (0.0, 1.5297, 9.5120, 8.7025, 2.8087, 1.0881, 0.3537)


def lagrange(x: float, xs: Sequence[float], ys: Sequence[float]) -> float:
    """Evaluate at ``x`` the Lagrange polynomial through the points ``(xs, ys)``."""
    result = 0.0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        term = yi
        for j, xj in enumerate(xs):
            if j != i:
                term *= (x - xj) / (xi - xj)
        result += term
    return result


def table_function(x: float) -> float:
    """Interpolated F(x)cos(theta(x)) from the tabulated data."""
    return lagrange(x, TABLE_X, TABLE_Y)


def _check_intervals(n: int) -> None:
    if n < 1:
        raise ValueError("number of subintervals must be positive")


def trapezoid(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    """Composite trapezoidal rule over ``n`` subintervals."""
    _check_intervals(n)
    h = (b - a) / n
    total = (f(a) + f(b)) / 2.0
    total += sum(f(a + i * h) for i in range(1, n))
    return h * total


def simpson(f: Callable[[float], float], a: float, b: float, n: int) -> float:
    """Composite Simpson rule over ``n`` subintervals."""
    _check_intervals(n)
    h = (b - a) / n
    total = f(a) + f(b)
    total += sum((2.0 if i % 2 == 0 else 4.0) * f(a + i * h) for i in range(1, n))
    return (h / 3.0) * total


def monte_carlo_1d(
    n: int, g: Callable[[float], float], rng: Optional[random.Random] = None
) -> float:
    """Mean of ``g`` at ``n`` uniform samples of [0, 1)."""
    rng = rng or random.Random()
    return sum(g(rng.random()) / n for _ in range(n))


def monte_carlo_2d(
    n: int, g: Callable[[float, float], float], rng: Optional[random.Random] = None
) -> float:
    """Integral of ``g`` over the square [-1, 1]^2 from ``n`` uniform samples."""
    rng = rng or random.Random()
    total = 0.0
    for _ in range(n):
        x = rng.random() * 2 - 1
        y = rng.random() * 2 - 1
        total += 4 * g(x, y) / n
    return total


def _cubic(x: float) -> float:
    return 4 * (4 * x + 3) ** 3


def _exponential(u: float) -> float:
    return math.exp(math.log(1 - u)) / (1 - u)


def _unit_disc(x: float, y: float) -> float:
    """Indicator of the closed unit disc."""
    return float(math.hypot(x, y) <= 1.0)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the quadrature part and the Monte Carlo part, reading sample counts."""
    argparse.ArgumentParser(
        description="Numerical integration exercises; sample counts read from stdin."
    ).parse_args(argv)
    tokens = _tokens(sys.stdin)
    out = sys.stdout
    try:
        out.write("\n\n\n -------------------- PARTE 1 -------------------- \n\n\n")
        out.write("Entre com o valor de n (número de amostras): ")
        out.flush()
        intervals = int(next(tokens))
        trap = trapezoid(table_function, 0.0, 30.0, intervals)
        simp = simpson(table_function, 0.0, 30.0, intervals)
        out.write(f"Resultado usando a regra do trapézio composto: {trap:.6f}\n")
        out.write(f"Resultado usando a regra de Simpson composto: {simp:.6f}\n")

        out.write("\n\n\n -------------------- PARTE 2 --------------------\n\n\n")
        out.write("Entre com o valor de n (número de amostras): ")
        out.flush()
        samples = int(next(tokens))
        rng = random.Random()
        one_dimensional = (
            (math.sin, "Integral de seno(x) no intervalo [0, 1]"),
            (_cubic, "Integral de x^3 no intervalo [3, 7]"),
            (_exponential, "Integral de e^-x no intervalo [0, inf]"),
        )
        for function, label in one_dimensional:
            out.write(f"{label}: {monte_carlo_1d(samples, function, rng):.6f}\n")
        value = monte_carlo_2d(samples, _unit_disc, rng)
        out.write(f"Área da circunferência no primeiro quadrante: {value:.6f}\n\n")
        out.write("\n -------------------------------------------------\n\n\n")
    except StopIteration:
        print("missing input", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1
    return 0