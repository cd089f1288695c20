"""Degree-based solving of a polynomial equation.

Both sides are moved to one side (``left - right``), pruned, and the
resulting polynomial's degree selects the procedure:

- zero polynomial: identity, every x is a solution
- degree 1: the single linear root
- degree 2: the quadratic formula, real roots only
- any other degree (a non-zero constant included): reported, not solved
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .formatting import format_fixed
from .logging_config import get_logger
from .polynomial import Polynomial

logger = get_logger("solver")


@dataclass(frozen=True)
class Solution:
    """Outcome of solving one equation."""

    kind: str  # "identity", "linear", "quadratic", "complex", "constant", "higher_degree"
    text: str
    difference: Polynomial
    degree: int | None = None
    roots: tuple[float, ...] = field(default_factory=tuple)


def solve_polynomials(left: Polynomial, right: Polynomial) -> Solution:
    """Solve ``left = right`` for the unknown."""
    difference = (left - right).clean()
    degree = difference.degree()
    logger.debug("Normalized difference %r has degree %s", difference, degree)

    if degree is None:
        return Solution("identity", "0 = 0. Infinite solutions.", difference)
    if degree == 1:
        return _solve_linear(difference)
    if degree == 2:
        return _solve_quadratic(difference)
    return Solution(
        "constant" if degree == 0 else "higher_degree",
        f"Equation degree is {degree}. Exact algebraic solution omitted. "
        "Numerical methods required.",
        difference,
        degree,
    )


def _solve_linear(poly: Polynomial) -> Solution:
    a = poly.coefficient(1)
    c = poly.coefficient(0)
    root = -c / a
    return Solution("linear", f"x = {format_fixed(root)}", poly, 1, (root,))


def _solve_quadratic(poly: Polynomial) -> Solution:
    a = poly.coefficient(2)
    b = poly.coefficient(1)
    c = poly.coefficient(0)
    discriminant = b * b - 4 * a * c
    logger.debug("Quadratic a=%r b=%r c=%r discriminant=%r", a, b, c, discriminant)

    if discriminant > 0:
        sqrt_d = math.sqrt(discriminant)
        x1 = (-b + sqrt_d) / (2 * a)
        x2 = (-b - sqrt_d) / (2 * a)
        text = f"x1 = {format_fixed(x1)}, x2 = {format_fixed(x2)}"
        return Solution("quadratic", text, poly, 2, (x1, x2))
    if discriminant == 0:
        root = -b / (2 * a)
        return Solution("quadratic", f"x = {format_fixed(root)}", poly, 2, (root,))
    return Solution("complex", "Complex Roots (no real solution).", poly, 2)
