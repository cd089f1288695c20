"""Expression tree nodes and their reduction to canonical polynomials.

The tree is a closed union of three node kinds:

- ``Number``: a numeric literal
- ``Variable``: the unknown, always read as ``x^1``
- ``BinaryOperation``: an operator applied to two owned subtrees

Nodes are immutable; the parser builds them once and nothing rewires them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from . import config
from .logging_config import get_logger
from .polynomial import Polynomial
from .types import SemanticError

logger = get_logger("ast_nodes")


class Operator(Enum):
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number:
    value: float

    def evaluate(self) -> Polynomial:
        return Polynomial.constant(self.value)


@dataclass(frozen=True)
class Variable:
    # Source letter, kept for display only; every letter means the same unknown
    name: str = "x"

    def evaluate(self) -> Polynomial:
        return Polynomial.variable()


@dataclass(frozen=True)
class BinaryOperation:
    operator: Operator
    left: Node
    right: Node

    def evaluate(self) -> Polynomial:
        """Evaluate both children, combine them, and prune negligible terms."""
        return evaluate_tree(self)


Node = Union[Number, Variable, BinaryOperation]


def combine(operator: Operator, left: Polynomial, right: Polynomial) -> Polynomial:
    """Apply one binary operator to already evaluated operands."""
    if operator is Operator.PLUS:
        result = left + right
    elif operator is Operator.MINUS:
        result = left - right
    elif operator is Operator.MULTIPLY:
        result = left * right
    elif operator is Operator.POWER:
        result = raise_to_power(left, right)
    elif operator is Operator.DIVIDE:
        result = divide(left, right)
    else:
        raise TypeError(f"Unhandled operator: {operator!r}")
    return result.clean()


def evaluate_tree(root: Node) -> Polynomial:
    """Reduce *root* to a polynomial, visiting nodes in post-order.

    The walk keeps its own stack, so a long flat chain like ``x+x+...+x``
    (a deep left spine) does not consume interpreter frames. Left operands
    are evaluated before right ones.
    """
    values: list[Polynomial] = []
    pending: list[tuple[Node, bool]] = [(root, False)]
    while pending:
        node, children_done = pending.pop()
        if not isinstance(node, BinaryOperation):
            values.append(node.evaluate())
        elif children_done:
            right = values.pop()
            left = values.pop()
            values.append(combine(node.operator, left, right))
        else:
            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False))
    return values.pop()


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = math.floor(abs(value) + 0.5)
    return int(magnitude) if value >= 0 else -int(magnitude)


def raise_to_power(base: Polynomial, exponent: Polynomial) -> Polynomial:
    """Raise *base* to a constant *exponent* polynomial.

    The exponent is rounded to the nearest integer. Zero and negative
    exponents give the constant 1.

    Raises:
        SemanticError: if the exponent is not a finite constant, or exceeds
            ``config.MAX_POWER_EXPONENT`` when that limit is enabled
    """
    if not exponent.is_constant():
        raise SemanticError("Exponent must be a constant number", "NON_CONSTANT_EXPONENT")
    raw = exponent.coefficient(0)
    if not math.isfinite(raw):
        raise SemanticError(f"Exponent {raw} is not a finite number", "INVALID_EXPONENT")

    count = round_half_away(raw)
    limit = config.MAX_POWER_EXPONENT
    if limit > 0 and count > limit:
        raise SemanticError(
            f"Exponent {count} exceeds the configured limit of {limit}",
            "EXPONENT_TOO_LARGE",
        )
    if count < 0:
        logger.warning("Negative exponent %d is not supported; power reduces to 1", count)
    return base.power(count)


def divide(numerator: Polynomial, denominator: Polynomial) -> Polynomial:
    """Apply the configured division policy.

    In ``"zero"`` mode the quotient is the zero polynomial, whatever the
    operands; otherwise division is rejected.
    """
    if config.DIVISION_MODE == "zero":
        logger.warning(
            "Division is not evaluated; %r / %r reduces to 0", numerator, denominator
        )
        return Polynomial()
    raise SemanticError("Division of polynomials is unsupported", "UNSUPPORTED_DIVISION")
