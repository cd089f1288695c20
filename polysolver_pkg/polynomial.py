"""Sparse single-variable polynomials over floats.

A polynomial is a mapping from non-negative integer exponent to float
coefficient::

    3x^2 - 1  ->  {2: 3.0, 0: -1.0}

The empty mapping is the zero polynomial. Arithmetic never mutates its
operands; ``clean()`` returns a copy with every coefficient smaller than
``config.EPSILON`` in magnitude removed.
"""

from __future__ import annotations

from typing import Iterator, Mapping

import sympy as sp

from . import config


class Polynomial:
    """Canonical form every AST node evaluates to."""

    __slots__ = ("_terms",)

    def __init__(self, terms: Mapping[int, float] | None = None):
        self._terms: dict[int, float] = {}
        if terms:
            for exponent, coeff in terms.items():
                if exponent < 0:
                    raise ValueError(f"Negative exponent {exponent} in polynomial")
                self._terms[int(exponent)] = float(coeff)

    @classmethod
    def constant(cls, value: float) -> Polynomial:
        return cls({0: value})

    @classmethod
    def variable(cls) -> Polynomial:
        return cls({1: 1.0})

    @classmethod
    def one(cls) -> Polynomial:
        return cls({0: 1.0})

    @property
    def terms(self) -> dict[int, float]:
        """Copy of the exponent -> coefficient mapping."""
        return dict(self._terms)

    def coefficient(self, exponent: int) -> float:
        """Coefficient at *exponent*, 0.0 when absent."""
        return self._terms.get(exponent, 0.0)

    def items(self) -> Iterator[tuple[int, float]]:
        """Iterate ``(exponent, coefficient)`` pairs in ascending exponent order."""
        for exponent in sorted(self._terms):
            yield exponent, self._terms[exponent]

    def degree(self) -> int | None:
        """Highest stored exponent, or None for the zero polynomial."""
        if not self._terms:
            return None
        return max(self._terms)

    def leading_coefficient(self) -> float:
        degree = self.degree()
        return 0.0 if degree is None else self._terms[degree]

    def is_zero(self) -> bool:
        return not self._terms

    def is_constant(self) -> bool:
        """True when the only stored term is the exponent-0 one.

        The zero polynomial holds no term at all and is not a constant here;
        an unpruned ``{0: 0.0}`` is.
        """
        return len(self._terms) == 1 and 0 in self._terms

    def clean(self) -> Polynomial:
        """Return a copy without coefficients below the configured epsilon."""
        epsilon = config.EPSILON
        return Polynomial(
            {exp: coeff for exp, coeff in self._terms.items() if abs(coeff) >= epsilon}
        )

    def __add__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        out = dict(self._terms)
        for exponent, coeff in other._terms.items():
            out[exponent] = out.get(exponent, 0.0) + coeff
        return Polynomial(out)

    def __sub__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        out = dict(self._terms)
        for exponent, coeff in other._terms.items():
            out[exponent] = out.get(exponent, 0.0) - coeff
        return Polynomial(out)

    def __neg__(self) -> Polynomial:
        return Polynomial({exp: -coeff for exp, coeff in self._terms.items()})

    def __mul__(self, other: Polynomial) -> Polynomial:
        if not isinstance(other, Polynomial):
            return NotImplemented
        out: dict[int, float] = {}
        for exp_a, coeff_a in self._terms.items():
            for exp_b, coeff_b in other._terms.items():
                exponent = exp_a + exp_b
                out[exponent] = out.get(exponent, 0.0) + coeff_a * coeff_b
        return Polynomial(out)

    def power(self, exponent: int) -> Polynomial:
        """Repeated self-multiplication starting from the constant 1.

        A non-positive *exponent* yields the constant 1.
        """
        result = Polynomial.one()
        for _ in range(exponent):
            result = result * self
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(frozenset(self._terms.items()))

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        inner = ", ".join(f"{exp}: {coeff!r}" for exp, coeff in self.items())
        return f"Polynomial({{{inner}}})"

    def to_sympy(self, symbol: sp.Symbol | None = None) -> sp.Expr:
        """Build the equivalent SymPy expression in *symbol* (default ``x``)."""
        x = symbol if symbol is not None else sp.Symbol(config.VARIABLE_NAME)
        expr = sp.Integer(0)
        for exponent, coeff in self.items():
            expr += _to_sympy_number(coeff) * x**exponent
        return expr


def _to_sympy_number(value: float) -> sp.Expr:
    # Whole floats become Integers so printed forms read "2*x", not "2.0*x"
    if value.is_integer():
        return sp.Integer(int(value))
    return sp.Float(value)
