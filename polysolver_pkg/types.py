"""Type definitions, result dataclasses and exceptions shared across the package."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenType(Enum):
    """Kinds of lexical tokens."""

    NUMBER = "number"
    VARIABLE = "variable"
    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"
    EQUALS = "="
    LPAREN = "("
    RPAREN = ")"
    END_OF_INPUT = "end of input"


@dataclass(frozen=True)
class Token:
    """A single lexical token. ``position`` is the offset of its first character."""

    kind: TokenType
    text: str
    position: int = 0

    def describe(self) -> str:
        """Human-readable description used in syntax error messages."""
        if self.kind is TokenType.END_OF_INPUT:
            return "end of input"
        return f"'{self.text}'"


@dataclass
class SolveResult:
    """Result of solving an equation."""

    ok: bool
    result: str | None = None
    ast: dict[str, Any] | None = None
    kind: str | None = None  # "identity", "linear", "quadratic", "complex", "constant", "higher_degree"
    degree: int | None = None
    roots: list[float] | None = None
    normalized: str | None = None
    error: str | None = None
    error_code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.error is not None:
            result_dict["error"] = self.error
            if self.error_code is not None:
                result_dict["error_code"] = self.error_code
            return result_dict
        result_dict["type"] = self.kind
        result_dict["result"] = self.result
        if self.degree is not None:
            result_dict["degree"] = self.degree
        if self.roots is not None:
            result_dict["roots"] = self.roots
        if self.normalized is not None:
            result_dict["normalized"] = self.normalized
        if self.ast is not None:
            result_dict["ast"] = self.ast
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"SolveResult(ok=False, error={self.error!r}, error_code={self.error_code!r})"
        parts = [f"ok={self.ok}", f"kind={self.kind!r}", f"result={self.result!r}"]
        if self.roots:
            parts.append(f"roots={self.roots!r}")
        return f"SolveResult({', '.join(parts)})"


class PolySolverError(Exception):
    """Base class for every error reported through the ``error`` payload."""

    default_code = "ERROR"

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(PolySolverError):
    """Raised when raw input is rejected before tokenizing."""

    default_code = "VALIDATION_ERROR"


class LexError(PolySolverError):
    """Raised when the input contains a character no token starts with."""

    default_code = "UNKNOWN_CHARACTER"


class ParseError(PolySolverError):
    """Raised when the token sequence does not match the grammar."""

    default_code = "SYNTAX_ERROR"


class SemanticError(PolySolverError):
    """Raised when a well-formed tree cannot be reduced to a polynomial."""

    default_code = "SEMANTIC_ERROR"
