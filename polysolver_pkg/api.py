"""Public API for Polysolver - pure functions, no exception escapes."""

from __future__ import annotations

from . import config
from .formatting import equation_tree, error_payload, format_polynomial, success_payload
from .logging_config import get_logger
from .parser import parse_equation
from .solver import solve_polynomials
from .types import PolySolverError, SolveResult, ValidationError

logger = get_logger("api")


def validate_input(equation: str) -> str:
    """Check raw input limits before tokenizing.

    Raises:
        ValidationError: for empty or overlong input
    """
    if not equation or not equation.strip():
        raise ValidationError("Empty input. Please enter an equation such as 2x+4=0", "EMPTY_INPUT")
    if len(equation) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (>{config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    return equation


def solve_equation(equation: str) -> SolveResult:
    """Solve a single-variable polynomial equation.

    Args:
        equation: Equation string (e.g., "2x+4=0", "x^2-5x+6=0")

    Returns:
        SolveResult; on failure ``ok`` is False and ``error``/``error_code`` are set

    Example:
        >>> from polysolver_pkg.api import solve_equation
        >>> result = solve_equation("x^2 - 5x + 6 = 0")
        >>> print(result.result)
        x1 = 3.000000, x2 = 2.000000
        >>> result.roots
        [3.0, 2.0]
    """
    try:
        parsed = parse_equation(validate_input(equation))
        solution = solve_polynomials(parsed.left.evaluate(), parsed.right.evaluate())
        return SolveResult(
            ok=True,
            result=solution.text,
            ast=equation_tree(parsed.left, parsed.right),
            kind=solution.kind,
            degree=solution.degree,
            roots=list(solution.roots),
            normalized=f"{format_polynomial(solution.difference)} = 0",
        )
    except PolySolverError as e:
        logger.info("Rejected equation %r: %s", equation, e)
        return SolveResult(ok=False, error=str(e), error_code=e.code)
    except RecursionError:
        logger.info("Rejected equation %r: recursion limit reached", equation)
        return SolveResult(ok=False, error="Expression nested too deeply", error_code="TOO_DEEP")
    except Exception as e:
        logger.error("Unexpected error solving %r", equation, exc_info=True)
        return SolveResult(ok=False, error=f"Internal error: {e}", error_code="INTERNAL_ERROR")


def solve(equation: str) -> str:
    """Solve *equation* and return the JSON payload.

    Success: ``{"ast": {...}, "result": "..."}``. Failure: ``{"error": "..."}``.

    Example:
        >>> from polysolver_pkg.api import solve
        >>> solve("0=0")
        '{"ast": {"name": "=", "children": [{"name": "0"}, {"name": "0"}]}, "result": "0 = 0. Infinite solutions."}'
    """
    result = solve_equation(equation)
    if not result.ok:
        return error_payload(result.error or "Unknown error")
    try:
        return success_payload(result.ast, result.result)
    except RecursionError:
        # The json encoder nests one call per tree level
        logger.info("Tree for %r is too deep to serialize", equation)
        return error_payload("Expression tree too deep to serialize")


def validate_equation(equation: str) -> tuple[bool, str | None]:
    """Check that *equation* tokenizes and parses, without evaluating it.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        parse_equation(validate_input(equation))
        return True, None
    except PolySolverError as e:
        return False, str(e)
    except RecursionError:
        return False, "Expression nested too deeply"
