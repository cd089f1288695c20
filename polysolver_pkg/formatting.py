"""Rendering of trees, numbers, polynomials and result payloads."""

from __future__ import annotations

import json
import re
from typing import Any

import sympy as sp

from . import config
from .ast_nodes import BinaryOperation, Node, Number, Variable
from .polynomial import Polynomial


# Tree literals always use printf "%f" precision; -p/--precision only affects roots
TREE_DECIMALS = 6


def format_fixed(value: float) -> str:
    """Render *value* with ``config.RESULT_DECIMALS`` decimals (printf ``%f``).

    Negative zero is rendered as positive zero.
    """
    return f"{value + 0.0:.{config.RESULT_DECIMALS}f}"


def format_tree_number(value: float) -> str:
    """Render a literal for the debug tree: fixed notation without trailing zeros.

    Example: 2.0 -> "2", 0.5 -> "0.5", 100.0 -> "100"
    """
    text = f"{value + 0.0:.{TREE_DECIMALS}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def node_tree(root: Node) -> dict[str, Any]:
    """Build the ``{"name": ..., "children": [...]}`` tree for *root*.

    Built bottom-up from an explicit stack, like :func:`evaluate_tree`.
    """
    built: list[dict[str, Any]] = []
    pending: list[tuple[Node, bool]] = [(root, False)]
    while pending:
        node, children_done = pending.pop()
        if isinstance(node, Number):
            built.append({"name": format_tree_number(node.value)})
        elif isinstance(node, Variable):
            built.append({"name": config.VARIABLE_NAME})
        elif not isinstance(node, BinaryOperation):
            raise TypeError(f"Unknown node type: {type(node).__name__}")
        elif children_done:
            right = built.pop()
            left = built.pop()
            built.append({"name": node.operator.symbol, "children": [left, right]})
        else:
            pending.append((node, True))
            pending.append((node.right, False))
            pending.append((node.left, False))
    return built.pop()


def equation_tree(left: Node, right: Node) -> dict[str, Any]:
    """Tree for a whole equation, rooted at ``=``."""
    return {"name": "=", "children": [node_tree(left), node_tree(right)]}


def success_payload(tree: dict[str, Any], result: str) -> str:
    return json.dumps({"ast": tree, "result": result}, ensure_ascii=False)


def error_payload(message: str) -> str:
    return json.dumps({"error": message}, ensure_ascii=False)


def render_tree(tree: dict[str, Any], indent: str = "") -> str:
    """Indented text drawing of a tree produced by :func:`node_tree`."""
    lines = []
    pending = [(tree, indent)]
    while pending:
        subtree, prefix = pending.pop()
        lines.append(f"{prefix}{subtree['name']}")
        for child in reversed(subtree.get("children", [])):
            pending.append((child, prefix + "  "))
    return "\n".join(lines)


_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def format_superscript(expr_str: str) -> str:
    """Replace Python power notation (**) with Unicode superscripts.

    Example: "x**2" -> "x²"
    """
    return re.sub(r"\*\*(\-?\d+)", lambda m: m.group(1).translate(_SUPERSCRIPTS), expr_str)


def format_polynomial(poly: Polynomial) -> str:
    """Readable form of a canonical polynomial, e.g. ``x² - 5*x + 6``."""
    return format_superscript(sp.sstr(poly.to_sympy(), order="lex"))
