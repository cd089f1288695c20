from __future__ import annotations

import argparse
import json
import re
import sys
from typing import Any

from . import config
from .api import solve, solve_equation
from .formatting import render_tree
from .logging_config import get_logger, setup_logging

logger = get_logger("cli")

HELP_TEXT = """
Polysolver - single-variable polynomial equation solver

Enter an equation with exactly one '='. Any letter is the unknown.
  2x + 4 = 0             x = -2.000000
  x^2 - 5x + 6 = 0       x1 = 3.000000, x2 = 2.000000
  (x+1)(x-1) = 3         implicit multiplication
  x^3 = 1                degree >= 3 is reported, not solved

Operators: + - * ^ and parentheses. '^' needs a constant exponent.

REPL commands:
  help                   Show this help message
  ast [on|off]           Show the parsed tree after each result
  quit, exit             Leave the REPL
"""


_SUPERSCRIPT_DIGITS = {"⁰": "0", "¹": "1", "²": "2", "³": "3", "⁴": "4", "⁵": "5", "⁶": "6", "⁷": "7", "⁸": "8", "⁹": "9", "⁻": "-"}


def _ascii_superscripts(text: str) -> str:
    return re.sub(
        "[⁰¹²³⁴⁵⁶⁷⁸⁹⁻]+",
        lambda m: "^" + "".join(_SUPERSCRIPT_DIGITS[char] for char in m.group(0)),
        text,
    )


def print_result(res: dict[str, Any], output_format: str = "human", show_ast: bool = False) -> None:
    """Print a ``SolveResult.to_dict()`` in the requested format."""
    if output_format == "json":
        print(json.dumps(res, indent=2, ensure_ascii=False))
        return
    if not res.get("ok"):
        print("Error:", res.get("error"))
        return
    if res.get("normalized"):
        try:
            print("Normalized:", res["normalized"])
        except UnicodeEncodeError:
            # Console cannot show superscripts; fall back to caret notation
            print("Normalized:", _ascii_superscripts(res["normalized"]))
    print(res.get("result"))
    if show_ast and res.get("ast"):
        print(render_tree(res["ast"]))


def run_once(equation: str, output_format: str = "human", show_ast: bool = False) -> int:
    """Solve one equation and print it. Returns the process exit code."""
    if output_format == "payload":
        payload = solve(equation)
        print(payload)
        return 1 if "error" in json.loads(payload) else 0
    result = solve_equation(equation)
    print_result(result.to_dict(), output_format, show_ast)
    return 0 if result.ok else 1


def repl_loop(output_format: str = "human", show_ast: bool = False) -> None:
    """Interactive loop; ends on quit/exit, EOF or Ctrl+C."""
    try:
        import readline  # noqa: F401
    except ImportError:
        # readline not available on Windows - that's fine
        pass

    print("Polysolver - type 'help' for commands, 'quit' to exit.")
    while True:
        try:
            raw = input(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue
        command = raw.lower()
        if command in ("quit", "exit"):
            print("Goodbye.")
            break
        if command == "help":
            print(HELP_TEXT)
            continue
        if command.startswith("ast") and "=" not in command:
            arg = command[3:].strip()
            if arg in ("", "on", "off"):
                show_ast = arg != "off"
                print(f"AST display {'on' if show_ast else 'off'}")
                continue
        run_once(raw, output_format, show_ast)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the Polysolver CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="polysolver",
        description="Solve single-variable polynomial equations of degree <= 2.",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Solve one equation and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["human", "json", "payload"],
        default="human",
        help="Output format: human, json (full result) or payload (ast/result/error only)",
    )
    parser.add_argument(
        "--show-ast", action="store_true", help="Print the parsed tree after the result"
    )
    parser.add_argument(
        "--division",
        type=str,
        choices=list(config.DIVISION_MODES),
        help="How '/' is evaluated: error (default) or zero (legacy)",
    )
    parser.add_argument(
        "--max-exponent",
        type=int,
        help="Reject '^' exponents above this value (0 disables the limit)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Decimals shown for roots (default: 6)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.LOG_LEVEL,
        help="Set logging level (default: POLYSOLVER_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.division:
        config.DIVISION_MODE = args.division
    if args.max_exponent is not None and args.max_exponent >= 0:
        config.MAX_POWER_EXPONENT = args.max_exponent
    if args.precision is not None and args.precision >= 0:
        config.RESULT_DECIMALS = args.precision
    logger.debug(
        "Configuration: division=%s max_exponent=%s decimals=%s",
        config.DIVISION_MODE,
        config.MAX_POWER_EXPONENT,
        config.RESULT_DECIMALS,
    )

    if args.version:
        print(config.VERSION)
        return 0
    if args.eval_expr is not None:
        return run_once(args.eval_expr, args.format, args.show_ast)

    repl_loop(args.format, args.show_ast)
    return 0


if __name__ == "__main__":
    sys.exit(main_entry())
