"""Centralized configuration for Polysolver.

This module defines:
- Numeric tolerance used when pruning polynomial coefficients
- Output precision for rendered roots
- Input validation limits (length, parenthesis depth, power exponent)
- Division handling mode
- Default log level of the CLI

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with POLYSOLVER_)

Other modules read these values at call time (``config.EPSILON``), so an
override applied after import still takes effect.
"""

import os

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("polysolver")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "1.0.0"

# Coefficients with an absolute value below this are treated as exact zero
EPSILON = float(os.getenv("POLYSOLVER_EPSILON", "1e-9"))

# Digits after the decimal point when rendering roots (printf "%f" style)
RESULT_DECIMALS = int(os.getenv("POLYSOLVER_RESULT_DECIMALS", "6"))

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("POLYSOLVER_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_EXPRESSION_DEPTH = int(
    os.getenv("POLYSOLVER_MAX_EXPRESSION_DEPTH", "100")
)  # nested parentheses

# Largest rounded exponent accepted by '^'; 0 disables the check
MAX_POWER_EXPONENT = int(os.getenv("POLYSOLVER_MAX_POWER_EXPONENT", "0"))

# "error": reject '/' at evaluation time, "zero": legacy all-zero result
DIVISION_MODES = ("error", "zero")
DIVISION_MODE = os.getenv("POLYSOLVER_DIVISION_MODE", "error").lower()
if DIVISION_MODE not in DIVISION_MODES:
    DIVISION_MODE = "error"

# Name used for the unknown in rendered trees and results
VARIABLE_NAME = "x"

# Default for the CLI --log-level flag
LOG_LEVEL = os.getenv("POLYSOLVER_LOG_LEVEL", "WARNING").upper()
