#!/usr/bin/env python3
"""
Polysolver - Polynomial Equation Solver

Thin wrapper that delegates all functionality to the polysolver_pkg package.

Usage:
    python polysolver.py                        # Interactive REPL
    python polysolver.py -e "2x+4=0"            # Solve one equation
    python polysolver.py --help                 # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Polysolver.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from polysolver_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import polysolver_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
