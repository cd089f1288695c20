"""Polysolver package: tokenizer, parser, polynomial evaluator, solver, and CLI."""

__all__ = [
    "config",
    "lexer",
    "parser",
    "ast_nodes",
    "polynomial",
    "solver",
    "formatting",
    "types",
    "api",
    "cli",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "solve",
    "solve_equation",
    "validate_equation",
]
