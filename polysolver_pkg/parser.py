"""Recursive-descent parser building expression trees from tokens.

Grammar (binary operators are left associative)::

    Equation   := Expression '=' Expression END
    Expression := Term (('+' | '-') Term)*
    Term       := Unary (('*' | '/') Unary | Unary)*
    Unary      := ('+' | '-') Unary | Power
    Power      := Factor ('^' Exponent)*
    Exponent   := ('+' | '-') Exponent | Factor
    Factor     := NUMBER | VARIABLE | '(' Expression ')'

A Unary directly following another operand in a Term (``2x``, ``3(x+1)``)
is implicit multiplication; it is only recognised when the next token can
start a Factor, so ``2 -x`` stays a subtraction. Unary minus is stored as
``0 - operand`` so the tree keeps its three node kinds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from . import config
from .ast_nodes import BinaryOperation, Node, Number, Operator, Variable
from .formatting import equation_tree, render_tree
from .lexer import tokenize
from .logging_config import get_logger
from .types import ParseError, Token, TokenType

logger = get_logger("parser")

_BINARY_OPERATORS = {
    TokenType.PLUS: Operator.PLUS,
    TokenType.MINUS: Operator.MINUS,
    TokenType.MULTIPLY: Operator.MULTIPLY,
    TokenType.DIVIDE: Operator.DIVIDE,
    TokenType.POWER: Operator.POWER,
}

_FACTOR_START = (TokenType.NUMBER, TokenType.VARIABLE, TokenType.LPAREN)


@dataclass(frozen=True)
class Equation:
    """Both sides of a parsed equation."""

    left: Node
    right: Node


def parse_number(text: str) -> float:
    """Convert a NUMBER token's text, rejecting literals like ``1.2.3`` or ``.``."""
    if text.count(".") > 1 or not any(char.isdigit() for char in text):
        raise ParseError(f"Invalid number literal '{text}'", "INVALID_NUMBER")
    return float(text)


class Parser:
    """Consumes a token list produced by :func:`lexer.tokenize`."""

    def __init__(self, tokens: list[Token]):
        if not tokens or tokens[-1].kind is not TokenType.END_OF_INPUT:
            raise ValueError("Token list must end with an END_OF_INPUT token")
        self.tokens = tokens
        self.pos = 0
        self.depth = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def eat(self, kind: TokenType) -> Token:
        token = self.current
        if token.kind is not kind:
            expected = "end of input" if kind is TokenType.END_OF_INPUT else f"'{kind.value}'"
            raise ParseError(
                f"Expected {expected} but found {token.describe()} at position {token.position}"
            )
        # END_OF_INPUT is never consumed past the end of the list
        if kind is not TokenType.END_OF_INPUT:
            self.pos += 1
        return token

    def parse_equation(self) -> Equation:
        left = self.parse_expression()
        self.eat(TokenType.EQUALS)
        right = self.parse_expression()
        self.eat(TokenType.END_OF_INPUT)
        return Equation(left, right)

    def parse_expression(self) -> Node:
        node = self.parse_term()
        while self.current.kind in (TokenType.PLUS, TokenType.MINUS):
            operator = _BINARY_OPERATORS[self.eat(self.current.kind).kind]
            node = BinaryOperation(operator, node, self.parse_term())
        return node

    def parse_term(self) -> Node:
        node = self.parse_unary()
        while True:
            kind = self.current.kind
            if kind in (TokenType.MULTIPLY, TokenType.DIVIDE):
                self.eat(kind)
                node = BinaryOperation(_BINARY_OPERATORS[kind], node, self.parse_unary())
            elif kind in _FACTOR_START:
                node = BinaryOperation(Operator.MULTIPLY, node, self.parse_unary())
            else:
                return node

    def parse_unary(self) -> Node:
        kind = self.current.kind
        if kind not in (TokenType.PLUS, TokenType.MINUS):
            return self.parse_power()
        self.eat(kind)
        self._enter()
        operand = self.parse_unary()
        self._leave()
        if kind is TokenType.MINUS:
            return BinaryOperation(Operator.MINUS, Number(0.0), operand)
        return operand

    def parse_power(self) -> Node:
        node = self.parse_factor()
        while self.current.kind is TokenType.POWER:
            self.eat(TokenType.POWER)
            node = BinaryOperation(Operator.POWER, node, self.parse_exponent())
        return node

    def parse_exponent(self) -> Node:
        kind = self.current.kind
        if kind not in (TokenType.PLUS, TokenType.MINUS):
            return self.parse_factor()
        self.eat(kind)
        self._enter()
        operand = self.parse_exponent()
        self._leave()
        if kind is TokenType.MINUS:
            return BinaryOperation(Operator.MINUS, Number(0.0), operand)
        return operand

    def parse_factor(self) -> Node:
        token = self.current
        if token.kind is TokenType.NUMBER:
            self.eat(TokenType.NUMBER)
            return Number(parse_number(token.text))
        if token.kind is TokenType.VARIABLE:
            self.eat(TokenType.VARIABLE)
            return Variable(token.text)
        if token.kind is TokenType.LPAREN:
            self.eat(TokenType.LPAREN)
            self._enter()
            node = self.parse_expression()
            self._leave()
            self.eat(TokenType.RPAREN)
            return node
        raise ParseError(
            f"Unexpected {token.describe()} at position {token.position}; "
            "expected a number, variable or '('"
        )

    def _enter(self) -> None:
        self.depth += 1
        if self.depth > config.MAX_EXPRESSION_DEPTH:
            raise ParseError(
                f"Expression nested too deeply (>{config.MAX_EXPRESSION_DEPTH} levels)",
                "TOO_DEEP",
            )

    def _leave(self) -> None:
        self.depth -= 1


def parse_equation(text: str) -> Equation:
    """Tokenize and parse *text* into an :class:`Equation`."""
    tokens = tokenize(text)
    logger.debug("Tokens: %s", [token.text or token.kind.value for token in tokens])
    equation = Parser(tokens).parse_equation()
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Parsed equation:\n%s", render_tree(equation_tree(equation.left, equation.right))
        )
    return equation
