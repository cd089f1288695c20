"""Tokenizer turning raw equation text into a flat token list."""

from __future__ import annotations

from .types import LexError, Token, TokenType

SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "^": TokenType.POWER,
    "=": TokenType.EQUALS,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


def _is_number_char(char: str) -> bool:
    return char in "0123456789."


def _is_letter(char: str) -> bool:
    # str.isalpha() accepts non-ASCII letters, which are rejected here
    return char.isascii() and char.isalpha()


def tokenize(text: str) -> list[Token]:
    """Split *text* into tokens, ending with an END_OF_INPUT token.

    Numbers are maximal runs of digits and decimal points; validating the
    literal is left to the parser. Every letter is a separate variable token.

    Raises:
        LexError: on any character that cannot start a token
    """
    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        if char.isspace():
            pos += 1
        elif _is_number_char(char):
            start = pos
            while pos < length and _is_number_char(text[pos]):
                pos += 1
            tokens.append(Token(TokenType.NUMBER, text[start:pos], start))
        elif _is_letter(char):
            tokens.append(Token(TokenType.VARIABLE, char, pos))
            pos += 1
        elif char in SINGLE_CHAR_TOKENS:
            tokens.append(Token(SINGLE_CHAR_TOKENS[char], char, pos))
            pos += 1
        else:
            raise LexError(f"Unknown character {char!r} at position {pos}")
    tokens.append(Token(TokenType.END_OF_INPUT, "", length))
    return tokens
