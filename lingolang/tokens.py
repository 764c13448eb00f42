"""Token definitions for Lingo.

The lexer produces, and the parser consumes, :class:`Token` instances whose
``type`` is one member of the closed :class:`TokenType` enumeration. Keeping
the enumeration in one place prevents the two stages from drifting apart.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class TokenType(str, Enum):
    """
    Enumeration of every lexical category.
    """

    # Arithmetic
    PLUS = "PLUS"
    MINUS = "MINUS"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"

    # Grouping
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"

    # Comparison
    LT = "LT"
    GT = "GT"
    EQ = "EQ"
    NOT_EQ = "NOT_EQ"

    # Logical
    AND = "AND"
    OR = "OR"
    BANG = "BANG"

    # Assignment and punctuation
    EQUALS = "EQUALS"
    SEMICOLON = "SEMICOLON"

    # Keywords
    LET = "LET"
    PRINT = "PRINT"
    IF = "IF"
    ELSE = "ELSE"
    TRUE = "TRUE"
    FALSE = "FALSE"
    WHILE = "WHILE"
    FOR = "FOR"

    # Literals
    NUMBER = "NUMBER"
    STRING = "STRING"
    IDENTIFIER = "IDENTIFIER"

    EOF = "EOF"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer error messages.
        """
        return self.value


# Source spelling of operator and punctuation tokens.
SYMBOLS = {
    "==": TokenType.EQ,
    "!=": TokenType.NOT_EQ,
    "&&": TokenType.AND,
    "||": TokenType.OR,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "=": TokenType.EQUALS,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ";": TokenType.SEMICOLON,
    "!": TokenType.BANG,
}


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type, an optional literal and its line.
    """
    type: TokenType
    value: Optional[Union[float, str]] = None
    line: int = 1

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        if self.value is None:
            return f"Token({self.type}, line={self.line})"
        return f"Token({self.type}, {self.value!r}, line={self.line})"


def is_digit(char) -> bool:
    """
    Return True if ``char`` is an ASCII decimal digit.
    """
    return char is not None and "0" <= char <= "9"


def is_ident_start(char: str) -> bool:
    """
    Return True if ``char`` may begin an identifier (letter, mark or underscore).
    """
    return char == "_" or unicodedata.category(char)[0] in ("L", "M")


def is_ident_part(char: str) -> bool:
    """
    Return True if ``char`` may continue an identifier.
    """
    return char == "_" or unicodedata.category(char)[0] in ("L", "M", "N")


def is_identifier(text: str) -> bool:
    """
    Return True if the whole of ``text`` lexes as a single identifier.
    """
    return bool(text) and is_ident_start(text[0]) and all(is_ident_part(c) for c in text[1:])


__all__ = ["TokenType", "Token", "SYMBOLS", "is_digit", "is_ident_start", "is_ident_part", "is_identifier"]
