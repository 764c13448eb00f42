"""Shared definitions for AST operation identifiers.

This module centralizes the operator labels used by the parser and
interpreter for binary and unary nodes. Keeping them in one place prevents
the two components from drifting apart.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum

from lingolang.tokens import TokenType


class Op(str, Enum):
    """
    Enumeration of supported AST operation names.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    # Comparison
    EQ = "=="
    NE = "!="
    LT = "<"
    GT = ">"

    # Boolean
    AND = "&&"
    OR = "||"
    NOT = "!"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the operator's source spelling for nicer debug output.
        """
        return self.value


BINARY_OPS = {
    TokenType.PLUS: Op.ADD,
    TokenType.MINUS: Op.SUB,
    TokenType.MULTIPLY: Op.MUL,
    TokenType.DIVIDE: Op.DIV,
    TokenType.EQ: Op.EQ,
    TokenType.NOT_EQ: Op.NE,
    TokenType.LT: Op.LT,
    TokenType.GT: Op.GT,
    TokenType.AND: Op.AND,
    TokenType.OR: Op.OR,
}

UNARY_OPS = {
    TokenType.PLUS: Op.ADD,
    TokenType.MINUS: Op.SUB,
    TokenType.BANG: Op.NOT,
}


__all__ = ["Op", "BINARY_OPS", "UNARY_OPS"]
