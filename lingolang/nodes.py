"""AST node definitions for Lingo.

The parser produces, and the interpreter consumes, a tree built from the
closed set of frozen dataclasses below. Each node owns its children; the tree
has no cycles. ``line`` records where the node started in the source and is
used only for error messages.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from lingolang.operations import Op


# ---- Expressions ----

@dataclass(frozen=True)
class Identifier:
    name: str
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class NumberLiteral:
    value: float
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class StringLiteral:
    value: str
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class BinaryOp:
    left: Expression
    op: Op
    right: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class UnaryOp:
    op: Op
    operand: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class AssignmentExpr:
    """Rebinding of an existing variable; evaluates to the assigned value."""
    name: str
    expr: Expression
    line: int = field(default=0, compare=False)


Expression = Union[
    Identifier,
    NumberLiteral,
    StringLiteral,
    BooleanLiteral,
    BinaryOp,
    UnaryOp,
    AssignmentExpr,
]


# ---- Statements ----

@dataclass(frozen=True)
class LetStatement:
    """Declaration of a new binding in the current scope."""
    name: str
    expr: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class PrintStatement:
    expr: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Block:
    statements: tuple[Statement, ...]
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class If:
    condition: Expression
    consequence: Block
    alternative: Optional[Union[Block, If]] = None
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class While:
    condition: Expression
    body: Block
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class For:
    initializer: Optional[Union[LetStatement, Expression]]
    condition: Optional[Expression]
    increment: Optional[Expression]
    body: Block
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Program:
    statements: tuple[Statement, ...]


Statement = Union[
    LetStatement,
    PrintStatement,
    Block,
    If,
    While,
    For,
    Expression,
]

Node = Union[Program, Statement]


__all__ = [
    "Identifier",
    "NumberLiteral",
    "StringLiteral",
    "BooleanLiteral",
    "BinaryOp",
    "UnaryOp",
    "AssignmentExpr",
    "Expression",
    "LetStatement",
    "PrintStatement",
    "Block",
    "If",
    "While",
    "For",
    "Program",
    "Statement",
    "Node",
]
