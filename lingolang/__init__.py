"""Lingo: a small configurable scripting language.

Source text is tokenized with keyword spellings chosen by the caller, parsed
into a tree of nodes by a recursive-descent parser, and executed directly by
a tree-walking interpreter with lexical block scoping.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from lingolang.config import KeywordConfig
from lingolang.environment import Environment
from lingolang.exceptions import (
    DivisionByZeroError,
    LexError,
    LingoError,
    LingoRuntimeError,
    NestingDepthError,
    OperandTypeError,
    ParseError,
    UndefinedVariableError,
)
from lingolang.interpreter import Interpreter, format_value
from lingolang.lexer import tokenize
from lingolang.parser import Parser
from lingolang.runner import RunResult, format_report, run_source

__version__ = "0.1.0"

__all__ = [
    "KeywordConfig",
    "Environment",
    "Interpreter",
    "Parser",
    "RunResult",
    "tokenize",
    "run_source",
    "format_report",
    "format_value",
    "LingoError",
    "LexError",
    "ParseError",
    "LingoRuntimeError",
    "UndefinedVariableError",
    "DivisionByZeroError",
    "OperandTypeError",
    "NestingDepthError",
]
