"""Errors.

Every failure raised while lexing, parsing or evaluating a Lingo program
derives from :class:`LingoError`. The ``stage`` attribute names the pipeline
stage that produced it so callers can report it without inspecting the
concrete class.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class LingoError(Exception):
    """
    Base class for all Lingo errors.
    """
    stage = "unknown"

    def __init__(self, message, line=None):
        self.line = line
        if line is not None:
            message += f" on line {line}"
        super().__init__(message)


class LexError(LingoError):
    """
    Error for invalid characters and unterminated strings.
    """
    stage = "lex"


class ParseError(LingoError):
    """
    Error for tokens a grammar production cannot start or close with.
    """
    stage = "parse"

    def __init__(self, message, line=None, expected=None, actual=None):
        self.expected = expected
        self.actual = actual
        super().__init__(message, line)


class LingoRuntimeError(LingoError):
    """
    Base class for errors raised while evaluating a program.
    """
    stage = "runtime"


class UndefinedVariableError(LingoRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, line=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line)


class DivisionByZeroError(LingoRuntimeError):
    """
    Error for division by the number zero.
    """
    def __init__(self, line=None):
        super().__init__("Cannot divide by zero", line)


class OperandTypeError(LingoRuntimeError):
    """
    Error for operators applied to values outside their defined kinds.
    """
    def __init__(self, op, operands, line=None):
        self.op = op
        kinds = ", ".join(type_name(value) for value in operands)
        super().__init__(f"Unsupported operand type(s) for '{op}': {kinds}", line)


class NestingDepthError(LingoError):
    """
    Error for programs nested deeper than the interpreter's call stack allows,
    such as very long operator chains or long runs of unary operators.
    """
    def __init__(self, stage, line=None):
        self.stage = stage
        super().__init__("Expression nested too deeply", line)


def type_name(value) -> str:
    """
    Return the Lingo name for the kind of a runtime value.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    return type(value).__name__
