"""Interpreter.

This is a tree-walk interpreter for evaluating the AST produced by the parser. It supports
arithmetic, string concatenation, variables with lexical block scoping, conditionals, loops,
short-circuiting boolean logic and output statements.

1. Execution Model
The interpreter evaluates a tree of node dataclasses top-down and recursively. `execute()`
dispatches on the node's class with a single `match` over the closed set of node types in
`lingolang.nodes`; expressions are handled by `eval_expr()`. Every construct yields a value:
the last statement's value for programs and blocks, the bound value for declarations and
assignments, and ``None`` (the null value) for printing and for conditionals or loops that
ran no branch.

2. Environment
Scopes are `Environment` frames chained to their parent. The interpreter owns the global
frame; every block, every for-loop, and so every if/while body, runs in a fresh child frame
that is dropped once it finishes.

3. Values
Runtime values are numbers (float), strings, booleans and null (``None``). Only ``null`` and
``false`` are falsy. ``+`` concatenates when either operand is a string, otherwise every
arithmetic and ordering operator requires numbers (ordering also accepts two strings).
Equality never coerces between kinds.

4. Output
Each executed ``print`` hands its value to the sink callable given at construction. The
default sink writes the formatted value to stdout.

5. Error Handling
Undefined variables, division by zero and operands of the wrong kind are surfaced as typed
`LingoRuntimeError` subclasses carrying the line number. The first error stops execution.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from decimal import Decimal
from typing import Callable, Optional

from lingolang.environment import Environment
from lingolang.exceptions import DivisionByZeroError, OperandTypeError
from lingolang.nodes import (
    AssignmentExpr,
    BinaryOp,
    Block,
    BooleanLiteral,
    For,
    Identifier,
    If,
    LetStatement,
    NumberLiteral,
    PrintStatement,
    Program,
    StringLiteral,
    UnaryOp,
    While,
)
from lingolang.operations import Op


def is_number(value) -> bool:
    """
    Return True for numeric runtime values. Booleans are not numbers.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value) -> bool:
    """
    Return the truthiness of a runtime value: only null and false are falsy.
    """
    return value is not None and value is not False


def values_equal(lhs, rhs) -> bool:
    """
    Compare two runtime values without coercion between kinds.
    """
    if is_number(lhs) and is_number(rhs):
        return lhs == rhs
    return type(lhs) is type(rhs) and lhs == rhs


def format_number(value) -> str:
    """
    Return the display form of a number.

    The shortest digits that read back as the same float are laid out in
    plain decimal notation when the decimal point sits within 21 places of
    them, and in exponent notation otherwise: ``3.0`` is ``3``, ``1e21`` is
    ``1e+21`` and ``1e-7`` is ``1e-7``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # Position of the decimal point relative to the first digit.
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        e = n - 1
        text = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + text


def format_value(value) -> str:
    """
    Return the display form of a runtime value.

    ``None`` is ``null``, booleans are lower case and numbers follow
    :func:`format_number`.
    """
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if is_number(value):
        return format_number(value)
    return str(value)


def print_sink(value) -> None:
    """
    Default print sink writing the formatted value to stdout.
    """
    print(format_value(value))


class Interpreter:
    """Tree-walk interpreter for Lingo."""

    def __init__(self, sink: Optional[Callable] = None):
        """
        Initialize the interpreter.

        Parameters:
            sink (callable): Receives one runtime value per executed print.
        """
        self.sink = sink if sink is not None else print_sink
        self.global_env = Environment()

    @property
    def vars(self) -> dict:
        """
        The bindings of the global scope.
        """
        return self.global_env.vars

    def run(self, program: Program):
        """
        Execute a program in the global scope and return its final value.
        """
        return self.execute(program, self.global_env)

    def execute(self, node, env: Optional[Environment] = None):
        """
        Execute a node and return its value.

        Parameters:
            node: Any node from `lingolang.nodes`.
            env (Environment): The active scope, the global scope by default.

        Raises:
            LingoRuntimeError: On undefined variables, division by zero or bad operands.
            TypeError: If ``node`` is not a Lingo AST node.
        """
        env = self.global_env if env is None else env
        match node:
            case Program(statements=statements):
                return self._execute_sequence(statements, env)

            case Block(statements=statements):
                return self._execute_sequence(statements, env.child())

            case LetStatement(name=name, expr=expr_node):
                return env.define(name, self.eval_expr(expr_node, env))

            case PrintStatement(expr=expr_node):
                self.sink(self.eval_expr(expr_node, env))
                return None

            case If(condition=cond_node, consequence=consequence, alternative=alternative):
                if is_truthy(self.eval_expr(cond_node, env)):
                    return self.execute(consequence, env)
                if alternative is not None:
                    return self.execute(alternative, env)
                return None

            case While(condition=cond_node, body=body):
                result = None
                while is_truthy(self.eval_expr(cond_node, env)):
                    result = self.execute(body, env)
                return result

            case For():
                return self._execute_for(node, env)

            case _:
                return self.eval_expr(node, env)

    def _execute_sequence(self, statements, env: Environment):
        result = None
        for stmt in statements:
            result = self.execute(stmt, env)
        return result

    def _execute_for(self, node: For, env: Environment):
        # One frame for the whole loop; the body block nests its own.
        loop_env = env.child()
        if node.initializer is not None:
            self.execute(node.initializer, loop_env)

        result = None
        while True:
            if node.condition is not None:
                if not is_truthy(self.eval_expr(node.condition, loop_env)):
                    break
            result = self.execute(node.body, loop_env)
            if node.increment is not None:
                self.eval_expr(node.increment, loop_env)
        return result

    def eval_expr(self, node, env: Environment):
        """
        Recursively evaluate an expression node and return its computed value.

        Raises:
            UndefinedVariableError: If a variable is referenced or assigned before declaration.
            DivisionByZeroError: If the right operand of '/' is zero.
            OperandTypeError: If an operator receives operands it does not accept.
            TypeError: If the node is not an expression node.
        """
        match node:
            case NumberLiteral(value=value) | StringLiteral(value=value) | BooleanLiteral(value=value):
                return value

            case Identifier(name=name, line=line):
                return env.lookup(name, line)

            case AssignmentExpr(name=name, expr=expr_node, line=line):
                return env.assign(name, self.eval_expr(expr_node, env), line)

            case BinaryOp(left=left, op=Op.AND, right=right):
                if not is_truthy(self.eval_expr(left, env)):
                    return False
                return is_truthy(self.eval_expr(right, env))

            case BinaryOp(left=left, op=Op.OR, right=right):
                if is_truthy(self.eval_expr(left, env)):
                    return True
                return is_truthy(self.eval_expr(right, env))

            case BinaryOp(left=left, right=right):
                lhs = self.eval_expr(left, env)
                rhs = self.eval_expr(right, env)
                return self._binary(node, lhs, rhs)

            case UnaryOp(op=op, operand=operand_node, line=line):
                operand = self.eval_expr(operand_node, env)
                if op == Op.NOT:
                    return not is_truthy(operand)
                if not is_number(operand):
                    raise OperandTypeError(op.value, (operand,), line)
                return -operand if op == Op.SUB else +operand

        raise TypeError(f"Invalid expression node: {node!r}")

    def _binary(self, node: BinaryOp, lhs, rhs):
        op = node.op
        match op:
            case Op.EQ:
                return values_equal(lhs, rhs)
            case Op.NE:
                return not values_equal(lhs, rhs)
            case Op.ADD if isinstance(lhs, str) or isinstance(rhs, str):
                return format_value(lhs) + format_value(rhs)
            case Op.LT | Op.GT if isinstance(lhs, str) and isinstance(rhs, str):
                return lhs < rhs if op == Op.LT else lhs > rhs

        if not (is_number(lhs) and is_number(rhs)):
            raise OperandTypeError(op.value, (lhs, rhs), node.line)

        match op:
            case Op.ADD:
                return lhs + rhs
            case Op.SUB:
                return lhs - rhs
            case Op.MUL:
                return lhs * rhs
            case Op.DIV:
                if rhs == 0:
                    raise DivisionByZeroError(node.line)
                return lhs / rhs
            case Op.LT:
                return lhs < rhs
            case Op.GT:
                return lhs > rhs
        raise TypeError(f"Unknown binary operator '{op}'")
