"""Expression parsing utilities for Lingo.

These functions operate on a `lingolang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and associativity. From loosest to tightest binding:

    assignment  := logical_or ('=' assignment)?
    logical_or  := logical_and ('||' logical_and)*
    logical_and := comparison ('&&' comparison)*
    comparison  := term (('==' | '!=' | '<' | '>') term)*
    term        := factor (('+' | '-') factor)*
    factor      := primary (('*' | '/') primary)*
    primary     := NUMBER | STRING | TRUE | FALSE | IDENTIFIER
                 | '(' expression ')' | ('+' | '-' | '!') primary


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from lingolang.nodes import (
    AssignmentExpr,
    BinaryOp,
    BooleanLiteral,
    Identifier,
    NumberLiteral,
    StringLiteral,
    UnaryOp,
)
from lingolang.operations import BINARY_OPS, UNARY_OPS
from lingolang.tokens import TokenType

if TYPE_CHECKING:
    from lingolang.parser import Parser


def _left_fold(parser: 'Parser', operand, token_types: tuple):
    """Parse ``operand (op operand)*`` into a left-leaning chain of BinaryOp."""
    result = operand()
    while parser.curr_token.type in token_types:
        op_tok = parser.advance()
        result = BinaryOp(result, BINARY_OPS[op_tok.type], operand(), op_tok.line)
    return result


# ---- Highest precedence ----

def parse_primary(parser: 'Parser'):
    """Parse a literal, variable, parenthesized expression or unary operation."""
    tok = parser.curr_token

    if tok.type == TokenType.NUMBER:
        parser.advance()
        return NumberLiteral(tok.value, tok.line)

    if tok.type == TokenType.STRING:
        parser.advance()
        return StringLiteral(tok.value, tok.line)

    if tok.type in (TokenType.TRUE, TokenType.FALSE):
        parser.advance()
        return BooleanLiteral(tok.type == TokenType.TRUE, tok.line)

    if tok.type == TokenType.IDENTIFIER:
        parser.advance()
        return Identifier(tok.value, tok.line)

    if tok.type == TokenType.LPAREN:
        parser.advance()
        node = parser.expr()
        parser.eat(TokenType.RPAREN)
        return node

    # Unary operators bind to a single primary.
    if tok.type in UNARY_OPS:
        parser.advance()
        return UnaryOp(UNARY_OPS[tok.type], parser.primary(), tok.line)

    raise parser.error(f"Unexpected token {tok.type}")


def parse_factor(parser: 'Parser'):
    """Parse multiplication and division expressions."""
    return _left_fold(parser, parser.primary, (TokenType.MULTIPLY, TokenType.DIVIDE))


def parse_term(parser: 'Parser'):
    """Parse addition and subtraction expressions."""
    return _left_fold(parser, parser.factor, (TokenType.PLUS, TokenType.MINUS))


def parse_comparison(parser: 'Parser'):
    """Parse comparison expressions (==, !=, <, >)."""
    return _left_fold(
        parser,
        parser.term,
        (TokenType.EQ, TokenType.NOT_EQ, TokenType.LT, TokenType.GT),
    )


def parse_logical_and(parser: 'Parser'):
    """Parse logical AND expressions using '&&'."""
    return _left_fold(parser, parser.comparison, (TokenType.AND,))


def parse_logical_or(parser: 'Parser'):
    """Parse logical OR expressions using '||'."""
    return _left_fold(parser, parser.logical_and, (TokenType.OR,))


def parse_assignment(parser: 'Parser'):
    """Parse an assignment, which is right-associative and needs an identifier target."""
    target = parser.logical_or()
    if parser.curr_token.type != TokenType.EQUALS:
        return target
    eq_tok = parser.curr_token
    if not isinstance(target, Identifier):
        raise parser.error("Invalid assignment target")
    parser.advance()
    return AssignmentExpr(target.name, parser.assignment(), eq_tok.line)


# ---- Entry point ----

def parse_expr(parser: 'Parser'):
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.assignment()
