"""Main parser entry point for Lingo.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`lingolang.parser.expressions` and `lingolang.parser.statements`.

Tokens are consumed strictly left to right with a single token of lookahead
and no backtracking. The first token a production cannot accept raises a
:class:`ParseError` naming the expected and actual token kinds.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from lingolang.exceptions import ParseError
from lingolang.nodes import Program
from lingolang.tokens import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Lingo parser."""

    def __init__(self, tokens: list[Token]):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with EOF.
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            tokens = list(tokens) + [Token(TokenType.EOF, None, tokens[-1].line if tokens else 1)]
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]

    def advance(self) -> Token:
        """
        Consume the current token and return it. EOF is never consumed.
        """
        tok = self.curr_token
        if tok.type != TokenType.EOF:
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return tok

    def eat(self, token_type: TokenType) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.curr_token.type != token_type:
            raise self.error(f"Expected {token_type}, but got {self.curr_token.type}", token_type)
        return self.advance()

    def error(self, message: str, expected=None) -> ParseError:
        """
        Build a ParseError located at the current token.
        """
        return ParseError(
            message,
            self.curr_token.line,
            expected=expected,
            actual=self.curr_token.type,
        )

    # Expression wrappers
    def expr(self):
        """
        Parse a full expression, starting at assignment.
        """
        return _expr.parse_expr(self)

    def assignment(self):
        """
        Parse a right-associative assignment expression.
        """
        return _expr.parse_assignment(self)

    def logical_or(self):
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logical_or(self)

    def logical_and(self):
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logical_and(self)

    def comparison(self):
        """
        Parse an equality or ordering comparison.
        """
        return _expr.parse_comparison(self)

    def term(self):
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def factor(self):
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_factor(self)

    def primary(self):
        """
        Parse a literal, variable, parenthesized group or unary operation.
        """
        return _expr.parse_primary(self)

    # Statement wrappers
    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self):
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def body(self):
        """
        Parse a conditional or loop body, braced or a single statement.
        """
        return _stmt.parse_body(self)

    def parse_let(self):
        """
        Parse a 'let' declaration.
        """
        return _stmt.parse_let(self)

    def parse_print(self):
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def parse_if(self):
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def parse_while(self):
        """
        Parse a 'while' loop.
        """
        return _stmt.parse_while(self)

    def parse_for(self):
        """
        Parse a 'for' loop.
        """
        return _stmt.parse_for(self)

    def end_statement(self) -> None:
        """
        Consume an optional statement separator.
        """
        _stmt.end_statement(self)

    def parse(self) -> Program:
        """
        Parse the full input into a Program node.
        """
        statements = []
        while self.curr_token.type != TokenType.EOF:
            statements.append(self.statement())
        return Program(tuple(statements))


def parse(tokens: list[Token]) -> Program:
    """
    Parse a token list into a Program node.
    """
    return Parser(tokens).parse()
