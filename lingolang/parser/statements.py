"""Statement parsing utilities for Lingo.

These functions operate on a `lingolang.parser.parser.Parser` instance and
handle the statement forms of the language: declarations, printing, blocks,
conditionals and loops. Anything else is parsed as an expression statement.

A simple statement (declaration, print or bare expression) may be followed by
a ``;``. The separator is consumed when present and may be left out only
before a closing ``}`` or at the end of the input.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from lingolang.nodes import Block, For, If, LetStatement, PrintStatement, While
from lingolang.tokens import TokenType

if TYPE_CHECKING:
    from lingolang.parser import Parser


def end_statement(parser: 'Parser') -> None:
    """
    Consume the ``;`` ending a simple statement.

    Raises:
        ParseError: If neither ``;``, ``}`` nor the end of input follows.
    """
    if parser.curr_token.type == TokenType.SEMICOLON:
        parser.advance()
    elif parser.curr_token.type not in (TokenType.RBRACE, TokenType.EOF):
        parser.eat(TokenType.SEMICOLON)


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        The statement node.
    """
    tok_type = parser.curr_token.type
    if tok_type == TokenType.LET:
        return parser.parse_let()
    elif tok_type == TokenType.PRINT:
        return parser.parse_print()
    elif tok_type == TokenType.IF:
        return parser.parse_if()
    elif tok_type == TokenType.WHILE:
        return parser.parse_while()
    elif tok_type == TokenType.FOR:
        return parser.parse_for()
    elif tok_type == TokenType.LBRACE:
        return parser.block()
    expr_node = parser.expr()
    parser.end_statement()
    return expr_node


def parse_block(parser: 'Parser') -> Block:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }
    """
    tok = parser.eat(TokenType.LBRACE)
    statements = []
    while parser.curr_token.type not in (TokenType.RBRACE, TokenType.EOF):
        statements.append(parser.statement())
    parser.eat(TokenType.RBRACE)
    return Block(tuple(statements), tok.line)


def parse_body(parser: 'Parser') -> Block:
    """
    Parse the body of a conditional or loop.

    A braced block is parsed as is. Any other single statement is wrapped in
    a one-statement block so the body still runs in its own scope.
    """
    if parser.curr_token.type == TokenType.LBRACE:
        return parser.block()
    line = parser.curr_token.line
    return Block((parser.statement(),), line)


def _parse_let_binding(parser: 'Parser') -> LetStatement:
    tok = parser.eat(TokenType.LET)
    if parser.curr_token.type != TokenType.IDENTIFIER:
        raise parser.error("Expected identifier after 'let'", TokenType.IDENTIFIER)
    name = parser.advance().value
    parser.eat(TokenType.EQUALS)
    return LetStatement(name, parser.expr(), tok.line)


def parse_let(parser: 'Parser') -> LetStatement:
    """
    Parse a variable declaration.

    Syntax:
        let <identifier> = <expression> ;
    """
    node = _parse_let_binding(parser)
    parser.end_statement()
    return node


def parse_print(parser: 'Parser') -> PrintStatement:
    """
    Parse a print statement.

    Syntax:
        print ( <expression> ) ;
    """
    tok = parser.eat(TokenType.PRINT)
    parser.eat(TokenType.LPAREN)
    expr_node = parser.expr()
    parser.eat(TokenType.RPAREN)
    parser.end_statement()
    return PrintStatement(expr_node, tok.line)


def _parse_condition(parser: 'Parser'):
    parser.eat(TokenType.LPAREN)
    condition = parser.expr()
    parser.eat(TokenType.RPAREN)
    return condition


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional with an optional else branch.

    An ``else`` directly followed by ``if`` nests another conditional as the
    alternative, which is how ``else if`` chains are represented.

    Syntax:
        if ( <expression> ) <body> [ else ( <if> | <body> ) ]
    """
    tok = parser.eat(TokenType.IF)
    condition = _parse_condition(parser)
    consequence = parser.body()
    alternative = None
    if parser.curr_token.type == TokenType.ELSE:
        parser.advance()
        if parser.curr_token.type == TokenType.IF:
            alternative = parser.parse_if()
        else:
            alternative = parser.body()
    return If(condition, consequence, alternative, tok.line)


def parse_while(parser: 'Parser') -> While:
    """
    Parse a while loop.

    Syntax:
        while ( <expression> ) <body>
    """
    tok = parser.eat(TokenType.WHILE)
    condition = _parse_condition(parser)
    return While(condition, parser.body(), tok.line)


def parse_for(parser: 'Parser') -> For:
    """
    Parse a C-style for loop. Each of the three clauses may be empty.

    Syntax:
        for ( [<let> | <expression>] ; [<expression>] ; [<expression>] ) <body>
    """
    tok = parser.eat(TokenType.FOR)
    parser.eat(TokenType.LPAREN)

    initializer = None
    if parser.curr_token.type == TokenType.LET:
        initializer = _parse_let_binding(parser)
    elif parser.curr_token.type != TokenType.SEMICOLON:
        initializer = parser.expr()
    parser.eat(TokenType.SEMICOLON)

    condition = None
    if parser.curr_token.type != TokenType.SEMICOLON:
        condition = parser.expr()
    parser.eat(TokenType.SEMICOLON)

    increment = None
    if parser.curr_token.type != TokenType.RPAREN:
        increment = parser.expr()
    parser.eat(TokenType.RPAREN)

    return For(initializer, condition, increment, parser.body(), tok.line)
