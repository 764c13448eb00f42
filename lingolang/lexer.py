"""Lexer for Lingo.

The lexer performs a single left-to-right pass over the source code with one
character of lookahead, producing a flat list of :class:`Token` objects that
ends with an ``EOF`` token.

1. Literals
A digit starts a number: digits, then optionally a ``.`` and more digits. The
value is stored as a float. A ``"`` starts a string that runs, verbatim, up to
the next ``"``; there are no escape sequences.

2. Identifiers and keywords
A Unicode letter, combining mark or underscore starts an identifier, which
continues over letters, numbers, marks and underscores, so names written in
any script lex as one token. The finished spelling is looked up in the
keyword table built from the caller's :class:`KeywordConfig`; keywords are
only ever recognised as whole identifiers.

3. Operators
The two-character operators ``== != && ||`` are tried before the single
character set ``+ - * / ( ) { } = < > ; !``. ``//`` starts a comment that runs
to the end of the line.

4. Errors
Any other character, or a string missing its closing quote, raises
:class:`LexError`. There is no recovery.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Optional

from lingolang.config import DEFAULT_KEYWORDS, KeywordConfig
from lingolang.exceptions import LexError
from lingolang.tokens import SYMBOLS, Token, TokenType, is_digit, is_ident_part, is_ident_start


class Lexer:
    """
    Single-pass scanner turning source text into tokens.
    """
    def __init__(self, text: str, keywords: Optional[KeywordConfig] = None):
        """
        Initialize the lexer.

        Parameters:
            text (str): The source code to tokenize.
            keywords (KeywordConfig): Keyword spellings, English by default.
        """
        self.text = text
        self.pos = 0
        self.line = 1
        self.current_char = text[0] if text else None
        self.keywords = (keywords or DEFAULT_KEYWORDS).keyword_table()

    def advance(self) -> None:
        """
        Move to the next character.
        """
        if self.current_char == "\n":
            self.line += 1
        self.pos += 1
        self.current_char = self.text[self.pos] if self.pos < len(self.text) else None

    def peek(self) -> Optional[str]:
        """
        Return the character after the current one without consuming it.
        """
        nxt = self.pos + 1
        return self.text[nxt] if nxt < len(self.text) else None

    def skip_comment(self) -> None:
        while self.current_char is not None and self.current_char != "\n":
            self.advance()

    def read_number(self) -> Token:
        """
        Read an integer or decimal number literal.
        """
        start, line = self.pos, self.line
        while is_digit(self.current_char):
            self.advance()
        if self.current_char == ".":
            self.advance()
            while is_digit(self.current_char):
                self.advance()
        return Token(TokenType.NUMBER, float(self.text[start:self.pos]), line)

    def read_string(self) -> Token:
        """
        Read a string literal up to the closing quote.

        Raises:
            LexError: If the input ends before the closing quote.
        """
        line = self.line
        self.advance()
        start = self.pos
        while self.current_char is not None and self.current_char != '"':
            self.advance()
        if self.current_char is None:
            raise LexError("Unterminated string", line)
        value = self.text[start:self.pos]
        self.advance()
        return Token(TokenType.STRING, value, line)

    def read_identifier(self) -> Token:
        """
        Read an identifier, returning a keyword token when the spelling is configured.
        """
        start, line = self.pos, self.line
        while self.current_char is not None and is_ident_part(self.current_char):
            self.advance()
        name = self.text[start:self.pos]
        keyword = self.keywords.get(name)
        if keyword is not None:
            return Token(keyword, None, line)
        return Token(TokenType.IDENTIFIER, name, line)

    def read_symbol(self) -> Token:
        """
        Read an operator or punctuation token.

        Raises:
            LexError: If the character starts no token.
        """
        line = self.line
        pair = self.current_char + (self.peek() or "")
        if pair in SYMBOLS:
            self.advance()
            self.advance()
            return Token(SYMBOLS[pair], None, line)
        if self.current_char in SYMBOLS:
            token_type = SYMBOLS[self.current_char]
            self.advance()
            return Token(token_type, None, line)
        raise LexError(f"Invalid character '{self.current_char}'", line)

    def tokenize(self) -> list[Token]:
        """
        Convert the whole input into a list of tokens terminated by ``EOF``.
        """
        tokens = []
        while self.current_char is not None:
            char = self.current_char
            if char.isspace():
                self.advance()
            elif char == "/" and self.peek() == "/":
                self.skip_comment()
            elif is_digit(char):
                tokens.append(self.read_number())
            elif is_ident_start(char):
                tokens.append(self.read_identifier())
            elif char == '"':
                tokens.append(self.read_string())
            else:
                tokens.append(self.read_symbol())
        tokens.append(Token(TokenType.EOF, None, self.line))
        return tokens


def tokenize(code: str, keywords: Optional[KeywordConfig] = None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        keywords (KeywordConfig): Keyword spellings, English by default.

    Returns:
        list[Token]: A list of Token instances ending with an EOF token.

    Raises:
        LexError: If an invalid character or unterminated string is encountered.
    """
    return Lexer(code, keywords).tokenize()
