"""
Main parser entry point for foolang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`foolang.parser.expressions`, `foolang.parser.statements` and
`foolang.parser.items`.

The parser pulls tokens lazily and keeps exactly one token of lookahead in
``curr_token``. Iterating over a parser yields top-level items one at a time.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterable, Iterator

from foolang.exceptions import ParseError
from foolang.lexer import Token, TOKEN_LITERALS
from . import expressions as _expr
from . import statements as _stmt
from . import items as _item


EXPECTED_NAMES = {
    'ID': 'identifier',
    'NUMBER': 'integer literal',
    'EOF': 'end of input',
}


class Parser:
    """foolang parser."""

    def __init__(self, tokens: Iterable[Token], file: str = '<string>'):
        """
        Initialize the parser with a token sequence.

        Parameters:
            tokens (Iterable[Token]): Tokens, usually the generator returned by `tokenize`.
            file (str): The name of the script.
        """
        self.tokens = iter(tokens)
        self.source_file = file
        self.prev_token = None
        self.curr_token = self._next_token()

    def _next_token(self) -> Token:
        """
        Pull the next token, synthesizing an EOF token once the input is exhausted.
        """
        tok = next(self.tokens, None)
        if tok is not None:
            return tok
        if self.prev_token is None:
            return Token('EOF', None, 1, 0)
        last = self.prev_token
        end = last.offset + len(last.value.encode('utf-8')) if last.value else last.offset
        return Token('EOF', None, last.line, end)

    def describe(self, token_type: str) -> str:
        """
        Return a human readable name for a token type.
        """
        if token_type in TOKEN_LITERALS:
            return f"'{TOKEN_LITERALS[token_type]}'"
        return EXPECTED_NAMES.get(token_type, token_type)

    def error(self, expected: str) -> ParseError:
        """
        Build a parse error for the current token.
        """
        return ParseError(expected, self.curr_token, self.source_file)

    def eat(self, token_type: str) -> None:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.

        Raises:
            ParseError: If the token does not match the expected type.
        """
        if self.curr_token.type != token_type:
            raise self.error(self.describe(token_type))
        if self.curr_token.type != 'EOF':
            self.prev_token = self.curr_token
            self.curr_token = self._next_token()


    # Expression wrappers
    def expr(self) -> tuple:
        """
        Parse a full expression, a primary optionally followed by '+' and another expression.
        """
        return _expr.parse_expr(self)

    def primary(self) -> tuple:
        """
        Parse an integer literal, a variable reference or a function call.
        """
        return _expr.parse_primary(self)

    def call_args(self) -> list:
        """
        Parse the parenthesized argument list of a function call.
        """
        return _expr.parse_call_args(self)


    # Statement wrappers
    def block(self) -> list:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def maybe_statement(self) -> tuple | None:
        """
        Parse a single statement, or return None when the block is finished.
        """
        return _stmt.maybe_parse_statement(self)

    def parse_declaration(self) -> tuple:
        """
        Parse a 'var' declaration.
        """
        return _stmt.parse_declaration(self)

    def parse_assignment(self) -> tuple:
        """
        Parse an assignment to an existing variable.
        """
        return _stmt.parse_assignment(self)

    def parse_return(self) -> tuple:
        """
        Parse a 'return' statement.
        """
        return _stmt.parse_return(self)


    # Item wrappers
    def item(self) -> tuple:
        """
        Parse one top-level item.
        """
        return _item.parse_item(self)

    def parse_entry_block(self) -> tuple:
        """
        Parse the 'begin' entry block.
        """
        return _item.parse_entry_block(self)

    def parse_func_def(self) -> tuple:
        """
        Parse a function definition.
        """
        return _item.parse_func_def(self)


    def __iter__(self) -> Iterator[tuple]:
        """
        Lazily yield top-level items until the input is exhausted.
        """
        while self.curr_token.type != 'EOF':
            yield self.item()

    def parse(self) -> list:
        """
        Parse the full input into a list of items.
        """
        return list(self)
