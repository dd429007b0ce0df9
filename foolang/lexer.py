"""Lexer for foolang.

The lexer performs a single lazy pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, its source text, the line it appears on and its byte
offset into the source.

At every position the lexer first tries a run of alphabetic characters
(a keyword when the whole run is ``begin``, ``var``, ``func`` or ``return``,
an identifier otherwise), then a one-character symbol, then a run of ASCII
digits. ASCII whitespace between tokens is skipped. Anything else raises
:class:`~foolang.exceptions.LexError`.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import Iterator

from foolang.exceptions import LexError


KEYWORDS = {
    'begin': 'BEGIN',
    'var': 'VAR',
    'func': 'FUNC',
    'return': 'RETURN',
}

TOKEN_LITERALS = {
    'BEGIN': 'begin',
    'VAR': 'var',
    'FUNC': 'func',
    'RETURN': 'return',
    'LBRACE': '{',
    'RBRACE': '}',
    'LPAREN': '(',
    'RPAREN': ')',
    'ASSIGN': '=',
    'PLUS': '+',
    'COMMA': ',',
    'SEMI': ';',
}

token_specification = [
    # Keywords and identifiers
    ('WORD',      r'[^\W\d_]+'),

    # Delimiters
    ('LBRACE',    r'\{'),
    ('RBRACE',    r'\}'),
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('COMMA',     r','),
    ('SEMI',      r';'),

    # Assignment and arithmetic
    ('ASSIGN',    r'='),
    ('PLUS',      r'\+'),

    # Literals
    ('NUMBER',    r'[0-9]+'),

    # Miscellaneous
    ('SKIP',      r'[ \t\n\r\f]+'),
    ('MISMATCH',  r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification),
    re.DOTALL,
)


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value, line, offset=0):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (str | None): The source text of the token.
            line (int): The line the token starts on.
            offset (int): The byte offset of the token in the source.
        """
        self.type = type_
        self.value = value
        self.line = line
        self.offset = offset

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value}, line={self.line}, offset={self.offset})"


def tokenize(code: str, file: str | None = None) -> Iterator[Token]:
    """
    Lazily convert a string of source code into tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): Optional script name used in error messages.

    Yields:
        Token: The next token in the source.

    Raises:
        LexError: If an unexpected character is encountered.
    """
    line_num = 1
    offset = 0

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        start = offset
        offset += len(value.encode('utf-8'))

        if kind == 'SKIP':
            line_num += value.count('\n')
            continue
        if kind == 'MISMATCH':
            raise LexError(value, start, line_num, file)

        if kind == 'WORD':
            # The pattern also admits numeric characters such as '²'; words are alphabetic only.
            cut = next((i for i, ch in enumerate(value) if not ch.isalpha()), None)
            word = value if cut is None else value[:cut]
            if word:
                yield Token(KEYWORDS.get(word, 'ID'), word, line_num, start)
            if cut is not None:
                raise LexError(value[cut], start + len(word.encode('utf-8')), line_num, file)
        else:
            yield Token(kind, value, line_num, start)
