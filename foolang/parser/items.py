"""Top-level item parsing for foolang.

A program is a sequence of items: the ``begin`` entry block and ``func``
definitions, in any order.


File: items.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from foolang.operations import Op

if TYPE_CHECKING:
    from foolang.parser import Parser


def parse_item(parser: 'Parser') -> tuple:
    """Parse one top-level item."""
    tok = parser.curr_token
    if tok.type == 'BEGIN':
        return parser.parse_entry_block()
    if tok.type == 'FUNC':
        return parser.parse_func_def()
    raise parser.error("'begin' or 'func'")


def parse_entry_block(parser: 'Parser') -> tuple:
    """
    Parse the entry block.

    Syntax:
        begin { <statement>* }

    Returns:
        tuple: (ENTRY, statements, line)
    """
    tok = parser.curr_token
    parser.eat('BEGIN')
    return (Op.ENTRY, parser.block(), tok.line)


def parse_func_def(parser: 'Parser') -> tuple:
    """
    Parse a function definition.

    Syntax:
        func <name>(<params>) { <statement>* }

    Returns:
        tuple: (FUNC_DEF, name, params, body, line)
    """
    start_tok = parser.curr_token
    parser.eat('FUNC')
    func_name = parser.curr_token.value
    parser.eat('ID')
    parser.eat('LPAREN')
    params = []
    if parser.curr_token.type != 'RPAREN':
        params.append(parser.curr_token.value)
        parser.eat('ID')
        while parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
            params.append(parser.curr_token.value)
            parser.eat('ID')
    parser.eat('RPAREN')
    body = parser.block()
    return (Op.FUNC_DEF, func_name, params, body, start_tok.line)
