"""
Expression parsing utilities for foolang.

These functions operate on a `foolang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. There is a single
binary operator, so no precedence climbing is needed: ``a + b + c`` parses
as ``a + (b + c)``.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from foolang.operations import Op, U32_MAX

if TYPE_CHECKING:
    from foolang.parser import Parser


def parse_primary(parser: 'Parser') -> tuple:
    """Parse an integer literal, a variable reference or a function call."""
    tok = parser.curr_token

    if tok.type == 'NUMBER':
        digits = tok.value.lstrip('0')
        if len(digits) > len(str(U32_MAX)) or int(digits or '0') > U32_MAX:
            raise parser.error(f"integer literal no larger than {U32_MAX}")
        parser.eat('NUMBER')
        return (Op.INT, int(digits or '0'), tok.line)

    if tok.type == 'ID':
        parser.eat('ID')
        if parser.curr_token.type == 'LPAREN':
            args = parser.call_args()
            return (Op.CALL, tok.value, args, tok.line)
        return (Op.VAR, tok.value, tok.line)

    raise parser.error("integer literal or identifier")


def parse_call_args(parser: 'Parser') -> list:
    """Parse a parenthesized, comma separated and possibly empty argument list."""
    parser.eat('LPAREN')
    args = []
    if parser.curr_token.type == 'RPAREN':
        parser.eat('RPAREN')
        return args
    while True:
        args.append(parser.expr())
        if parser.curr_token.type == 'COMMA':
            parser.eat('COMMA')
        elif parser.curr_token.type == 'RPAREN':
            parser.eat('RPAREN')
            return args
        else:
            raise parser.error("',' or ')'")


def parse_expr(parser: 'Parser') -> tuple:
    """Parse a primary expression optionally followed by '+' and another expression."""
    lhs = parser.primary()
    if parser.curr_token.type == 'PLUS':
        tok = parser.curr_token
        parser.eat('PLUS')
        return (Op.ADD, lhs, parser.expr(), tok.line)
    return lhs
