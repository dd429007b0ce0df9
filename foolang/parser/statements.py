"""Statement parsing utilities for foolang.

These functions operate on a `foolang.parser.parser.Parser` instance and
handle blocks and the three statement forms: declarations, assignments and
returns. Every statement is terminated by ';'.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from foolang.operations import Op

if TYPE_CHECKING:
    from foolang.parser import Parser


def parse_block(parser: 'Parser') -> list:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance.

    Returns:
        list: the statements of the block, in source order.
    """
    parser.eat('LBRACE')
    statements = []
    stmt = parser.maybe_statement()
    while stmt is not None:
        statements.append(stmt)
        stmt = parser.maybe_statement()
    parser.eat('RBRACE')
    return statements


def maybe_parse_statement(parser: 'Parser') -> tuple | None:
    """
    Parse a single statement if the current token starts one.

    Args:
        parser: The parser instance.

    Returns:
        tuple | None: the statement node, or None when the current token
        cannot start a statement (the enclosing block is finished).
    """
    tok = parser.curr_token
    if tok.type == 'VAR':
        stmt = parser.parse_declaration()
    elif tok.type == 'ID':
        stmt = parser.parse_assignment()
    elif tok.type == 'RETURN':
        stmt = parser.parse_return()
    else:
        return None
    parser.eat('SEMI')
    return stmt


def parse_declaration(parser: 'Parser') -> tuple:
    """
    Parse a `var` variable declaration.

    Syntax:
        var <identifier> = <expression>

    Args:
        parser: The parser instance.

    Returns:
        tuple: (DECL, name, expr, line)
    """
    parser.eat('VAR')
    id_tok = parser.curr_token
    parser.eat('ID')
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    return (Op.DECL, id_tok.value, expr_node, id_tok.line)


def parse_assignment(parser: 'Parser') -> tuple:
    """
    Parse assignment of an existing variable.

    Syntax:
        <identifier> = <expression>

    Args:
        parser: The parser instance.

    Returns:
        tuple: (ASSIGN, name, expr, line)
    """
    id_tok = parser.curr_token
    parser.eat('ID')
    parser.eat('ASSIGN')
    expr_node = parser.expr()
    return (Op.ASSIGN, id_tok.value, expr_node, id_tok.line)


def parse_return(parser: 'Parser') -> tuple:
    """
    Parse a 'return' statement.

    Syntax:
        return <expression>

    Args:
        parser: The parser instance.

    Returns:
        tuple: (RETURN, expr, line)
    """
    tok = parser.curr_token
    parser.eat('RETURN')
    expr_node = parser.expr()
    return (Op.RETURN, expr_node, tok.line)
