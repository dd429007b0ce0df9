"""Formatting of parsed items for debugging.

Converts AST nodes back into readable, source-like text. Used by the
command line to dump the item tree when ``--ast`` or ``FOODEBUG`` is given.


File: formatting.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterable

from foolang.operations import Op


INDENT = "    "


def format_expr(node: tuple) -> str:
    """
    Convert an expression node back to a readable string.

    Args:
        node (tuple): An expression node, structured as a tuple.

    Returns:
        str: A string representation of the expression.
    """
    op = node[0]
    match op:
        case Op.INT:
            return str(node[1])
        case Op.VAR:
            return node[1]
        case Op.ADD:
            return f"{format_expr(node[1])} + {format_expr(node[2])}"
        case Op.CALL:
            _, name, args, _ = node
            return f"{name}({', '.join(format_expr(arg) for arg in args)})"
        case _:
            name = op if isinstance(op, str) else op.value
            return f"<expr {name}>"


def format_statement(stmt: tuple) -> str:
    """
    Convert a statement node back to a readable string.
    """
    match stmt[0]:
        case Op.DECL:
            return f"var {stmt[1]} = {format_expr(stmt[2])};"
        case Op.ASSIGN:
            return f"{stmt[1]} = {format_expr(stmt[2])};"
        case Op.RETURN:
            return f"return {format_expr(stmt[1])};"
        case _:
            return f"<stmt {stmt[0]}>"


def _format_block(statements: list) -> list[str]:
    lines = ["{"]
    lines.extend(INDENT + format_statement(stmt) for stmt in statements)
    lines.append("}")
    return lines


def format_item(item: tuple) -> str:
    """
    Convert a top-level item back to a readable, multi-line string.
    """
    match item[0]:
        case Op.ENTRY:
            lines = _format_block(item[1])
            lines[0] = "begin " + lines[0]
        case Op.FUNC_DEF:
            _, name, params, body, _ = item
            lines = _format_block(body)
            lines[0] = f"func {name}({', '.join(params)}) " + lines[0]
        case _:
            return f"<item {item[0]}>"
    return "\n".join(lines)


def format_items(items: Iterable[tuple]) -> str:
    """
    Format a sequence of items, separated by blank lines.
    """
    return "\n\n".join(format_item(item) for item in items)
