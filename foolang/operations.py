"""Shared definitions for AST node tags.

This module centralizes the tags used by the parser, the interpreter and the
formatter to label nodes in the abstract syntax tree. Every node is a tuple
whose first element is one of these tags and whose last element is the line
the node started on.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


# Largest value an integer literal or a sum may hold.
U32_MAX = 2**32 - 1


class Op(str, Enum):
    """
    Enumeration of supported AST node tags.
    """

    # Expressions
    INT = "int"             # (INT, value, line)
    VAR = "var"             # (VAR, name, line)
    ADD = "add"             # (ADD, lhs, rhs, line)
    CALL = "call"           # (CALL, name, args, line)

    # Statements
    DECL = "decl"           # (DECL, name, expr, line)
    ASSIGN = "assign"       # (ASSIGN, name, expr, line)
    RETURN = "return"       # (RETURN, expr, line)

    # Items
    ENTRY = "entry"         # (ENTRY, statements, line)
    FUNC_DEF = "func_def"   # (FUNC_DEF, name, params, body, line)

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


__all__ = ["Op", "U32_MAX"]
