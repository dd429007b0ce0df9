"""foolang.

A small imperative language: a lexer, a recursive descent parser and a
tree-walk interpreter.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
