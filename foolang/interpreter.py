"""Interpreter.

This is a tree-walk interpreter for evaluating the items produced by the
parser. There is no intermediate form: statements and expressions are
evaluated directly from their AST nodes.

1. Program Construction
`Program.from_items()` consumes the parsed items exactly once. The single
`begin` block becomes the entry point; every `func` definition is registered
in a read-only function table. A missing or repeated entry block, or two
functions with the same name, raise `ProgramError` before anything runs.

2. Environment
Each function invocation, and the entry block, runs against its own flat
`Scope`: one mapping holding parameters and declared variables, plus a
pending return slot. Functions are not closures, so a callee sees only its
parameters and the global function table.

3. Expression Evaluation
`Scope.reduce_expr()` evaluates integer literals, variable references,
additions and function calls. The only runtime value is an unsigned 32-bit
integer; additions wrap around modulo 2**32.

4. Statement Execution
`Scope.eval()` handles declarations, assignments and returns. Statements
after a function's first `return` still run, and a second `return` is an
error. The entry block may not return at all.

5. Error Handling
Every failure is raised as a subclass of `EvaluationError` naming the
offending variable or function, with line numbers and file context.
Unbounded recursion is left to surface as Python's `RecursionError`.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterable

from foolang.exceptions import (
    ArityMismatchError,
    AssignToUndeclaredError,
    DoubleReturnError,
    MissingReturnError,
    ProgramError,
    RedeclarationError,
    ReturnOutsideFunctionError,
    UndefinedFunctionError,
    UndefinedVariableError,
    ValueTypeError,
)
from foolang.lexer import tokenize
from foolang.operations import Op, U32_MAX
from foolang.parser import Parser


class FunctionTable(dict):
    """Dictionary of functions that disallows modification."""

    def __readonly(self, *_args, **_kwargs):  # type: ignore[no-untyped-def]
        raise TypeError("The function table is read-only")

    __setitem__ = __readonly  # type: ignore[assignment]
    __delitem__ = __readonly  # type: ignore[assignment]
    pop = __readonly  # type: ignore[assignment]
    popitem = __readonly  # type: ignore[assignment]
    clear = __readonly  # type: ignore[assignment]
    update = __readonly  # type: ignore[assignment]
    setdefault = __readonly  # type: ignore[assignment]
    __ior__ = __readonly  # type: ignore[assignment]


class Function:
    """Runtime representation of a function definition."""

    def __init__(self, name: str, params: list[str], body: list, line: int):
        self.name = name
        self.params = params
        self.body = body
        self.line = line

    def call(self, args: list[int], functions: FunctionTable, file: str) -> int:
        """
        Run the function body in a brand-new scope and return its result.

        Raises:
            MissingReturnError: If the body finished without returning.
        """
        scope = Scope(functions, file, function=self.name)
        for name, value in zip(self.params, args):
            scope.vars[name] = value

        for stmt in self.body:
            scope.eval(stmt)

        if scope.func_ret is None:
            raise MissingReturnError(self.name, self.line, file)
        return scope.func_ret


class Scope:
    """Variables and pending return value of one executing frame."""

    def __init__(self, functions: FunctionTable, file: str, function: str | None = None):
        """Initialize an empty scope with read access to the function table."""
        self.vars: dict[str, int] = {}
        self.func_ret: int | None = None
        self.functions = functions
        self.file = file
        self.function = function

    def reduce_expr(self, node: tuple) -> int:
        """
        Recursively evaluate an expression node and return its value.

        Parameters:
            node (tuple): An expression node. The first element is the node tag,
                          the last is the line number used for error reporting.

        Raises:
            UndefinedVariableError: If a referenced variable is not in scope.
            UndefinedFunctionError: If a called function does not exist.
            ArityMismatchError: If a call passes the wrong number of arguments.
            ValueTypeError: If an addition operand is not an integer.
        """
        op = node[0]
        line = node[-1]

        if op == Op.INT:
            return node[1]

        elif op == Op.VAR:
            varname = node[1]
            if varname not in self.vars:
                raise UndefinedVariableError(varname, line, self.file)
            return self.vars[varname]

        elif op == Op.ADD:
            lhs = self.reduce_expr(node[1])
            rhs = self.reduce_expr(node[2])
            for operand in (lhs, rhs):
                if not isinstance(operand, int):
                    raise ValueTypeError(
                        '+', line, self.file,
                        detail=f"can't add {type(operand).__name__}",
                    )
            return (lhs + rhs) & U32_MAX

        elif op == Op.CALL:
            _, func_name, arg_nodes, _ = node
            if func_name not in self.functions:
                raise UndefinedFunctionError(func_name, line, self.file)
            func = self.functions[func_name]
            if len(arg_nodes) != len(func.params):
                raise ArityMismatchError(
                    func_name, len(func.params), len(arg_nodes), line, self.file
                )
            args = [self.reduce_expr(arg) for arg in arg_nodes]
            return func.call(args, self.functions, self.file)

        raise RuntimeError(f"Invalid expression node: {node}")

    def eval(self, stmt: tuple) -> None:
        """
        Execute a single statement against this scope.

        Raises:
            RedeclarationError: If a declared variable already exists.
            AssignToUndeclaredError: If an assigned variable does not exist.
            DoubleReturnError: If the frame already returned a value.
        """
        kind = stmt[0]
        line = stmt[-1]

        if kind == Op.DECL:
            _, var_name, expr_node, _ = stmt
            if var_name in self.vars:
                raise RedeclarationError(var_name, line, self.file)
            self.vars[var_name] = self.reduce_expr(expr_node)

        elif kind == Op.ASSIGN:
            _, var_name, expr_node, _ = stmt
            if var_name not in self.vars:
                raise AssignToUndeclaredError(var_name, line, self.file)
            self.vars[var_name] = self.reduce_expr(expr_node)

        elif kind == Op.RETURN:
            _, expr_node, _ = stmt
            if self.func_ret is not None:
                raise DoubleReturnError(self.function, line, self.file)
            self.func_ret = self.reduce_expr(expr_node)

        else:
            raise RuntimeError(f"Unknown statement type: {kind} on line {line} in {self.file}")


class Program:
    """A parsed program: the entry block plus the function table."""

    def __init__(self, entry: list, functions: FunctionTable, file: str = '<string>'):
        self.entry = entry
        self.functions = functions
        self.file = file

    @classmethod
    def from_items(cls, items: Iterable[tuple], file: str = '<string>') -> 'Program':
        """
        Build a program from a sequence of parsed items.

        Raises:
            ProgramError: If there is not exactly one entry block, or if two
                          functions share a name.
        """
        entry = None
        functions: dict[str, Function] = {}

        for item in items:
            kind = item[0]
            line = item[-1]
            if kind == Op.ENTRY:
                if entry is not None:
                    raise ProgramError("Multiple begin blocks are not allowed", line=line, file=file)
                entry = item[1]
            elif kind == Op.FUNC_DEF:
                _, name, params, body, _ = item
                if name in functions:
                    raise ProgramError(
                        f"Function '{name}' is already defined", name=name, line=line, file=file
                    )
                functions[name] = Function(name, params, body, line)
            else:
                raise RuntimeError(f"Unknown item type: {kind} on line {line} in {file}")

        if entry is None:
            raise ProgramError("Program has no begin block", file=file)

        return cls(entry, FunctionTable(functions), file)

    def execute(self) -> Scope:
        """
        Run the entry block and return its final scope.

        Raises:
            ReturnOutsideFunctionError: If the entry block contains a return.
        """
        for stmt in self.entry:
            if stmt[0] == Op.RETURN:
                raise ReturnOutsideFunctionError('begin', stmt[-1], self.file)

        scope = Scope(self.functions, self.file)
        for stmt in self.entry:
            scope.eval(stmt)
        return scope


def run_source(code: str, file: str = '<string>') -> Scope:
    """
    Tokenize, parse and execute a program, returning the entry block's final scope.
    """
    parser = Parser(tokenize(code, file), file)
    program = Program.from_items(parser, file)
    return program.execute()
