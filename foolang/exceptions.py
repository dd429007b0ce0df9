"""Errors.

Every failure the pipeline can produce is a subclass of :class:`FooError`.
The ``stage`` attribute names the part of the pipeline that failed so a
host can report "lex", "parse", "program" or "evaluate" failures without
inspecting the concrete class.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class FooError(Exception):
    """
    Base class for all language errors.
    """
    stage = None


class LexError(FooError):
    """
    Error for characters the lexer cannot classify.
    """
    stage = "lex"

    def __init__(self, char, offset, line=None, file=None):
        self.char = char
        self.offset = offset
        self.line = line
        message = f"Unexpected character {char!r} at offset {offset}"
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class ParseError(FooError):
    """
    Error for unexpected or missing tokens.
    """
    stage = "parse"

    def __init__(self, expected, token, file=None):
        self.expected = expected
        self.token = token
        self.offset = token.offset
        self.line = token.line
        if token.type == 'EOF':
            found = "end of input"
        else:
            found = f"'{token.value}' of type {token.type}"
        message = f"Expected {expected}, but got {found} at offset {token.offset} on line {token.line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class ProgramError(FooError):
    """
    Error for programs that cannot be assembled from their items.
    """
    stage = "program"

    def __init__(self, message, name=None, line=None, file=None):
        self.name = name
        self.line = line
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class EvaluationError(FooError):
    """
    Base class for errors raised while executing a program.
    """
    stage = "evaluate"
    description = "Evaluation error for"

    def __init__(self, name, line=None, file=None, detail=None):
        self.name = name
        self.line = line
        message = f"{self.description} '{name}'"
        if detail is not None:
            message += f" ({detail})"
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UndefinedVariableError(EvaluationError):
    """
    Error for references to undeclared variables.
    """
    description = "Undefined variable"


class RedeclarationError(EvaluationError):
    """
    Error for declaring a variable twice in one scope.
    """
    description = "Redeclaration of variable"


class AssignToUndeclaredError(EvaluationError):
    """
    Error for assigning to a variable that was never declared.
    """
    description = "Assignment to undeclared variable"


class UndefinedFunctionError(EvaluationError):
    """
    Error for calls to unknown functions.
    """
    description = "Undefined function"


class ArityMismatchError(EvaluationError):
    """
    Error for calls with the wrong number of arguments.
    """
    description = "Wrong number of arguments for function"

    def __init__(self, name, expected, received, line=None, file=None):
        self.expected = expected
        self.received = received
        super().__init__(
            name, line, file,
            detail=f"expected {expected}, got {received}",
        )


class MissingReturnError(EvaluationError):
    """
    Error for functions that finish without returning a value.
    """
    description = "Missing return value in function"


class DoubleReturnError(EvaluationError):
    """
    Error for a second return executed in the same invocation.
    """
    description = "Function already returned a value"


class ReturnOutsideFunctionError(EvaluationError):
    """
    Error for return statements in the entry block.
    """
    description = "Return outside of a function in block"


class ValueTypeError(EvaluationError):
    """
    Error for operands of the wrong runtime type.
    """
    description = "Unsupported operand type for"
