"""
Utility functions shared across foolang tests.
"""
from pathlib import Path

from foolang.interpreter import Program, Scope
from foolang.lexer import tokenize
from foolang.parser import Parser


def token_types(source: str) -> list[str]:
    """
    Tokenize source code and return the token types.
    """
    return [tok.type for tok in tokenize(source)]


def parse_source(source: str) -> list:
    """
    Parse source code and return the list of items.
    """
    parser = Parser(tokenize(source, "<test>"), "<test>")
    return parser.parse()


def run_source(source: str) -> Scope:
    """
    Run source code and return the entry block's final scope.
    """
    program = Program.from_items(parse_source(source), "<test>")
    return program.execute()


def run_file(path: Path) -> Scope:
    """
    Run a file and return the entry block's final scope.
    """
    code = path.read_text(encoding="utf-8")
    parser = Parser(tokenize(code, str(path)), str(path))
    program = Program.from_items(parser, str(path))
    return program.execute()
