"""
foolang Interpreter

This is the main entry point for the foolang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into top-level items following the language grammar.
4. The Program registers every function and walks the entry block.
5. The final variables of the entry block are printed.
"""
import os
import sys

from foolang.exceptions import FooError
from foolang.formatting import format_items
from foolang.interpreter import Program
from foolang.lexer import tokenize
from foolang.parser import Parser


def print_usage():
    """
    Print usage.
    """
    print()
    print("foolang Interpreter")
    print()
    print("Usage:")
    print("    foo [--ast] <script.foo>")
    print()
    print("Arguments:")
    print("    <script.foo>")
    print("        Path to a foolang source file to execute. The file must contain")
    print("        exactly one 'begin { ... }' block.")
    print()
    print("Example:")
    print("    foo add.foo")
    print()
    print("Options:")
    print("    --ast")
    print("        Print the parsed items instead of running the script.")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    FOODEBUG")
    print("        When set, print the tokens and parsed items before running.")


def debug_print_tokens_ast(tokens, items):
    """
    Print tokenized source and parsed items
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(format_items(items))
    print(" ")


def run_script(script_name: str, ast_only: bool = False) -> int:
    """
    Run a foolang script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {script_name}: {e}")
        return 1

    try:
        if ast_only:
            print(format_items(Parser(tokenize(code, script_name), script_name)))
            return 0

        if os.environ.get('FOODEBUG'):
            tokens = list(tokenize(code, script_name))
            items = Parser(tokens, script_name).parse()
            debug_print_tokens_ast(tokens, items)
        else:
            items = Parser(tokenize(code, script_name), script_name)

        program = Program.from_items(items, script_name)
        scope = program.execute()
    except FooError as e:
        print(f"{e.stage} error: {type(e).__name__}: {e}")
        return 1
    except RecursionError:
        print(f"fatal error: maximum call depth exceeded in {script_name}")
        return 1

    for name, value in scope.vars.items():
        print(f"{name} = {value}")
    return 0


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - ``--ast`` followed by a path: print the parsed items of the script.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    if len(args) == 2 and args[0] == '--ast':
        return run_script(args[1], ast_only=True)
    print_usage()
    return 2


if __name__ == "__main__":
    sys.exit(main(sys.argv))
