"""tinyscript command line entry point.

Usage:
    tinyscript demo                   Lex the built-in sample program
    tinyscript tokenize <file>        Display the token stream of a file

Options:
    -v, --verbose                     Log debug output to stderr
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from tinyscript.lexer.lexer import Lexer, LexResult

DEMO_SOURCE = """
    # This is a comment

    var var1 = 1;
    var1 = var1 + 1;

    function add(a, b) {
        return a + b;
    }

    const var2 = 2;
    const var3 = add(var1, var2);
    """


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    if "-v" in args or "--verbose" in args:
        args = [a for a in args if a not in ("-v", "--verbose")]
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    if len(args) < 1:
        print(__doc__.strip())
        return 1

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from tinyscript import __version__
        print(f"tinyscript {__version__}")
        return 0

    if command == "demo":
        return _cmd_demo()

    if command != "tokenize":
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1

    if len(args) < 2:
        print(f"Error: command '{command}' requires a file argument")
        return 1

    filepath = Path(args[1])
    if not filepath.exists():
        print(f"Error: file not found: {filepath}")
        return 1

    source = filepath.read_text(encoding="utf-8")
    return _cmd_tokenize(source, str(filepath))


def _cmd_demo() -> int:
    """Print the tokens of the built-in sample program."""
    result = Lexer(DEMO_SOURCE, "<demo>").tokenize()
    _print_tokens(result)
    return 0


def _cmd_tokenize(source: str, filename: str) -> int:
    """Display the token stream, reporting a lexing error if one stopped it."""
    result = Lexer(source, filename).tokenize()
    _print_tokens(result)

    if result.truncated:
        print(f"Lexer error: {result.error}")
        return 1
    return 0


def _print_tokens(result: LexResult) -> None:
    for tok in result:
        print(tok)


if __name__ == "__main__":
    sys.exit(main())
