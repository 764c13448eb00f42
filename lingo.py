"""
Lingo Language Interpreter

This is the main entry point for the Lingo language interpreter.

Workflow:
1. The keyword configuration is loaded from ``--keywords`` (JSON) and ``LINGO_<ROLE>``
   environment variables.
2. The source is read from the script given on the command line, or from ``-c``.
3. The Lexer tokenizes the source code using the configured keyword spellings.
4. The Parser processes tokens into an AST following the language grammar.
5. The Interpreter walks the AST, evaluating expressions and executing statements.
6. The printed output and final global environment (or the error) are reported.

With no script and no ``-c`` the interpreter starts an interactive REPL. Set ``LINGODEBUG``
to dump the tokens and AST before evaluation.


File: lingo.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import argparse
import sys

from lingolang.config import KeywordConfig, debug_enabled
from lingolang.exceptions import ParseError
from lingolang.interpreter import Interpreter, print_sink
from lingolang.runner import RunResult, format_report, run_source
from lingolang.tokens import TokenType


def debug_print_tokens_ast(result: RunResult):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(result.tokens)
    print("\nAST:\n")
    print(result.ast)
    print(" ")


def load_keywords(path: str | None) -> KeywordConfig:
    """
    Load keyword spellings from an optional JSON file plus environment overrides.
    """
    config = KeywordConfig.from_file(path) if path else KeywordConfig()
    return config.with_env()


def run_code(code: str, keywords: KeywordConfig, quiet: bool = False) -> int:
    """
    Run a whole program and print its report. Returns the exit status.
    """
    sink = print_sink if quiet else None
    result = run_source(code, keywords, sink=sink)

    if debug_enabled():
        debug_print_tokens_ast(result)

    if quiet:
        if not result.ok:
            print(f"{type(result.error).__name__}: {result.error}")
    else:
        print(format_report(result))
    return 0 if result.ok else 1


def run_script(script_name: str, keywords: KeywordConfig, quiet: bool = False) -> int:
    """
    Run a Lingo script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return run_code(code, keywords, quiet)


def run_repl(keywords: KeywordConfig):
    """
    Run the interactive REPL
    """
    print("Lingo Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter()
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            result = run_source(
                "\n".join(buffer), keywords, sink=print_sink, interpreter=interpreter
            )
            error = result.error
            # If the parser ran out of input, assume the input is incomplete
            if isinstance(error, ParseError) and error.actual == TokenType.EOF:
                continue
            if error is not None:
                print(f"{type(error).__name__}: {error}")
            buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Build the command-line argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="lingo",
        description="Lingo language interpreter. Runs a script, inline code, or a REPL.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "script",
        nargs="?",
        default=None,
        help="Path to a Lingo source file",
    )
    parser.add_argument(
        "-c",
        dest="code",
        default=None,
        help="Program passed in as a string",
    )
    parser.add_argument(
        "--keywords",
        default=None,
        help="JSON file mapping keyword roles (let, print, if, ...) to spellings",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Print only the program's output, without the environment report",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - ``-c CODE``: run the given code.
    - A script path: run the script.
    - Neither: enter the REPL.
    Returns 1 when the program failed or the keyword configuration is invalid.
    """
    args = build_arg_parser().parse_args(argv)
    try:
        keywords = load_keywords(args.keywords)
    except (OSError, ValueError) as e:
        print(f"Invalid keyword configuration: {e}")
        return 1

    if args.code is not None:
        return run_code(args.code, keywords, args.quiet)
    if args.script is not None:
        return run_script(args.script, keywords, args.quiet)
    run_repl(keywords)
    return 0


if __name__ == "__main__":
    sys.exit(main())
