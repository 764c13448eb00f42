"""Pipeline runner for Lingo.

`run_source()` drives the three stages (lex, parse, evaluate) for one program
against a fresh global scope and reports the outcome as a :class:`RunResult`
instead of raising: the printed values in order, the final global bindings,
the program's final value, and the `LingoError` that stopped the run, if any.

`format_report()` renders a result as console text: a printed-output section
followed by the global environment as JSON, or an error section.


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import json
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from lingolang.config import KeywordConfig
from lingolang.exceptions import LingoError, NestingDepthError
from lingolang.interpreter import Interpreter, format_value
from lingolang.lexer import tokenize
from lingolang.parser import Parser


@dataclass
class RunResult:
    """
    Outcome of one program run.
    """
    output: list = field(default_factory=list)
    globals: dict = field(default_factory=dict)
    value: Any = None
    error: Optional[LingoError] = None
    tokens: list = field(default_factory=list, repr=False)
    ast: Any = field(default=None, repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def printed(self) -> list[str]:
        """
        The printed values in their display form.
        """
        return [format_value(value) for value in self.output]


def run_source(
    code: str,
    keywords: Optional[KeywordConfig] = None,
    sink: Optional[Callable] = None,
    interpreter: Optional[Interpreter] = None,
) -> RunResult:
    """
    Lex, parse and evaluate ``code``.

    Parameters:
        code (str): The program source.
        keywords (KeywordConfig): Keyword spellings, English by default.
        sink (callable): Optional extra receiver called once per printed value.
        interpreter (Interpreter): Reuse this interpreter's global scope instead
            of a fresh one. Its own sink is not called while the run lasts.

    Returns:
        RunResult: The recorded output and globals, with ``error`` set when a
        stage failed. Output printed before a runtime error is kept. A program
        nested too deeply for the Python stack reports a `NestingDepthError`.
    """
    result = RunResult()

    def record(value):
        result.output.append(value)
        if sink is not None:
            sink(value)

    if interpreter is None:
        interpreter = Interpreter(record)
        restore = None
    else:
        restore = interpreter.sink
        interpreter.sink = record

    stage = "lex"
    try:
        result.tokens = tokenize(code, keywords)
        stage = "parse"
        result.ast = Parser(result.tokens).parse()
        stage = "runtime"
        result.value = interpreter.run(result.ast)
    except LingoError as e:
        result.error = e
    except RecursionError:
        result.error = NestingDepthError(stage)
    finally:
        if restore is not None:
            interpreter.sink = restore
        result.globals = interpreter.global_env.bindings()
    return result


def _json_value(value):
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def format_report(result: RunResult) -> str:
    """
    Render a run result as console text.
    """
    if result.error is not None:
        return f"--- ERROR ---\n{type(result.error).__name__}: {result.error}"

    lines = []
    if result.output:
        lines.append("--- Printed Output ---")
        lines.extend(result.printed)
    else:
        lines.append("--- No Printed Output ---")
    lines.append("")
    lines.append("--- Final Environment (Global) ---")
    env = {name: _json_value(value) for name, value in result.globals.items()}
    lines.append(json.dumps(env, indent=2, ensure_ascii=False))
    return "\n".join(lines)
