"""
Tests for loops and conditionals in Lingo.
"""
from lingolang.interpreter import Interpreter

from lingolang.tests.utils import parse_source, run_program


def test_for_and_while_are_equivalent():
    """
    Test that a for loop and the equivalent while loop print the same values.
    """
    _, for_printed = run_program("for (let i=0; i<3; i=i+1) { print(i); }")
    _, while_printed = run_program(
        "let i = 0;\n"
        "while (i < 3) {\n"
        "    print(i);\n"
        "    i = i + 1;\n"
        "}\n"
    )
    assert for_printed == ["0", "1", "2"]
    assert while_printed == for_printed


def test_single_statement_bodies():
    _, printed = run_program("for (let i=0; i<3; i=i+1) print(i);")
    assert printed == ["0", "1", "2"]

    _, printed = run_program("let n = 0; while (n < 2) n = n + 1; print(n);")
    assert printed == ["2"]

    _, printed = run_program('if (false) print("a"); else if (true) print("b"); else print("c");')
    assert printed == ["b"]


def test_single_statement_body_has_own_scope():
    interpreter, printed = run_program('let x = "outer"; if (true) let x = "inner"; print(x);')
    assert printed == ["outer"]
    assert interpreter.vars == {"x": "outer"}


def test_while_condition_false_initially():
    _, printed = run_program('while (false) { print("never"); } print("done");')
    assert printed == ["done"]


def test_for_with_missing_clauses():
    _, printed = run_program(
        "let i = 0;\n"
        "for (; i < 2;) { print(i); i = i + 1; }\n"
        "for (i = 10; false; ) { print(i); }\n"
        "print(i);\n"
    )
    assert printed == ["0", "1", "10"]


def test_for_increment_runs_after_body():
    _, printed = run_program(
        "let total = 0;\n"
        "for (let i = 1; i < 5; i = i + 1) { total = total + i; }\n"
        "print(total);\n"
    )
    assert printed == ["10"]


def test_nested_loops():
    _, printed = run_program(
        "for (let i = 0; i < 2; i = i + 1) {\n"
        "    for (let j = 0; j < 2; j = j + 1) {\n"
        "        print(i + \",\" + j);\n"
        "    }\n"
        "}\n"
    )
    assert printed == ["0,0", "0,1", "1,0", "1,1"]


def test_else_if_chain():
    source = (
        "if (n == 1) { print(\"one\"); }\n"
        "else if (n == 2) { print(\"two\"); }\n"
        "else { print(\"many\"); }\n"
    )
    results = []
    for n in ("1", "2", "3"):
        _, printed = run_program(f"let n = {n};\n" + source)
        results.extend(printed)
    assert results == ["one", "two", "many"]


def test_if_without_else_yields_null():
    interpreter = Interpreter(lambda value: None)
    assert interpreter.run(parse_source("if (false) { 1; }")) is None


def test_program_value_is_last_statement():
    interpreter = Interpreter(lambda value: None)
    assert interpreter.run(parse_source("let x = 3; x + 1")) == 4.0
    assert interpreter.run(parse_source("print(1);")) is None
    assert interpreter.run(parse_source("if (true) { 5; } else { 6; }")) == 5.0
    assert interpreter.run(parse_source("let k = 0; while (k < 2) { k = k + 1; }")) == 2.0


def test_fizzbuzz_style_program():
    _, printed = run_program(
        "for (let i = 1; i < 6; i = i + 1) {\n"
        "    if (i == 3) { print(\"Fizz\"); }\n"
        "    else if (i == 5) { print(\"Buzz\"); }\n"
        "    else { print(i); }\n"
        "}\n"
    )
    assert printed == ["1", "2", "Fizz", "4", "Buzz"]


def test_runs_are_deterministic():
    source = "let s = \"\"; for (let i = 0; i < 4; i = i + 1) { s = s + i; print(s); }"
    first, first_printed = run_program(source)
    second, second_printed = run_program(source)
    assert first_printed == second_printed == ["0", "01", "012", "0123"]
    assert first.vars == second.vars == {"s": "0123"}
