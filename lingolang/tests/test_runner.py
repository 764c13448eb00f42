"""
Tests for the run_source pipeline and its console report.
"""
from lingolang.config import KeywordConfig
from lingolang.exceptions import (
    DivisionByZeroError,
    LexError,
    NestingDepthError,
    ParseError,
    UndefinedVariableError,
)
from lingolang.interpreter import Interpreter
from lingolang.runner import format_report, run_source


DEFAULT_EXAMPLE = """print("--- While Loop Example ---");
let i = 0;
while (i < 3) {
    print(i);
    i = i + 1;
}

print("--- For Loop Example ---");
for (let j = 0; j < 3; j = j + 1) {
    print(j);
}

print("--- Logic Example ---");
let a = true;
let b = false;
if (a && !b) {
    print("Logic works!");
} else {
    print("Something is wrong");
}

print("--- Short-Circuit OR ---");
print(true || (1 / 0)); // Does not error

print("--- Unicode Variable Names ---");
let 变量 = 42;
let 日本語 = "こんにちは";
print(变量);
print(日本語);

print("--- Tamil Support ---");
let தமிழ் = "வணக்கம்";
let எண் = 100;
let மென்பொருள் = true;
print(தமிழ்);
print(எண்);
print(மென்பொருள்);"""


def test_successful_run():
    result = run_source("let x = 1 + 2; print(x); print(\"hi\");")
    assert result.ok
    assert result.error is None
    assert result.output == [3.0, "hi"]
    assert result.printed == ["3", "hi"]
    assert result.globals == {"x": 3.0}


def test_example_program():
    """
    Test the bundled example program end to end.
    """
    result = run_source(DEFAULT_EXAMPLE)
    assert result.ok
    assert result.printed == [
        "--- While Loop Example ---",
        "0", "1", "2",
        "--- For Loop Example ---",
        "0", "1", "2",
        "--- Logic Example ---",
        "Logic works!",
        "--- Short-Circuit OR ---",
        "true",
        "--- Unicode Variable Names ---",
        "42",
        "こんにちは",
        "--- Tamil Support ---",
        "வணக்கம்",
        "100",
        "true",
    ]
    assert result.globals == {
        "i": 3.0,
        "a": True,
        "b": False,
        "变量": 42.0,
        "日本語": "こんにちは",
        "தமிழ்": "வணக்கம்",
        "எண்": 100.0,
        "மென்பொருள்": True,
    }


def test_errors_are_returned_per_stage():
    lex = run_source("let x = 1 @ 2;")
    assert isinstance(lex.error, LexError)
    assert lex.error.stage == "lex"

    parse = run_source("let = 1;")
    assert isinstance(parse.error, ParseError)
    assert parse.error.stage == "parse"

    runtime = run_source("print(nope);")
    assert isinstance(runtime.error, UndefinedVariableError)
    assert runtime.error.stage == "runtime"
    assert not runtime.ok


def test_output_before_runtime_error_is_kept():
    result = run_source("let a = 1; print(a); print(a / 0); print(2);")
    assert isinstance(result.error, DivisionByZeroError)
    assert result.printed == ["1"]
    assert result.globals == {"a": 1.0}


def test_sink_receives_values_in_order():
    received = []
    result = run_source("print(1); print(true); print(\"s\");", sink=received.append)
    assert received == [1.0, True, "s"]
    assert result.output == received


def test_keywords_are_applied():
    result = run_source("var x = 2; print(x * x);", KeywordConfig(let="var"))
    assert result.printed == ["4"]


def test_shared_interpreter_keeps_globals():
    interpreter = Interpreter(lambda value: None)
    run_source("let total = 1;", interpreter=interpreter)
    result = run_source("total = total + 1; print(total);", interpreter=interpreter)
    assert result.ok
    assert result.printed == ["2"]
    assert result.globals == {"total": 2.0}


def test_unbraced_for_loop():
    result = run_source("for (let i=0; i<3; i=i+1) print(i);")
    assert result.ok
    assert result.printed == ["0", "1", "2"]
    assert result.globals == {}


def test_long_operator_chain_is_reported():
    code = "let x = " + " + ".join(["1"] * 5000) + "; print(x);"
    result = run_source(code)
    assert isinstance(result.error, NestingDepthError)
    assert result.error.stage == "runtime"
    assert str(result.error) == "Expression nested too deeply"
    assert result.output == []


def test_deep_unary_nesting_is_reported():
    result = run_source("print(" + "-" * 5000 + "1);")
    assert isinstance(result.error, NestingDepthError)
    assert result.error.stage == "parse"


def test_shared_interpreter_survives_deep_nesting():
    interpreter = Interpreter(lambda value: None)
    run_source("let total = 1;", interpreter=interpreter)
    failed = run_source("print(" + "!" * 5000 + "true);", interpreter=interpreter)
    assert isinstance(failed.error, NestingDepthError)
    result = run_source("print(total);", interpreter=interpreter)
    assert result.printed == ["1"]


def test_report_with_output():
    result = run_source("let x = 1; let s = \"hi\"; let ok = true; print(s);")
    assert format_report(result) == (
        "--- Printed Output ---\n"
        "hi\n"
        "\n"
        "--- Final Environment (Global) ---\n"
        "{\n"
        "  \"x\": 1,\n"
        "  \"s\": \"hi\",\n"
        "  \"ok\": true\n"
        "}"
    )


def test_report_without_output():
    result = run_source("let half = 0.5;")
    assert format_report(result) == (
        "--- No Printed Output ---\n"
        "\n"
        "--- Final Environment (Global) ---\n"
        "{\n"
        "  \"half\": 0.5\n"
        "}"
    )


def test_report_for_error():
    result = run_source("print(1 / 0);")
    assert format_report(result) == (
        "--- ERROR ---\nDivisionByZeroError: Cannot divide by zero on line 1"
    )
