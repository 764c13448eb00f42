"""
Tests for the lingo command-line interface.
"""
import json

import lingo


def test_inline_code_report(capsys):
    status = lingo.main(["-c", "let x = 1 + 2; print(x);"])
    out = capsys.readouterr().out
    assert status == 0
    assert out.startswith("--- Printed Output ---\n3\n")
    assert "\"x\": 3" in out


def test_quiet_prints_only_output(capsys):
    status = lingo.main(["-q", "-c", "print(1); print(\"two\");"])
    assert status == 0
    assert capsys.readouterr().out == "1\ntwo\n"


def test_failure_status(capsys):
    status = lingo.main(["-c", "print(x);"])
    out = capsys.readouterr().out
    assert status == 1
    assert "--- ERROR ---" in out
    assert "UndefinedVariableError: Undefined variable 'x' on line 1" in out


def test_quiet_failure(capsys):
    status = lingo.main(["-q", "-c", "print(1); print(1 / 0);"])
    assert status == 1
    assert capsys.readouterr().out == "1\nDivisionByZeroError: Cannot divide by zero on line 1\n"


def test_script_with_keywords(tmp_path, capsys):
    script = tmp_path / "hello.lingo"
    script.write_text("var greeting = \"hello\";\nsay(greeting + \" world\");\n", encoding="utf-8")
    keywords = tmp_path / "keywords.json"
    keywords.write_text(json.dumps({"letKeyword": "var", "printKeyword": "say"}), encoding="utf-8")

    status = lingo.main(["--keywords", str(keywords), "-q", str(script)])
    assert status == 0
    assert capsys.readouterr().out == "hello world\n"


def test_environment_keyword_override(monkeypatch, capsys):
    monkeypatch.setenv("LINGO_PRINT", "show")
    status = lingo.main(["-q", "-c", "show(5);"])
    assert status == 0
    assert capsys.readouterr().out == "5\n"


def test_invalid_keyword_file(tmp_path, capsys):
    keywords = tmp_path / "keywords.json"
    keywords.write_text(json.dumps({"letKeyword": "let", "printKeyword": "let"}), encoding="utf-8")
    status = lingo.main(["--keywords", str(keywords), "-c", "print(1);"])
    assert status == 1
    assert "Invalid keyword configuration" in capsys.readouterr().out


def test_debug_dump(monkeypatch, capsys):
    monkeypatch.setenv("LINGODEBUG", "1")
    lingo.main(["-q", "-c", "print(1);"])
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "AST:" in out


def test_repl_buffers_incomplete_input(monkeypatch, capsys):
    """
    Test that the REPL keeps globals between inputs and waits for a block to close.
    """
    lines = iter([
        "let x = 1;",
        "if (x == 1) {",
        "    print(\"yes\");",
        "}",
        "print(y);",
        "x = x + 1; print(x);",
        "exit",
    ])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    status = lingo.main([])
    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert "yes" in out
    assert "UndefinedVariableError: Undefined variable 'y' on line 1" in out
    assert "2" in out


def test_repl_ends_on_eof(monkeypatch, capsys):
    def raise_eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", raise_eof)
    assert lingo.main([]) == 0
    assert "REPL" in capsys.readouterr().out


def test_missing_script(tmp_path, capsys):
    status = lingo.main([str(tmp_path / "missing.lingo")])
    out = capsys.readouterr().out
    assert status == 1
    assert out.startswith("FileNotFoundError: ")
    assert "missing.lingo" in out
