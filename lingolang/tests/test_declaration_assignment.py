"""
Tests for declarations and assignments in Lingo.
"""
import pytest

from lingolang.exceptions import UndefinedVariableError

from lingolang.tests.utils import run_program


def test_decl_and_assign_runtime():
    interpreter, _ = run_program("let x = 5;\nx = x + 1;\n")
    assert interpreter.vars == {"x": 6.0}


def test_assign_without_decl_raises():
    with pytest.raises(UndefinedVariableError) as excinfo:
        run_program("x = 5;")
    assert excinfo.value.varname == "x"
    assert str(excinfo.value) == "Undefined variable 'x' on line 1"


def test_assignment_does_not_duplicate_binding():
    interpreter, _ = run_program("let x = 1; x = 2;")
    assert interpreter.vars == {"x": 2.0}


def test_redeclaration_in_same_scope_overwrites():
    interpreter, _ = run_program("let x = 1; let x = \"two\";")
    assert interpreter.vars == {"x": "two"}


def test_assignment_is_an_expression():
    _, printed = run_program("let a = 0; let b = 0; a = b = 3; print(a + b); print(a = 7);")
    assert printed == ["6", "7"]


def test_lookup_of_undefined_variable():
    with pytest.raises(UndefinedVariableError, match="Undefined variable 'missing' on line 2"):
        run_program("let x = 1;\nprint(missing);")


def test_let_value_is_evaluated_before_binding():
    with pytest.raises(UndefinedVariableError):
        run_program("let x = x + 1;")
