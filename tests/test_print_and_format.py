import io

import pytest

from scheme import cli
from scheme.errors import SchemeRecursionError
from scheme.interpreter import Interpreter
from scheme.printer import to_lisp_string
from scheme.repl import run_repl
from scheme.types.function import Function
from scheme.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "1"),
        (-5, "-5"),
        (True, "#t"),
        (False, "#f"),
        (Symbol("abc"), "abc"),
        ([], "()"),
        ([1, [2, Symbol("a")], True], "(1 (2 a) #t)"),
        ([Symbol("quote"), Symbol("a")], "'a"),
        (Function([Symbol("x")], [Symbol("x")], Symbol("id")), "#<procedure id>"),
        (Function([], [1]), "#<procedure>"),
    ]
)
def test_to_lisp_string(value, expected):
    assert to_lisp_string(value) == expected


def test_to_lisp_string_deeply_nested():
    value: list = []
    for _ in range(5000):
        value = [value]
    with pytest.raises(SchemeRecursionError):
        to_lisp_string(value)


def test_function_str():
    fn = Function([Symbol("x")], [[Symbol("+"), Symbol("x"), 1]], Symbol("add1"))
    assert str(fn) == "(lambda (x) (+ x 1))"
    assert repr(fn) == "<Function add1 (lambda (x) (+ x 1))>"


def test_repl_prints_values_and_continues_after_errors():
    stdin = io.StringIO("(define (add1 x) (+ x 1))\n(car 1)\n(add1 41) '(1 2)\n")
    stdout = io.StringIO()
    run_repl(Interpreter(), stdin, stdout, prompt="> ")
    assert stdout.getvalue().split("\n") == [
        "> #<procedure add1>",
        "> error: SchemeTypeError: Cannot take car of non-list 1",
        "> 42",
        "(1 2)",
        "> ",
        "",
    ]


def test_repl_survives_deeply_nested_input():
    stdin = io.StringIO("(" * 5000 + ")" * 5000 + "\n(+ 1 2)\n")
    stdout = io.StringIO()
    run_repl(Interpreter(), stdin, stdout, prompt="> ")
    lines = stdout.getvalue().split("\n")
    assert lines[0].startswith("> error: SchemeRecursionError")
    assert lines[1:] == ["> 3", "> ", ""]


def test_interpret_main_expression(capsys):
    assert cli.interpret_main(["(+ 1 2)"]) == 0
    assert capsys.readouterr().out == "3\n"


def test_interpret_main_error(capsys):
    assert cli.interpret_main(["(car 1)"]) == 1
    assert "Application error" in capsys.readouterr().err


def test_interpret_main_path(tmp_path, capsys):
    src = tmp_path / "prog.scm"
    src.write_text("(define (sq x) (* x x))\n(cdr (cons (sq 3) '(1)))", encoding="utf-8")
    assert cli.interpret_main(["--path", str(src)]) == 0
    assert capsys.readouterr().out == "(1)\n"


def test_interpret_main_missing_file(tmp_path):
    assert cli.interpret_main(["--path", str(tmp_path / "missing.scm")]) == 1


def test_compile_main(tmp_path):
    src = tmp_path / "prog.scm"
    out = tmp_path / "prog.s"
    src.write_text("42", encoding="utf-8")
    assert cli.compile_main([str(src), "-o", str(out)]) == 0
    assert "movq $42, %rax" in out.read_text(encoding="utf-8")


def test_compile_main_default_output(tmp_path, monkeypatch):
    src = tmp_path / "prog.scm"
    src.write_text("1", encoding="utf-8")
    monkeypatch.setenv("SCHEME_OUTPUT", str(tmp_path / "env.asm"))
    assert cli.compile_main([str(src)]) == 0
    assert (tmp_path / "env.asm").exists()


def test_compile_main_error(tmp_path, capsys):
    src = tmp_path / "prog.scm"
    src.write_text("(1)", encoding="utf-8")
    assert cli.compile_main([str(src), "-o", str(tmp_path / "out.s")]) == 1
    assert "Application error" in capsys.readouterr().err


def test_interpret_main_oversized_integer(capsys):
    assert cli.interpret_main(["9" * 5000]) == 1
    assert "Application error" in capsys.readouterr().err


def test_compile_main_oversized_integer(tmp_path, capsys):
    src = tmp_path / "prog.scm"
    src.write_text("9" * 5000, encoding="utf-8")
    assert cli.compile_main([str(src), "-o", str(tmp_path / "out.s")]) == 1
    assert "Application error" in capsys.readouterr().err
