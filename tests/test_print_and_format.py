from io import StringIO

import pytest

from tinylisp.types.errors import LispArityError, LispTypeError
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol
from tinylisp.builtin.env_builtin import make_global_environment
from tinylisp.builtin.io_builtin import StdConsole
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.parser import read_program


def test_print_outputs_and_returns_last_argument(run, console):
    result = run('(print "alpha" 42 (list 1 "b"))')
    assert console.text == 'alpha 42 (1 "b")\n'
    assert result == [1, "b"]


def test_print_without_arguments(run, console):
    assert run("(print)") is Nil
    assert console.text == "\n"


def test_print_evaluates_its_arguments(run, console):
    run("(print (+ 1 2) (concat \"a\" \"b\"))")
    assert console.text == "3 ab\n"


def test_read_returns_line_and_writes_prompt(run, console):
    console.lines.append("hello")
    assert run('(read "name? ")') == "hello"
    assert console.prompts == ["name? "]


def test_read_at_end_of_input(run, console):
    assert run("(read)") is Nil


def test_read_result_flows_into_expressions(run, console):
    console.lines.append("world")
    assert run('(concat "hello " (read))') == "hello world"


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(format "%d + %d = %v" 2 3 (+ 2 3))', "2 + 3 = 5"),
        ('(format "Hello %s" "world")', "Hello world"),
        ('(format "%v" (list 1 "a"))', '(1 "a")'),
        ('(format "%f" 1.5)', "1.500000"),
        ('(format "100%%")', "100%"),
        ('(format "no directives")', "no directives"),
        ('(format nil "x=%s" "y")', "x=y"),
        ('(format "%v|%v" true nil)', "true|nil"),
    ]
)
def test_format_template_positional(run, source, expected):
    assert run(source) == expected


def test_format_to_true_destination_writes_to_console(run, console):
    assert run('(format t "hi %v%%" 5)') == "hi 5%"
    assert console.text == "hi 5%"


def test_format_to_nil_destination_only_returns(run, console):
    run('(format nil "quiet")')
    assert console.text == ""


@pytest.mark.parametrize(
    "source,error",
    [
        ("(format)", LispArityError),
        ('(format "%v %v" 1)', LispArityError),
        ('(format "%v" 1 2)', LispArityError),
        ('(format "%d" 1.5)', LispTypeError),
        ('(format "%f" "x")', LispTypeError),
        ('(format "%q" 1)', LispTypeError),
        ("(format 1)", LispTypeError),
        ("(format t)", LispTypeError),
    ]
)
def test_format_errors(run, source, error):
    with pytest.raises(error):
        run(source)


def test_std_console_round_trip():
    out = StringIO()
    console = StdConsole(stdin=StringIO("line one\nline two\n"), stdout=out)
    env = make_global_environment(console)
    results = [evaluate(expr, env) for expr in read_program('(read "> ") (print (read))')]
    assert results == ["line one", "line two"]
    assert out.getvalue() == "> line two\n"


def test_builtins_are_plain_callables(env, console):
    pr = env.lookup(Symbol("print"))
    assert callable(pr)
    assert pr(env, ["direct", 1]) == 1
    assert console.text == "direct 1\n"
