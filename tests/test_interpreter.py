from concurrent.futures import ThreadPoolExecutor

import pytest

from lisp_compute import errors
from lisp_compute.interpreter import Interpreter, default_interpreter, evaluate_line, run
from lisp_compute.types.symbol import Symbol


def test_run_transcript(interp):
    output = interp.run('(display "Hello")\n(+ 1 2)\n#t')
    assert output == (
        "Processing line 0: '(display \"Hello\")'\n"
        "Hello\n"
        "Processing line 1: '(+ 1 2)'\n"
        "3\n"
        "Processing line 2: '#t'\n"
        "true\n"
    )


def test_run_indented_program(interp):
    program = """
        (display "Hello")
        (+ 1 2)
        #t
    """
    lines = interp.run(program).splitlines()
    assert lines == [
        "Processing line 1: '(display \"Hello\")'",
        "Hello",
        "Processing line 2: '(+ 1 2)'",
        "3",
        "Processing line 3: '#t'",
        "true",
    ]


def test_comments_and_blank_lines_are_skipped_but_counted(interp):
    output = interp.run("; a comment\n\n   ; indented comment\n(* 2 3)\n")
    assert output == "Processing line 3: '(* 2 3)'\n6\n"


def test_non_primitive_results_render_as_result(interp):
    output = interp.run("(list 1 2)\nnil\nfoo\n(vector 1)")
    assert output.splitlines()[1::2] == ["result", "result", "result", "result"]


def test_crlf_line_endings(interp):
    assert interp.run("(+ 1 2)\r\n#f\r\n") == (
        "Processing line 0: '(+ 1 2)'\n3\nProcessing line 1: '#f'\nfalse\n"
    )


def test_empty_program(interp):
    assert interp.run("") == ""
    assert interp.run("; nothing here\n") == ""


def test_run_stops_at_first_error(interp):
    with pytest.raises(errors.ProgramError) as info:
        interp.run("(+ 1 2)\n(foo 1)\n(+ 3 4)")
    err = info.value
    assert str(err) == "Unknown function: foo"
    assert err.line == 1
    assert err.transcript == (
        "Processing line 0: '(+ 1 2)'\n"
        "3\n"
        "Processing line 1: '(foo 1)'\n"
        "Error on line 1: Unknown function: foo\n"
    )
    assert "(+ 3 4)" not in err.transcript
    assert isinstance(err.__cause__, errors.SchemeUnknownFunction)


def test_program_error_is_an_eval_error(interp):
    with pytest.raises(errors.EvalError, match="Division by zero"):
        interp.run("(/ 1 0)")


def test_lines_do_not_share_state(interp):
    # there is no define; every line starts from the same frozen environment
    with pytest.raises(errors.ProgramError, match="Unknown function: define"):
        interp.run("(define x 1)\nx")


def test_environment_is_frozen(interp):
    assert interp.env.frozen
    with pytest.raises(errors.SchemeFrozenEnvironment):
        interp.env.define(Symbol("x"), 1.0)


def test_module_level_helpers():
    assert evaluate_line("(+ 1 2)") == 3.0
    assert run("(* 2 2)") == "Processing line 0: '(* 2 2)'\n4\n"
    assert default_interpreter() is default_interpreter()


def test_max_depth_from_config(monkeypatch):
    monkeypatch.setenv("LISP_COMPUTE_MAX_DEPTH", "3")
    assert Interpreter().max_depth == 3
    assert Interpreter(max_depth=9).max_depth == 9


def test_shared_interpreter_across_threads(interp):
    sources = [f"(+ {i} (* {i} 2))" for i in range(50)]
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(interp.evaluate, sources))
    assert results == [float(i * 3) for i in range(50)]
