from __future__ import annotations

import logging
from functools import lru_cache
from io import StringIO

from lisp_compute import LispValue
from lisp_compute.builtin.env_builtin import register
from lisp_compute.config import get_max_depth
from lisp_compute.errors import EvalError, ProgramError
from lisp_compute.evaluation.evaluator import evaluate
from lisp_compute.printer import render_result
from lisp_compute.types.environment import Environment

logger = logging.getLogger(__name__)

COMMENT_PREFIX = ";"


class Interpreter:
    """
    Evaluates single expressions and line-oriented programs.

    The builtin table is installed once and the environment frozen, so an
    instance is read-only after construction and may be shared freely. No state
    carries from one line, or one program, to the next.
    """

    def __init__(self, max_depth: int | None = None):
        self.env: Environment = Environment()
        register(self.env)
        self.env.freeze()
        self.max_depth: int = get_max_depth() if max_depth is None else max_depth

    def evaluate(self, line: str) -> LispValue:
        return evaluate(line, self.env, self.max_depth)

    def run(self, source: str) -> str:
        """Evaluate each program line and return the transcript.

        Blank lines and ``;`` comments are skipped. On the first failing line the
        error entry is appended and ProgramError is raised; the partial transcript
        is on its ``transcript`` attribute.
        """
        with StringIO() as output:
            for i, raw in enumerate(source.split("\n")):
                line = raw.strip()
                if not line or line.startswith(COMMENT_PREFIX):
                    continue
                output.write(f"Processing line {i}: '{line}'\n")
                logger.debug("line %d: %s", i, line)
                try:
                    result = self.evaluate(line)
                except EvalError as e:
                    output.write(f"Error on line {i}: {e}\n")
                    logger.info("program stopped at line %d: %s", i, e)
                    raise ProgramError(str(e), i, output.getvalue()) from e
                output.write(render_result(result))
                output.write("\n")
            return output.getvalue()


@lru_cache(maxsize=None)
def default_interpreter() -> Interpreter:
    return Interpreter()


def evaluate_line(line: str) -> LispValue:
    """Evaluate one expression with the shared default interpreter."""
    return default_interpreter().evaluate(line)


def run(source: str) -> str:
    """Run a program with the shared default interpreter."""
    return default_interpreter().run(source)
