"""Runs the bundled example programs into one combined report.

Each example gets a section header followed by its transcript. A failing
example contributes a one-line error entry instead and the report carries on.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path

from lisp_compute.config import get_examples_root
from lisp_compute.errors import ProgramError
from lisp_compute.interpreter import Interpreter, default_interpreter

logger = logging.getLogger(__name__)

EXAMPLES: tuple[tuple[str, str], ...] = (
    ("FIBONACCI", "fibonacci.scm"),
    ("ADVANCED", "advanced.scm"),
    ("LIST PROCESSING", "list-processing.scm"),
    ("TURING COMPLETE", "turing-complete.scm"),
    ("COMPUTATIONAL PATTERNS", "computational-patterns.scm"),
)


def load_example(filename: str, root: Path | None = None) -> str:
    path = (root or get_examples_root()) / filename
    return path.read_text(encoding="utf-8")


def run_examples(
    interpreter: Interpreter | None = None,
    root: Path | None = None,
    examples: tuple[tuple[str, str], ...] = EXAMPLES,
) -> str:
    interp = interpreter or default_interpreter()
    with StringIO() as output:
        for title, filename in examples:
            output.write(f"=== {title} EXAMPLE ===\n")
            try:
                output.write(interp.run(load_example(filename, root)))
            except ProgramError as e:
                logger.warning("example %s failed on line %d: %s", filename, e.line, e)
                output.write(f"Error running {filename}: {e}\n")
            output.write("\n")
        return output.getvalue()
