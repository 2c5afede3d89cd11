from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (lisp_compute package directory)
_PACKAGE_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_EXAMPLES_DIR = _PACKAGE_DIR / 'examples'
DEFAULT_MAX_DEPTH = 200


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip())


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= 0 else default


def get_examples_root() -> Path:
    p = path_from_env('LISP_COMPUTE_EXAMPLES_PATH', _DEFAULT_EXAMPLES_DIR)
    # a file path selects its directory
    return p if p.is_dir() or not p.exists() else p.parent


def get_max_depth() -> int:
    """Nesting limit for the evaluator; 0 disables the check."""
    return int_from_env('LISP_COMPUTE_MAX_DEPTH', DEFAULT_MAX_DEPTH)
