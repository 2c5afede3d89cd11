from pathlib import Path

import pytest

from lisp_compute import config


def test_default_examples_root():
    root = config.get_examples_root()
    assert root == Path(config.__file__).resolve().parent / "examples"
    assert (root / "fibonacci.scm").is_file()


def test_examples_root_from_env(tmp_path, monkeypatch):
    monkeypatch.setenv("LISP_COMPUTE_EXAMPLES_PATH", str(tmp_path))
    assert config.get_examples_root() == tmp_path


def test_examples_root_file_selects_parent(tmp_path, monkeypatch):
    f = tmp_path / "advanced.scm"
    f.write_text("#t\n", encoding="utf-8")
    monkeypatch.setenv("LISP_COMPUTE_EXAMPLES_PATH", str(f))
    assert config.get_examples_root() == tmp_path


def test_blank_examples_path_uses_default(monkeypatch):
    monkeypatch.setenv("LISP_COMPUTE_EXAMPLES_PATH", "   ")
    assert config.get_examples_root().name == "examples"


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, config.DEFAULT_MAX_DEPTH),
        ("50", 50),
        (" 7 ", 7),
        ("0", 0),
        ("-3", config.DEFAULT_MAX_DEPTH),
        ("lots", config.DEFAULT_MAX_DEPTH),
        ("", config.DEFAULT_MAX_DEPTH),
    ],
)
def test_max_depth(raw, expected, monkeypatch):
    if raw is not None:
        monkeypatch.setenv("LISP_COMPUTE_MAX_DEPTH", raw)
    assert config.get_max_depth() == expected
