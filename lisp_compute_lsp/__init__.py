"""lisp_compute language server package.

This package provides:
- A pygls-based Language Server for lisp_compute programs.
- A line indexer that evaluates each program line and collects failures.
"""

__all__ = [
    "server",
    "indexer",
]
