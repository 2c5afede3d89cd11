from lisp_compute.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
