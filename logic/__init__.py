# logic/__init__.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator

"""Core formula evaluation.

This package provides:
  • evaluate: reduce a closed formula to a boolean
  • simplify: reduce an integer expression under an environment
  • Environment / Binding: stack of active quantifier bindings
  • EvaluationError and its subclasses UnboundVariable, DivisionByZero,
    InvalidOperator: terminal evaluation faults
"""

from .environment import Binding, Environment
from .evaluator import Evaluator, evaluate
from .exceptions import (
    DivisionByZero,
    EvaluationError,
    InvalidOperator,
    UnboundVariable,
)
from .simplifier import Simplifier, simplify, truncating_div, truncating_mod

__all__ = [
    "Binding",
    "Environment",
    "Evaluator",
    "evaluate",
    "Simplifier",
    "simplify",
    "truncating_div",
    "truncating_mod",
    "EvaluationError",
    "UnboundVariable",
    "DivisionByZero",
    "InvalidOperator",
]
