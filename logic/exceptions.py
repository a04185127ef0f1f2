# logic/exceptions.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Faults raised while evaluating formulas and expressions

"""Evaluation faults.

Every fault is terminal for the top-level evaluation that raised it: there is
no partial result and no local recovery. Callers either receive a boolean or
one of these exceptions.
"""


class EvaluationError(RuntimeError):
    """Base class for all evaluation faults."""

    pass


class UnboundVariable(EvaluationError):
    """Raised when a variable reference has no enclosing binding."""

    def __init__(self, name: str):
        super().__init__(f"Variable is not bound: '{name}'.")
        self.name = name


class DivisionByZero(EvaluationError):
    """Raised when the right operand of ``/`` or ``mod`` is zero."""

    def __init__(self, op: str):
        what = "Modulo" if op == "mod" else "Division"
        super().__init__(f"{what} by zero.")
        self.op = op


class InvalidOperator(EvaluationError):
    """Raised when an operator or connective tag outside the recognised set
    reaches a dispatch point. Indicates a malformed tree rather than a
    faulty formula.
    """

    def __init__(self, op: object, context: str):
        super().__init__(f"Not a valid operator: {op!r} in {context}.")
        self.op = op
        self.context = context
