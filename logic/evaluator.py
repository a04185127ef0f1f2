# logic/evaluator.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Tree-walking evaluation of formulas to truth values

"""Formula evaluator.

Reduces a closed formula to a boolean by recursive descent over the formula
tree. Quantifiers walk their domain in ascending order, binding the
quantified variable in the environment and stopping as soon as the outcome
is decided. Connectives, by contrast, always evaluate both operands before
combining them: a fault in an operand that does not affect the result is
still raised.

Example:
    >>> from syntax import parse
    >>> evaluate(parse("forall x in [1, 3]. exists y in [1, 3]. x + y = 4"))
    True
"""

from __future__ import annotations
from typing import Callable, Dict, Optional

from syntax import ast_nodes as ast
from utils.logger import get_logger
from .environment import Binding, Environment
from .exceptions import EvaluationError, InvalidOperator
from .simplifier import Simplifier


_RELATIONS: Dict[str, Callable[[int, int], bool]] = {
    ">": lambda a, b: a > b,
    ">=": lambda a, b: a >= b,
    "=": lambda a, b: a == b,
}

_CONNECTIVES: Dict[str, Callable[[bool, bool], bool]] = {
    "&&": lambda l, r: l and r,
    "||": lambda l, r: l or r,
    "->": lambda l, r: (not l) or r,
    "<->": lambda l, r: l == r,
}


class Evaluator(ast.FormulaVisitor):
    """Visitor reducing formulas to booleans.

    An evaluator owns the environment it was given for the duration of a
    top-level call. Every quantifier pushes exactly one binding and pops it
    on all exit paths, so the environment is back to its initial contents
    whenever ``evaluate`` returns or raises.

    Attributes:
        env: Stack of active quantifier bindings
    """

    def __init__(self, env: Optional[Environment] = None):
        self.env = env if env is not None else Environment()
        self._simplifier = Simplifier(self.env)
        self._logger = get_logger()

    def evaluate(self, formula: ast.Formula) -> bool:
        return formula.accept(self)

    def visit_atomic(self, n: ast.Atomic) -> bool:
        left = self._simplifier.simplify(n.left)
        right = self._simplifier.simplify(n.right)

        relation = _RELATIONS.get(n.rel_op)
        if relation is None:
            raise InvalidOperator(n.rel_op, "atomic formula")
        return relation(left, right)

    def visit_unary(self, n: ast.Unary) -> bool:
        if n.conn != "!":
            raise InvalidOperator(n.conn, "unary formula")
        return not self.evaluate(n.operand)

    def visit_binary(self, n: ast.Binary) -> bool:
        # Both sides are evaluated before combining; no connective short-circuit
        left = self.evaluate(n.left)
        right = self.evaluate(n.right)

        combine = _CONNECTIVES.get(n.conn)
        if combine is None:
            raise InvalidOperator(n.conn, "binary formula")
        return combine(left, right)

    def visit_quantified(self, n: ast.Quantified) -> bool:
        """Evaluate a quantifier over its domain.

        ``forall`` stops at the first value making the body false and
        ``exists`` at the first value making it true. An empty domain makes
        ``forall`` true and ``exists`` false.

        Args:
            n: Quantified formula node

        Returns:
            Truth value of the quantified formula
        """
        self._logger.quantifier_entered(
            n.quant, n.var, str(n.domain), len(self.env)
        )

        binding = Binding(n.var, n.domain.lower)
        self.env.push(binding)
        try:
            if n.quant == "forall":
                return self._forall(n, binding)
            if n.quant == "exists":
                return self._exists(n, binding)

            self._logger.warning(
                f"Unrecognised quantifier {n.quant!r} for {n.var}; treating as false"
            )
            return False
        finally:
            self.env.pop()

    def _forall(self, n: ast.Quantified, binding: Binding) -> bool:
        for value in n.domain.values():
            binding.value = value
            if not self.evaluate(n.body):
                self._logger.quantifier_decided(n.quant, n.var, False, value)
                return False
        self._logger.quantifier_decided(n.quant, n.var, True)
        return True

    def _exists(self, n: ast.Quantified, binding: Binding) -> bool:
        for value in n.domain.values():
            binding.value = value
            if self.evaluate(n.body):
                self._logger.quantifier_decided(n.quant, n.var, True, value)
                return True
        self._logger.quantifier_decided(n.quant, n.var, False)
        return False


def evaluate(formula: ast.Formula, env: Optional[Environment] = None) -> bool:
    """Evaluate a closed formula to its truth value.

    Each call without an explicit environment builds its own, so separate
    calls share no state.

    Args:
        formula: Root of the formula tree
        env: Optional environment to evaluate under; left as it was found

    Returns:
        The formula's truth value

    Raises:
        UnboundVariable: A variable is referenced outside any binding quantifier
        DivisionByZero: ``/`` or ``mod`` with a zero right operand
        InvalidOperator: The tree carries an unrecognised operator tag
    """
    logger = get_logger()
    logger.debug(f"Evaluating formula: {formula}")

    try:
        result = Evaluator(env).evaluate(formula)
    except EvaluationError as exc:
        logger.fault_raised(type(exc).__name__, str(exc))
        raise

    logger.debug(f"Formula evaluated to {result}")
    return result
