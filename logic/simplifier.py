# logic/simplifier.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Reduction of integer expressions to concrete values

"""Expression simplifier.

Reduces an expression tree to a single integer, resolving variable
references against the current binding environment. Division and remainder
truncate toward zero, so ``-5 / 2 == -2`` and ``-5 mod 3 == -2``; Python's
floor semantics for ``//`` and ``%`` are not used.
"""

from __future__ import annotations
from typing import Callable, Dict

from syntax import ast_nodes as ast
from .environment import Environment
from .exceptions import DivisionByZero, InvalidOperator


def truncating_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero."""
    if b == 0:
        raise DivisionByZero("/")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def truncating_mod(a: int, b: int) -> int:
    """Remainder matching truncating_div; its sign follows the dividend."""
    if b == 0:
        raise DivisionByZero("mod")
    return a - b * truncating_div(a, b)


_ARITH_FUNCS: Dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": truncating_div,
    "mod": truncating_mod,
}


class Simplifier(ast.ExpVisitor):
    """Visitor reducing expressions to integers under an environment.

    Attributes:
        env: Environment consulted for variable references
    """

    def __init__(self, env: Environment):
        self.env = env

    def simplify(self, exp: ast.Exp) -> int:
        return exp.accept(self)

    def visit_int_literal(self, n: ast.IntLiteral) -> int:
        return n.value

    def visit_var_ref(self, n: ast.VarRef) -> int:
        return self.env.lookup(n.name)

    def visit_bin_exp(self, n: ast.BinExp) -> int:
        left = self.simplify(n.left)
        right = self.simplify(n.right)

        func = _ARITH_FUNCS.get(n.op)
        if func is None:
            raise InvalidOperator(n.op, "arithmetic expression")
        return func(left, right)


def simplify(exp: ast.Exp, env: Environment) -> int:
    """Reduce an expression to an integer.

    Args:
        exp: Expression tree to reduce
        env: Bindings for the variables the expression references

    Returns:
        The expression's integer value

    Raises:
        UnboundVariable: A referenced variable has no binding
        DivisionByZero: ``/`` or ``mod`` with a zero right operand
        InvalidOperator: Unrecognised arithmetic operator tag
    """
    return Simplifier(env).simplify(exp)
