# syntax/ast_nodes.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Abstract Syntax Tree node classes for formulas and integer expressions

"""AST node classes for representing parsed Lego formulas.

This module defines immutable and hashable node classes used to construct tree
representations of first-order formulas with bounded integer quantification.
The tree has two layers: integer expressions (``Exp``) and boolean formulas
(``Formula``). Formulas reach expressions only through atomic comparisons.

Expression Types:
    IntLiteral: Integer constant
    VarRef: Reference to a quantified variable
    BinExp: Binary arithmetic (+, -, *, /, mod)

Formula Types:
    Atomic: Relational comparison of two expressions (>, >=, =)
    Unary: Logical negation (!)
    Binary: Logical connectives (&&, ||, ->, <->)
    Quantified: forall/exists over an inclusive integer Domain

All nodes support the visitor design pattern for traversal, and their string
form is valid Lego syntax that parses back into an equal tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol


class ExpVisitor(Protocol):
    """Interface for visitors over integer expressions."""

    def visit_int_literal(self, n: IntLiteral): ...

    def visit_var_ref(self, n: VarRef): ...

    def visit_bin_exp(self, n: BinExp): ...


class FormulaVisitor(Protocol):
    """Interface for visitors over formulas.

    Concrete visitors must implement a visit method for each formula variant
    so that every dispatch point handles the complete node set.
    """

    def visit_atomic(self, n: Atomic): ...

    def visit_unary(self, n: Unary): ...

    def visit_binary(self, n: Binary): ...

    def visit_quantified(self, n: Quantified): ...


@dataclass(frozen=True, slots=True)
class Domain:
    """Inclusive integer range a quantifier ranges over.

    No ordering is enforced: when ``lower > upper`` the range is empty.

    Attributes:
        lower: First value of the range (inclusive)
        upper: Last value of the range (inclusive)
    """

    lower: int
    upper: int

    def values(self) -> range:
        """Return the domain as a Python range, empty when lower > upper."""
        return range(self.lower, self.upper + 1)

    def __str__(self) -> str:
        return f"[{self.lower}, {self.upper}]"


@dataclass(frozen=True, slots=True)
class Exp:
    """Base class for integer expression nodes."""

    def accept(self, v: ExpVisitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class IntLiteral(Exp):
    """Integer constant.

    Attributes:
        value: The literal's integer value
    """

    value: int

    def accept(self, v: ExpVisitor):
        return v.visit_int_literal(self)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class VarRef(Exp):
    """Reference to a variable bound by an enclosing quantifier.

    A variable reference has no standalone value; it is resolved against
    the binding environment at evaluation time.

    Attributes:
        name: Identifier of the referenced variable
    """

    name: str

    def accept(self, v: ExpVisitor):
        return v.visit_var_ref(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class BinExp(Exp):
    """Binary arithmetic expression.

    Attributes:
        op: One of ``+``, ``-``, ``*``, ``/``, ``mod``
        left: Left operand
        right: Right operand
    """

    op: str
    left: Exp
    right: Exp

    def accept(self, v: ExpVisitor):
        return v.visit_bin_exp(self)

    def __str__(self) -> str:
        return f"({self.left} {self.op} {self.right})"


@dataclass(frozen=True, slots=True)
class Formula:
    """Base class for all formula nodes.

    Provides the foundation for immutable formula trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: FormulaVisitor):
        """Dispatch to the appropriate visitor method.

        Enables the visitor pattern by calling the correct visit_* method
        on the provided visitor instance based on the concrete node type.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        """Return string representation of the formula.

        Returns:
            Lego source text that parses back into an equal tree

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Atomic(Formula):
    """Relational comparison between two integer expressions.

    Attributes:
        rel_op: One of ``>``, ``>=``, ``=``
        left: Left-hand expression
        right: Right-hand expression
    """

    rel_op: str
    left: Exp
    right: Exp

    def accept(self, v: FormulaVisitor):
        """Accept visitor and dispatch to visit_atomic method.

        Args:
            v: Visitor instance to process this comparison

        Returns:
            Result of visitor's visit_atomic method
        """
        return v.visit_atomic(self)

    def __str__(self) -> str:
        return f"{self.left} {self.rel_op} {self.right}"


@dataclass(frozen=True, slots=True)
class Unary(Formula):
    """Unary logical connective (negation).

    Attributes:
        conn: Connective tag, ``!``
        operand: The formula being negated
    """

    conn: str
    operand: Formula

    def accept(self, v: FormulaVisitor):
        """Accept visitor and dispatch to visit_unary method.

        Args:
            v: Visitor instance to process this connective

        Returns:
            Result of visitor's visit_unary method
        """
        return v.visit_unary(self)

    def __str__(self) -> str:
        return f"{self.conn}({self.operand})"


@dataclass(frozen=True, slots=True)
class Binary(Formula):
    """Binary logical connective.

    Attributes:
        conn: One of ``&&``, ``||``, ``->``, ``<->``
        left: Left operand formula
        right: Right operand formula
    """

    conn: str
    left: Formula
    right: Formula

    def accept(self, v: FormulaVisitor):
        """Accept visitor and dispatch to visit_binary method.

        Args:
            v: Visitor instance to process this connective

        Returns:
            Result of visitor's visit_binary method
        """
        return v.visit_binary(self)

    def __str__(self) -> str:
        return f"({self.left} {self.conn} {self.right})"


@dataclass(frozen=True, slots=True)
class Quantified(Formula):
    """Quantified formula over an inclusive integer domain.

    The body is evaluated once per domain value with ``var`` bound to that
    value; the binding shadows any outer binding of the same name.

    Attributes:
        quant: Quantifier tag, ``forall`` or ``exists``
        var: Name of the bound variable
        domain: Range of values the variable takes
        body: Formula evaluated under the binding
    """

    quant: str
    var: str
    domain: Domain
    body: Formula

    def accept(self, v: FormulaVisitor):
        """Accept visitor and dispatch to visit_quantified method.

        Args:
            v: Visitor instance to process this quantifier

        Returns:
            Result of visitor's visit_quantified method
        """
        return v.visit_quantified(self)

    def __str__(self) -> str:
        # Parenthesised so the body cannot swallow a following connective
        return f"({self.quant} {self.var} in {self.domain}. {self.body})"
