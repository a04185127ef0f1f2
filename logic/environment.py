# logic/environment.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Stack of quantifier bindings used during evaluation

"""Binding environment for quantified variables.

The environment is a stack whose contents mirror the quantifiers lexically
enclosing the subformula under evaluation, innermost on top. Lookups scan
from the top, so an inner quantifier shadows an outer one binding the same
name for the duration of its scope.
"""

from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, List

from .exceptions import UnboundVariable


@dataclass
class Binding:
    """One active quantified variable.

    The value is updated in place once per domain iteration.

    Attributes:
        name: Variable name
        value: Current value of the variable
    """

    name: str
    value: int


class Environment:
    """List-backed stack of Bindings owned by a single evaluation."""

    def __init__(self):
        self._stack: List[Binding] = []

    def push(self, binding: Binding) -> None:
        self._stack.append(binding)

    def pop(self) -> Binding:
        """Remove and return the top binding.

        Raises:
            IndexError: If the environment is empty
        """
        return self._stack.pop()

    def lookup(self, name: str) -> int:
        """Return the value of the innermost binding of ``name``.

        Args:
            name: Variable to resolve

        Returns:
            Current value of the topmost matching binding

        Raises:
            UnboundVariable: If no binding on the stack matches
        """
        for binding in reversed(self._stack):
            if binding.name == name:
                return binding.value
        raise UnboundVariable(name)

    @contextmanager
    def bind(self, name: str, value: int) -> Iterator[Binding]:
        """Push a binding for the duration of a ``with`` block.

        The binding is popped on every exit path, exceptions included.
        """
        binding = Binding(name, value)
        self.push(binding)
        try:
            yield binding
        finally:
            self.pop()

    def is_empty(self) -> bool:
        return not self._stack

    def names(self) -> List[str]:
        """Names of the active bindings, innermost first."""
        return [binding.name for binding in reversed(self._stack)]

    def __len__(self) -> int:
        return len(self._stack)

    def __repr__(self) -> str:
        inner = ", ".join(f"{b.name}={b.value}" for b in self._stack)
        return f"Environment([{inner}])"
