# syntax/__init__.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Formula parsing components for bounded first-order logic

"""Lego formula parsing.

This package turns textual Lego formulas into the immutable abstract syntax
trees consumed by the evaluator in ``logic``. The tree has an integer
expression layer and a boolean formula layer joined by relational
comparisons.

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees

Supported Logic:
    - Bounded quantifiers: ``forall x in [a, b]. body``, ``exists ...``
    - Connectives: ``!``, ``&&``, ``||``, ``->``, ``<->``
    - Relations: ``>``, ``>=``, ``=``
    - Integer arithmetic: ``+``, ``-``, ``*``, ``/``, ``mod``

Example:
    >>> from syntax import parse
    >>> ast = parse("forall x in [1, 3]. exists y in [1, 3]. x + y = 4")
    >>> # Returns a Quantified node wrapping another Quantified node
"""

from .exceptions import ParseError
from .grammar import _LegoParser
from .ast_nodes import (
    Atomic,
    Binary,
    BinExp,
    Domain,
    Exp,
    Formula,
    IntLiteral,
    Quantified,
    Unary,
    VarRef,
)
from utils.logger import get_logger


def parse(source: str) -> Formula:
    """Parse Lego formula string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation to ensure stateless
    operation and thread safety.

    Args:
        source: Lego formula string to parse

    Returns:
        Root formula node of the parsed tree

    Raises:
        ParseError: Formula syntax is malformed or contains illegal characters

    Example:
        >>> ast = parse("exists x in [0, 9]. x * x = 49")
        >>> # Returns Quantified node with an Atomic body
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _LegoParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "ParseError",
    "Atomic",
    "Binary",
    "BinExp",
    "Domain",
    "Exp",
    "Formula",
    "IntLiteral",
    "Quantified",
    "Unary",
    "VarRef",
]

__version__ = "1.0.0"
__description__ = "Lego formula parsing components"
