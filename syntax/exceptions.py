# syntax/exceptions.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for Lego formula parsing.

This module defines the exception raised while turning Lego source text into
an abstract syntax tree. Lexical and grammatical failures are both reported
through it so callers have a single type to handle.
"""


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the input formula does not conform to the Lego grammar
    or contains illegal characters. Used throughout the parsing pipeline
    to provide consistent error handling.
    """

    pass
