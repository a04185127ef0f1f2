# syntax/grammar.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# LALR(1) grammar and parser for Lego formulas using SLY

"""Lego grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for first-order
formulas with bounded integer quantification. The parser constructs Abstract
Syntax Trees from token streams provided by the lexer, handling operator
precedence and associativity for both the formula layer and the arithmetic
expression layer.

Grammar Features:
- Quantifiers ``forall x in [a, b]. body`` whose body extends as far right
  as possible
- Logical connectives with conventional precedence
- Relational comparisons joining the formula and expression layers
- Integer arithmetic with unary minus
- Parenthetical grouping at both layers

Operator Precedence (lowest to highest):
- quantifier body
- IFF ('<->'): left-associative
- IMPLIES ('->'): right-associative
- OR ('||'): left-associative
- AND ('&&'): left-associative
- NOT ('!'): right-associative
- PLUS, MINUS: left-associative
- TIMES, DIVIDE, MOD: left-associative
- unary minus
"""

from sly import Parser
from .lexer import LegoLexer
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
from .exceptions import ParseError
from utils.logger import get_logger


class _LegoParser(Parser):
    """SLY-based LALR(1) parser for Lego formulas.

    Implements grammar rules to construct AST nodes from token streams.
    Handles precedence, associativity, and provides detailed error reporting
    for malformed formulas.

    Attributes:
        tokens: Token types from LegoLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = LegoLexer.tokens

    precedence = (
        ("right", "QUANT"),
        ("left", "IFF"),
        ("right", "IMPLIES"),
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
        ("left", "PLUS", "MINUS"),
        ("left", "TIMES", "DIVIDE", "MOD"),
        ("right", "UMINUS"),
    )

    @_("formula")
    def start(self, p) -> Formula:
        """Start rule: complete input is a single formula."""
        return p.formula

    # Formula grammar rules
    @_("FORALL ID IN domain DOT formula %prec QUANT")
    def formula(self, p) -> Formula:
        """Universal quantification over a domain."""
        return Quantified("forall", p.ID, p.domain, p.formula)

    @_("EXISTS ID IN domain DOT formula %prec QUANT")
    def formula(self, p) -> Formula:
        """Existential quantification over a domain."""
        return Quantified("exists", p.ID, p.domain, p.formula)

    @_("formula IFF formula")
    def formula(self, p) -> Formula:
        """Biconditional."""
        return Binary("<->", p.formula0, p.formula1)

    @_("formula IMPLIES formula")
    def formula(self, p) -> Formula:
        """Implication."""
        return Binary("->", p.formula0, p.formula1)

    @_("formula OR formula")
    def formula(self, p) -> Formula:
        """Disjunction."""
        return Binary("||", p.formula0, p.formula1)

    @_("formula AND formula")
    def formula(self, p) -> Formula:
        """Conjunction."""
        return Binary("&&", p.formula0, p.formula1)

    @_("NOT formula")
    def formula(self, p) -> Formula:
        """Negation."""
        return Unary("!", p.formula)

    @_("LPAREN formula RPAREN")
    def formula(self, p) -> Formula:
        """Parenthesized formula for grouping."""
        return p.formula

    @_("exp GT exp")
    def formula(self, p) -> Formula:
        return Atomic(">", p.exp0, p.exp1)

    @_("exp GE exp")
    def formula(self, p) -> Formula:
        return Atomic(">=", p.exp0, p.exp1)

    @_("exp EQ exp")
    def formula(self, p) -> Formula:
        return Atomic("=", p.exp0, p.exp1)

    # Domain grammar rules
    @_("LBRACKET integer COMMA integer RBRACKET")
    def domain(self, p) -> Domain:
        """Inclusive integer range."""
        return Domain(p.integer0, p.integer1)

    @_("NUMBER")
    def integer(self, p) -> int:
        return p.NUMBER

    @_("MINUS NUMBER")
    def integer(self, p) -> int:
        return -p.NUMBER

    # Expression grammar rules
    @_("exp PLUS exp", "exp MINUS exp", "exp TIMES exp", "exp DIVIDE exp")
    def exp(self, p) -> Exp:
        """Binary arithmetic with a symbolic operator."""
        return BinExp(p[1], p.exp0, p.exp1)

    @_("exp MOD exp")
    def exp(self, p) -> Exp:
        return BinExp("mod", p.exp0, p.exp1)

    @_("MINUS exp %prec UMINUS")
    def exp(self, p) -> Exp:
        """Unary minus: folded into literals, otherwise subtraction from zero."""
        if isinstance(p.exp, IntLiteral):
            return IntLiteral(-p.exp.value)
        return BinExp("-", IntLiteral(0), p.exp)

    @_("LPAREN exp RPAREN")
    def exp(self, p) -> Exp:
        """Parenthesized expression for grouping."""
        return p.exp

    @_("NUMBER")
    def exp(self, p) -> Exp:
        return IntLiteral(p.NUMBER)

    @_("ID")
    def exp(self, p) -> Exp:
        return VarRef(p.ID)

    def parse(self, text: str) -> Formula:
        """Parse Lego formula text into AST.

        Tokenizes the input text and constructs an Abstract Syntax Tree
        representing the formula structure. Handles empty formulas and
        provides meaningful error messages for syntax errors.

        Args:
            text: Lego formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If formula is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        try:
            ast_result = super().parse(LegoLexer().tokenize(text))

            if ast_result is None and _is_blank(text):
                raise ParseError("Input formula is empty.")

            if ast_result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(
                f"Successfully parsed formula into {type(ast_result).__name__}"
            )
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering tokens that don't
        match any grammar rule. Provides detailed error information
        including token position and type.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)


def _is_blank(text: str) -> bool:
    """True when the text holds nothing but whitespace and comments."""
    return all(
        line.split("#", 1)[0].strip() == "" for line in text.splitlines()
    )
