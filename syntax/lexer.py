# syntax/lexer.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Lexical analyzer for Lego formula tokenization using SLY

"""Lexical analyzer for Lego formula strings.

This module implements tokenization of first-order formulas with bounded
quantification, breaking input strings into tokens for parser consumption.
The lexer handles multi-character operator recognition, keyword distinction
and integer literals while providing meaningful error messages for invalid
characters.

Supported Tokens:
- Logical connectives: !, &&, ||, ->, <->
- Relations: >, >=, =
- Arithmetic: +, -, *, /, mod
- Punctuation: ( ) [ ] , .
- Keywords: forall, exists, in, mod
- Identifiers and non-negative integer literals
- Comments: '#' to end of line, ignored
"""

from sly import Lexer
from utils.logger import get_logger


class LegoLexer(Lexer):
    """SLY-based lexer for Lego formula tokenization.

    Transforms input formula strings into token sequences for parsing.
    Distinguishes between reserved keywords and user-defined identifiers.
    Longer operators are declared before their prefixes so that ``<->``,
    ``->`` and ``>=`` win over ``-`` and ``>``.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    # Valid token types for parser recognition
    tokens = {
        "FORALL",
        "EXISTS",
        "IN",
        "ID",
        "NUMBER",
        "NOT",
        "AND",
        "OR",
        "IFF",
        "IMPLIES",
        "GE",
        "GT",
        "EQ",
        "PLUS",
        "MINUS",
        "TIMES",
        "DIVIDE",
        "MOD",
        "LPAREN",
        "RPAREN",
        "LBRACKET",
        "RBRACKET",
        "COMMA",
        "DOT",
    }

    # Whitespace characters to ignore (newlines are counted separately)
    ignore = " \t\r"
    ignore_comment = r"\#.*"

    # Connectives, longest first
    IFF = r"<->"
    IMPLIES = r"->"
    AND = r"&&"
    OR = r"\|\|"
    NOT = r"!"

    # Relations
    GE = r">="
    GT = r">"
    EQ = r"="

    # Arithmetic
    PLUS = r"\+"
    MINUS = r"-"
    TIMES = r"\*"
    DIVIDE = r"/"

    # Punctuation
    LPAREN = r"\("
    RPAREN = r"\)"
    LBRACKET = r"\["
    RBRACKET = r"\]"
    COMMA = r","
    DOT = r"\."

    # Identifier pattern: starts with letter/underscore, followed by alphanumerics/underscores
    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    # Keyword mapping: reassign token types for reserved words
    ID["forall"] = "FORALL"
    ID["exists"] = "EXISTS"
    ID["in"] = "IN"
    ID["mod"] = "MOD"

    @_(r"\d+")
    def NUMBER(self, t):
        t.value = int(t.value)
        return t

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += t.value.count("\n")

    def error(self, t):
        """Handle illegal characters during tokenization.

        Called automatically when encountering characters that don't match
        any defined token patterns. Advances past the problematic character
        and raises an informative error.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        # Skip the illegal character
        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at line {self.lineno}, "
            f"position {error_pos}"
        )
