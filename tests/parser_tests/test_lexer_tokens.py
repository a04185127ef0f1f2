# tests/parser_tests/test_lexer_tokens.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Test suite for Lego lexer tokenization and error handling

"""Test suite for Lego lexer functionality.

This module tests the lexical analysis phase of formula parsing, verifying
correct tokenization of valid syntax and proper error handling for invalid
characters.
"""

import pytest
from syntax.lexer import LegoLexer
from utils.logger import get_logger


class TestLegoLexer:
    """Test cases for Lego lexer tokenization and error handling."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = LegoLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text.

        Args:
            text: Input string to tokenize

        Returns:
            List of token type strings
        """
        self.logger.debug(f"Tokenizing: '{text}'")
        token_types = [token.type for token in self.lexer.tokenize(text)]
        self.logger.debug(f"Token types: {token_types}")
        return token_types

    VALID_TOKENIZATION_CASES = [
        # Quantifier header
        (
            "forall x in [1, 3]. x >= 1",
            [
                "FORALL", "ID", "IN", "LBRACKET", "NUMBER", "COMMA", "NUMBER",
                "RBRACKET", "DOT", "ID", "GE", "NUMBER",
            ],
        ),
        ("exists y in [-2, 2]. y = 0",
         [
             "EXISTS", "ID", "IN", "LBRACKET", "MINUS", "NUMBER", "COMMA",
             "NUMBER", "RBRACKET", "DOT", "ID", "EQ", "NUMBER",
         ]),
        # Multi-character connectives win over their prefixes
        ("a<->b", ["ID", "IFF", "ID"]),
        ("a->b", ["ID", "IMPLIES", "ID"]),
        ("x-1", ["ID", "MINUS", "NUMBER"]),
        ("x - > y", ["ID", "MINUS", "GT", "ID"]),
        ("x>=1", ["ID", "GE", "NUMBER"]),
        ("x>1", ["ID", "GT", "NUMBER"]),
        ("&& || !", ["AND", "OR", "NOT"]),
        # Arithmetic
        ("1 + 2 * 3 / 4 mod 5", [
            "NUMBER", "PLUS", "NUMBER", "TIMES", "NUMBER", "DIVIDE",
            "NUMBER", "MOD", "NUMBER",
        ]),
        # Keyword-identifier boundary cases
        ("modulo", ["ID"]),
        ("Forall", ["ID"]),
        ("forall_x", ["ID"]),
        ("inx", ["ID"]),
        ("x1", ["ID"]),
        # Whitespace and comments
        (" \t x \n = \r\n 1 ", ["ID", "EQ", "NUMBER"]),
        ("x = 1 # trailing comment", ["ID", "EQ", "NUMBER"]),
        ("# only a comment", []),
        # Grouping
        ("((x))", ["LPAREN", "LPAREN", "ID", "RPAREN", "RPAREN"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes valid Lego syntax.

        Args:
            input_text: Valid Lego syntax string
            expected_types: Expected sequence of token types
        """
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_number_values_are_integers(self):
        """NUMBER tokens carry int values, never strings."""
        values = [t.value for t in self.lexer.tokenize("0 42 007") if t.type == "NUMBER"]
        assert values == [0, 42, 7]

    def test_keyword_values(self):
        """Keyword tokens keep their source text as value."""
        tokens = list(self.lexer.tokenize("forall exists in mod"))
        assert [t.type for t in tokens] == ["FORALL", "EXISTS", "IN", "MOD"]
        assert [t.value for t in tokens] == ["forall", "exists", "in", "mod"]

    def test_line_numbers_follow_newlines(self):
        """Tokens after newlines report the line they appear on."""
        tokens = list(self.lexer.tokenize("x = 1\n&&\ny = 2"))
        assert tokens[0].lineno == 1
        assert tokens[3].type == "AND"
        assert tokens[3].lineno == 2
        assert tokens[-1].lineno == 3

    INVALID_CHARACTER_CASES = [
        ("x & y", "&"),
        ("x | y", "|"),
        ("x < y", "<"),
        ("x @ 1", "@"),
        ("x = 1;", ";"),
        ("x = $", "$"),
    ]

    @pytest.mark.parametrize("input_text, bad_char", INVALID_CHARACTER_CASES)
    def test_illegal_character_raises(self, input_text, bad_char):
        """Test that illegal characters raise ValueError naming the character.

        Args:
            input_text: String containing an illegal character
            bad_char: The character expected in the error message
        """
        with pytest.raises(ValueError) as exc_info:
            list(self.lexer.tokenize(input_text))

        assert f"'{bad_char}'" in str(exc_info.value)
