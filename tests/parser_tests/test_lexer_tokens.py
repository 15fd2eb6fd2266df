# tests/parser_tests/test_lexer_tokens.py
# This file is part of Tabula - A Truth Table Tutor
#
# Test suite for formula lexer tokenization and error handling

"""Test suite for formula lexer functionality.

Covers both notations for every connective, the shadowing of the letters
v and V by disjunction, multi-character operators and illegal characters.
"""

import pytest
from parser import tokenize, LexError, Token, TokenKind
from utils.logger import get_logger


class TestFormulaLexer:
    """Test cases for formula tokenization and error handling."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def _tokenize_to_kinds(self, text: str) -> list[str]:
        """Extract token kind names from input text."""
        self.logger.debug(f"Tokenizing: '{text}'")
        kinds = [token.kind.name for token in tokenize(text)]
        self.logger.debug(f"Token kinds: {kinds}")
        return kinds

    VALID_TOKENIZATION_CASES = [
        # Variables and parentheses
        ("P", ["VAR"]),
        ("(P)", ["LPAREN", "VAR", "RPAREN"]),
        ("PQ", ["VAR", "VAR"]),
        # ASCII connectives
        ("~P", ["NOT", "VAR"]),
        ("P & Q", ["VAR", "AND", "VAR"]),
        ("P v Q", ["VAR", "OR", "VAR"]),
        ("P V Q", ["VAR", "OR", "VAR"]),
        ("P -> Q", ["VAR", "IMP", "VAR"]),
        ("P <-> Q", ["VAR", "BICOND", "VAR"]),
        # Unicode connectives
        ("¬P", ["NOT", "VAR"]),
        ("P ∧ Q", ["VAR", "AND", "VAR"]),
        ("P ∨ Q", ["VAR", "OR", "VAR"]),
        ("P → Q", ["VAR", "IMP", "VAR"]),
        ("P ↔ Q", ["VAR", "BICOND", "VAR"]),
        # No whitespace needed between tokens
        ("P<->Q->R", ["VAR", "BICOND", "VAR", "IMP", "VAR"]),
        ("~~P", ["NOT", "NOT", "VAR"]),
        ("PvQ", ["VAR", "OR", "VAR"]),
        # Whitespace handling
        (" \t P \n & Q ", ["VAR", "AND", "VAR"]),
        # Mixed notation
        (
            "(P ∧ Q) -> ¬R",
            ["LPAREN", "VAR", "AND", "VAR", "RPAREN", "IMP", "NOT", "VAR"],
        ),
        # Empty input is lexically fine
        ("", []),
        ("   ", []),
    ]

    @pytest.mark.parametrize("input_text, expected_kinds", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_kinds):
        """Test lexer correctly tokenizes valid formula syntax."""
        actual_kinds = self._tokenize_to_kinds(input_text)

        assert actual_kinds == expected_kinds, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_kinds}\n"
            f"Actual: {actual_kinds}"
        )

    def test_variable_tokens_carry_names(self):
        """Each uppercase letter is its own variable token."""
        tokens = tokenize("AB")
        assert tokens == [Token(TokenKind.VAR, "A"), Token(TokenKind.VAR, "B")]

    def test_connective_tokens_carry_no_name(self):
        """Only VAR tokens carry a name."""
        for token in tokenize("~ & v -> <-> ( )"):
            assert token.name is None

    def test_disjunction_letters_are_not_variables(self):
        """The letters v and V always lex as OR, never as a variable."""
        assert self._tokenize_to_kinds("V") == ["OR"]
        assert self._tokenize_to_kinds("v") == ["OR"]
        assert self._tokenize_to_kinds("UVW") == ["VAR", "OR", "VAR"]

    def test_biconditional_is_not_split(self):
        """<-> is one token, not a stray '<' followed by ->."""
        assert self._tokenize_to_kinds("<->") == ["BICOND"]

    def test_token_string_form(self):
        """Tokens render readably for messages and debugging."""
        assert str(Token(TokenKind.VAR, "P")) == "VAR(P)"
        assert str(Token(TokenKind.IMP)) == "IMP"

    ILLEGAL_INPUTS = [
        ("p", "p"),
        ("P & q", "q"),
        ("P | Q", "|"),
        ("P ! Q", "!"),
        ("P < Q", "<"),
        ("P - Q", "-"),
        ("P => Q", "="),
        ("P1", "1"),
        ("[P]", "["),
        ("P\rQ", "\r"),
    ]

    @pytest.mark.parametrize("input_text, bad_char", ILLEGAL_INPUTS)
    def test_illegal_characters(self, input_text, bad_char):
        """Test lexer rejects characters outside the formula alphabet."""
        with pytest.raises(LexError) as exc_info:
            tokenize(input_text)

        assert f"'{bad_char}'" in str(exc_info.value)

    def test_error_reports_position(self):
        """The error message names the offending position."""
        with pytest.raises(LexError, match="position 4"):
            tokenize("P & x")

    def test_trailing_negation_is_lexically_valid(self):
        """'A~' lexes fine; rejecting it is the parser's job."""
        assert self._tokenize_to_kinds("A~") == ["VAR", "NOT"]
