# parser/lexer.py
# This file is part of Tabula - A Truth Table Tutor
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks formula strings into tokens for parser consumption. Every
connective has an ASCII and a Unicode spelling, and both are accepted
anywhere in the input:

Supported Tokens:
- Negation: ~ or ¬
- Conjunction: & or ∧
- Disjunction: v, V or ∨ (the letter V is never a variable)
- Implication: -> or →
- Biconditional: <-> or ↔
- Variables: single uppercase letters A-Z, one token per letter
- Parentheses: ( and )
- Whitespace: space, tab and newline, ignored during tokenization
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from sly import Lexer
from .exceptions import LexError
from utils.logger import get_logger


class TokenKind(Enum):
    """Token types emitted by the lexer."""

    VAR = "VAR"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    NOT = "NOT"
    AND = "AND"
    OR = "OR"
    IMP = "IMP"
    BICOND = "BICOND"

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    """Immutable token value handed to callers of :func:`tokenize`.

    Only ``VAR`` tokens carry a name. Tokens keep no position information
    beyond their place in the returned sequence.
    """

    kind: TokenKind
    name: Optional[str] = None

    def __str__(self) -> str:
        if self.kind is TokenKind.VAR:
            return f"VAR({self.name})"
        return self.kind.name


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Patterns are tried in definition order, so the multi-character
    biconditional is listed before implication, and the disjunction letters
    come before the generic variable rule.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "VAR",
        "LPAREN",
        "RPAREN",
        "NOT",
        "AND",
        "OR",
        "IMP",
        "BICOND",
    }

    ignore = " \t\n"

    BICOND = r"<->|↔"
    IMP = r"->|→"
    NOT = r"~|¬"
    AND = r"&|∧"
    OR = r"[vV∨]"
    VAR = r"[A-Z]"
    LPAREN = r"\("
    RPAREN = r"\)"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            LexError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        raise LexError(
            f"Unexpected character '{illegal_char}' at position {error_pos}"
        )


def tokenize(text: str) -> List[Token]:
    """Convert a formula string into its token sequence.

    Args:
        text: Raw formula text in ASCII, Unicode or mixed notation

    Returns:
        Tokens in emission order

    Raises:
        LexError: A character is not part of the formula alphabet

    Example:
        >>> [str(t) for t in tokenize("P -> ¬Q")]
        ['VAR(P)', 'IMP', 'NOT', 'VAR(Q)']
    """
    tokens = []
    for raw in FormulaLexer().tokenize(text):
        kind = TokenKind(raw.type)
        tokens.append(Token(kind, raw.value if kind is TokenKind.VAR else None))
    return tokens
