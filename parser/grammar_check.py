# parser/grammar_check.py
# This file is part of Tabula - A Truth Table Tutor
#
# Grammaticality check comparing raw input with its canonical rendering

"""Advisory check for input that relied on precedence to parse.

The raw input and the ASCII rendering of its parsed tree are both reduced to
one spelling per connective with whitespace removed. If the two strings
differ, the input omitted parentheses the canonical form requires (or added
redundant ones), and callers show :data:`GRAMMAR_WARNING`. This is a purely
textual comparison, not a semantic one, and never an error path.
"""

import re

from .ast_nodes import Formula
from .printer import print_ascii
from utils.logger import get_logger

GRAMMAR_WARNING = "THIS IS UNGRAMMATICAL. I AM FIXING IT."

_NORMALIZATION_RULES = (
    (re.compile(r"\s+"), ""),
    (re.compile(r"¬"), "~"),
    (re.compile(r"[∧&]"), "&"),
    (re.compile(r"[∨vV]"), "v"),
    (re.compile(r"→"), "->"),
    (re.compile(r"↔"), "<->"),
)


def normalize_for_grammar(text: str) -> str:
    """Strip whitespace and map every connective spelling to its ASCII form.

    Example:
        >>> normalize_for_grammar("(P ∧ Q) → ¬R")
        '(P&Q)->~R'
    """
    for pattern, replacement in _NORMALIZATION_RULES:
        text = pattern.sub(replacement, text)
    return text


def check_grammar(raw_input: str, parsed: Formula) -> bool:
    """Return True when ``raw_input`` differs from its canonical form.

    Args:
        raw_input: Text exactly as the user typed it
        parsed: Tree obtained by parsing ``raw_input``

    Returns:
        True if the grammaticality warning should be shown
    """
    logger = get_logger()

    input_norm = normalize_for_grammar(raw_input)
    canonical_norm = normalize_for_grammar(print_ascii(parsed))
    warn = input_norm != canonical_norm

    logger.debug(
        f"Grammar check: input={input_norm!r} canonical={canonical_norm!r} warn={warn}"
    )
    return warn
