# parser/__init__.py
# This file is part of Tabula - A Truth Table Tutor
#
# Formula tokenizing, parsing and printing components for propositional logic

"""Propositional formula parsing and canonical printing.

This package turns formula text into abstract syntax trees and back. The
pipeline is one-directional: raw string -> tokens -> AST -> printed forms.

Core Functions:
    tokenize: Converts formula strings into token sequences
    parse_formula: Converts formula strings into Abstract Syntax Trees
    print_ascii / print_unicode: Fully parenthesized renderings of a tree
    check_grammar: Flags input that only parsed thanks to precedence

Supported Logic:
    - Single-letter atoms A-Z
    - Negation, conjunction, disjunction, implication, biconditional
    - ASCII and Unicode spellings of every connective

Grammar Features:
    - Left-associative binary operators, including -> and <->
    - Precedence: NOT > AND > OR > IMP > BICOND
    - Parenthetical grouping support

Example:
    >>> from parser import parse_formula, print_unicode
    >>> print_unicode(parse_formula("P & Q -> ~R"))
    '((P ∧ Q) → ¬R)'
"""

from .exceptions import FormulaError, LexError, ParseError
from .ast_nodes import Binary, Connective, Formula, NodeIdGenerator, Unary, Var
from .lexer import FormulaLexer, Token, TokenKind, tokenize
from .grammar import _FormulaParser
from .printer import print_ascii, print_unicode
from .grammar_check import GRAMMAR_WARNING, check_grammar, normalize_for_grammar
from utils.logger import get_logger


def parse_formula(source: str) -> Formula:
    """Parse formula string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation, so node ids restart at
    zero for every formula and no state is shared between calls.

    Args:
        source: Formula text in ASCII, Unicode or mixed notation

    Returns:
        Root AST node representing the parsed formula

    Raises:
        LexError: The text contains a character outside the formula alphabet
        ParseError: The token sequence is not a well-formed formula

    Example:
        >>> parse_formula("~~P")
        Unary(operand=Unary(operand=Var(name='P', node_id=0), node_id=1), node_id=2)
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    tokens = list(FormulaLexer().tokenize(source))
    parser = _FormulaParser()

    try:
        result = parser.parse(tokens)
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


parse = parse_formula


__all__ = [
    "parse",
    "parse_formula",
    "tokenize",
    "print_ascii",
    "print_unicode",
    "check_grammar",
    "normalize_for_grammar",
    "GRAMMAR_WARNING",
    "Formula",
    "Var",
    "Unary",
    "Binary",
    "Connective",
    "NodeIdGenerator",
    "Token",
    "TokenKind",
    "FormulaError",
    "LexError",
    "ParseError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and canonical printing components"
