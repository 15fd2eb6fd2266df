# parser/grammar.py
# This file is part of Tabula - A Truth Table Tutor
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for propositional
formulas. The parser constructs Abstract Syntax Trees from token streams
provided by the lexer, resolving precedence through an explicit table.

Operator Precedence (lowest to highest):
- BICOND ('<->', '↔'): left-associative
- IMP ('->', '→'): left-associative, so P -> Q -> R is (P -> Q) -> R
- OR ('v', '∨'): left-associative
- AND ('&', '∧'): left-associative
- NOT ('~', '¬'): prefix, right-associative
- Variables and parenthesized formulas bind tightest

Each node is stamped with an id from the parser's own NodeIdGenerator as the
rule that builds it is reduced, so children always receive lower ids than
the node that wraps them and siblings are numbered in source order.
"""

from typing import Iterable, Iterator, List, Optional

from sly import Parser
from .lexer import FormulaLexer
from .ast_nodes import Binary, Connective, Formula, NodeIdGenerator, Unary, Var
from .exceptions import ParseError
from utils.logger import get_logger

# Tokens after which a complete operand has just ended
_OPERAND_END = {"VAR", "RPAREN"}

# Tokens that can only start a new operand
_OPERAND_START = {"VAR", "LPAREN", "NOT"}


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    One instance parses one formula: it owns the id generator for the tree
    it builds and the bookkeeping used to explain syntax errors.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("left", "BICOND"),
        ("left", "IMP"),
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    def __init__(self):
        super().__init__()
        self._formula_ids = NodeIdGenerator()
        self._paren_depth = 0
        self._paren_depth_before = 0
        self._prev_token = None
        self._last_token = None

    @_("formula")
    def start(self, p) -> Formula:
        """Start rule: complete input is a single formula."""
        return p.formula

    @_("formula BICOND formula")
    def formula(self, p) -> Formula:
        """Biconditional."""
        return self._binary(Connective.BICOND, p)

    @_("formula IMP formula")
    def formula(self, p) -> Formula:
        """Material implication."""
        return self._binary(Connective.IMP, p)

    @_("formula OR formula")
    def formula(self, p) -> Formula:
        """Inclusive disjunction."""
        return self._binary(Connective.OR, p)

    @_("formula AND formula")
    def formula(self, p) -> Formula:
        """Conjunction."""
        return self._binary(Connective.AND, p)

    @_("NOT formula")
    def formula(self, p) -> Formula:
        """Negation."""
        return Unary(p.formula, self._formula_ids.next_id())

    @_("LPAREN formula RPAREN")
    def formula(self, p) -> Formula:
        """Parenthesized formula for grouping."""
        return p.formula

    @_("VAR")
    def formula(self, p) -> Formula:
        """Single-letter propositional variable."""
        return Var(p.VAR, self._formula_ids.next_id())

    def _binary(self, op: Connective, p) -> Binary:
        return Binary(op, p.formula0, p.formula1, self._formula_ids.next_id())

    def _track(self, tokens: Iterable) -> Iterator:
        """Pass tokens through while recording parenthesis depth and context."""
        for tok in tokens:
            self._prev_token, self._last_token = self._last_token, tok
            self._paren_depth_before = self._paren_depth
            if tok.type == "LPAREN":
                self._paren_depth += 1
            elif tok.type == "RPAREN":
                self._paren_depth -= 1
            yield tok

    def parse(self, tokens: List) -> Formula:
        """Parse a lexed token sequence into an AST.

        Args:
            tokens: SLY tokens produced by FormulaLexer

        Returns:
            Root AST node representing the parsed formula

        Raises:
            ParseError: If the token sequence is not a well-formed formula
        """
        logger = get_logger()

        if not tokens:
            raise ParseError("Unexpected end of input: formula is empty")

        ast_result = super().parse(self._track(tokens))

        if ast_result is None:
            raise ParseError("Failed to parse formula (syntax error)")

        logger.debug(f"Successfully parsed formula into {type(ast_result).__name__}")
        return ast_result

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when a token matches no grammar rule,
        or with None when the input ends early. Always raises: a malformed
        formula is rejected as a whole.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raised with a human-readable cause
        """
        raise ParseError(self._describe_error(token))

    def _describe_error(self, token) -> str:
        if token is None:
            last: Optional[str] = self._last_token.type if self._last_token else None
            if last in _OPERAND_END and self._paren_depth > 0:
                return "Missing closing parenthesis"
            return "Unexpected end of input"

        after_operand = (
            self._prev_token is not None and self._prev_token.type in _OPERAND_END
        )

        if after_operand and token.type in _OPERAND_START:
            if self._paren_depth_before > 0:
                return (
                    f"Missing closing parenthesis before '{token.value}' "
                    f"at position {token.index}"
                )
            return (
                f"Unexpected trailing input '{token.value}' at position {token.index}"
            )

        if after_operand and token.type == "RPAREN" and self._paren_depth_before == 0:
            return f"Unexpected trailing input ')' at position {token.index}"

        return (
            f"Unexpected token {token.type} ('{token.value}') "
            f"at position {token.index}"
        )
