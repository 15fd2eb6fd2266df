# tests/parser_tests/test_parser_basic.py
# This file is part of Tabula - A Truth Table Tutor
#
# Test suite for basic parser functionality and round-trip integrity

"""Test suite for basic parser functionality and AST integrity.

Tests that valid formulas parse, that the canonical printers produce text
which parses back to an equal tree, and that node identities are unique and
assigned in construction order.
"""

import pytest
from parser import parse, parse_formula, print_ascii, print_unicode
from parser.ast_nodes import Binary, Connective, NodeIdGenerator, Unary, Var
from utils.logger import get_logger


def _walk(node):
    yield node
    for child in getattr(node, "children", ()):
        yield from _walk(child)


class TestFormulaParserBasic:
    """Test cases for basic parser functionality and round-trip integrity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    VALID_FORMULAS = [
        # Basic atoms and connectives
        "P",
        "~Q",
        "P & Q",
        "P v R",
        "P -> Q",
        "P <-> Q",
        # Precedence and associativity
        "P & Q v R",
        "P v Q & R",
        "P & Q & R",
        "P -> Q -> R",
        "~~~P",
        # Parentheses and grouping
        "P & (Q v R)",
        "~(P & Q)",
        "((P))",
        "(P & Q) v (R & S)",
        # Unicode and mixed notation
        "(P ∧ Q) → ¬R",
        "P ∨ Q ↔ R",
        "¬(P → Q) & R",
        "P V Q",
        # Deep nesting
        "~((P v Q) & (R v S))",
        "P & (Q v (R & (S v (P & Q))))",
        # Whitespace handling
        "  (P v Q)  ",
        "\tP\n->\nQ",
    ]

    @pytest.mark.parametrize("formula", VALID_FORMULAS)
    def test_ascii_round_trip(self, formula):
        """parse -> print_ascii -> parse preserves the AST structure."""
        original_ast = parse_formula(formula)
        printed = print_ascii(original_ast)
        reparsed_ast = parse_formula(printed)

        self.logger.debug(f"Original: {formula} | Printed: {printed}")

        assert original_ast == reparsed_ast, (
            f"Round-trip parsing failed:\n"
            f"Original: {formula}\n"
            f"Printed: {printed}"
        )
        assert print_ascii(reparsed_ast) == printed

    @pytest.mark.parametrize("formula", VALID_FORMULAS)
    def test_unicode_round_trip(self, formula):
        """parse -> print_unicode -> parse preserves the AST structure."""
        original_ast = parse_formula(formula)
        reparsed_ast = parse_formula(print_unicode(original_ast))

        assert original_ast == reparsed_ast

    def test_parse_alias(self):
        assert parse is parse_formula

    def test_variable_node(self):
        ast = parse_formula("P")
        assert isinstance(ast, Var)
        assert ast.name == "P"
        assert ast.is_atomic

    def test_binary_node_fields(self):
        ast = parse_formula("P <-> Q")
        assert isinstance(ast, Binary)
        assert ast.op is Connective.BICOND
        assert ast.left == Var("P")
        assert ast.right == Var("Q")
        assert ast.children == (Var("P"), Var("Q"))

    def test_unary_node_fields(self):
        ast = parse_formula("¬P")
        assert isinstance(ast, Unary)
        assert ast.op is Connective.NOT
        assert ast.operand == Var("P")

    def test_binary_rejects_negation_operator(self):
        with pytest.raises(ValueError):
            Binary(Connective.NOT, Var("P"), Var("Q"))

    def test_node_ids_follow_construction_order(self):
        """Children are numbered before the node that wraps them."""
        ast = parse_formula("P & Q v R")
        # P=0, Q=1, (P & Q)=2, R=3, ((P & Q) v R)=4
        assert ast.node_id == 4
        assert ast.left.node_id == 2
        assert ast.left.left.node_id == 0
        assert ast.left.right.node_id == 1
        assert ast.right.node_id == 3

    def test_root_id_not_always_lowest(self):
        ast = parse_formula("~P")
        assert ast.operand.node_id == 0
        assert ast.node_id == 1

    def test_node_ids_are_unique(self):
        ast = parse_formula("(P & P) v (P & P)")
        ids = [node.node_id for node in _walk(ast)]
        assert len(ids) == len(set(ids)) == 7

    def test_ids_restart_for_every_parse(self):
        first = parse_formula("P & Q")
        second = parse_formula("P & Q")
        assert first.node_id == second.node_id == 2

    def test_identity_is_not_equality(self):
        """Equal subformulas are distinct nodes with distinct ids."""
        ast = parse_formula("(P & Q) v (P & Q)")
        assert ast.left == ast.right
        assert ast.left.node_id != ast.right.node_id
        assert hash(ast.left) == hash(ast.right)

    def test_nodes_are_immutable(self):
        ast = parse_formula("P")
        with pytest.raises(AttributeError):
            ast.name = "Q"

    def test_str_is_ascii_canonical_form(self):
        assert str(parse_formula("(P ∧ Q) → ¬R")) == "((P & Q) -> ~R)"

    def test_node_id_generator(self):
        ids = NodeIdGenerator()
        assert [ids.next_id() for _ in range(3)] == [0, 1, 2]
        assert NodeIdGenerator(5).next_id() == 5
