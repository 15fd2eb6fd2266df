# tests/logic_tests/test_subformulas.py
# This file is part of Tabula - A Truth Table Tutor
#
# Test suite for subformula columns and their dependencies

import pytest
from parser import parse_formula, print_ascii
from parser.ast_nodes import Var
from logic import (
    collect_subformulas,
    column_dependencies,
    describe_dependencies,
    get_atoms,
)


def _is_post_order(columns):
    position = {sf.node_id: i for i, sf in enumerate(columns)}
    for i, sf in enumerate(columns):
        for child in sf.children:
            if not isinstance(child, Var) and position[child.node_id] >= i:
                return False
    return True


class TestCollectSubformulas:
    """Post-order, non-atomic nodes only."""

    COLUMN_CASES = [
        ("P", []),
        ("~P", ["~P"]),
        ("P & Q", ["(P & Q)"]),
        ("(P ∧ Q) → ¬R", ["(P & Q)", "~R", "((P & Q) -> ~R)"]),
        ("~~P", ["~P", "~~P"]),
        (
            "~(P v Q) <-> R & S",
            ["(P v Q)", "~(P v Q)", "(R & S)", "(~(P v Q) <-> (R & S))"],
        ),
    ]

    @pytest.mark.parametrize("formula, expected", COLUMN_CASES)
    def test_column_order(self, formula, expected):
        columns = collect_subformulas(parse_formula(formula))
        assert [print_ascii(c) for c in columns] == expected

    @pytest.mark.parametrize(
        "formula",
        ["P & Q v R -> S", "~(P <-> ~Q) & (R v ~S)", "((P -> Q) -> R) <-> ~~P"],
    )
    def test_post_order_properties(self, formula):
        root = parse_formula(formula)
        columns = collect_subformulas(root)

        assert not any(isinstance(c, Var) for c in columns)
        assert _is_post_order(columns)
        assert columns[-1] is root

    def test_repeated_subformulas_get_their_own_columns(self):
        columns = collect_subformulas(parse_formula("(P & Q) v (P & Q)"))
        assert len(columns) == 3
        assert columns[0] == columns[1]
        assert columns[0].node_id != columns[1].node_id


class TestColumnDependencies:
    """Which columns feed a given subformula column."""

    def setup_method(self):
        self.root = parse_formula("(P ∧ Q) → ¬R")
        self.atoms = get_atoms(self.root)
        self.columns = collect_subformulas(self.root)

    def test_atom_only_dependencies(self):
        deps = column_dependencies(self.columns[0], self.atoms, self.columns)
        assert deps.atom_columns == (0, 1)
        assert deps.subformula_columns == ()
        assert describe_dependencies(deps, self.atoms, self.columns) == "P, Q"

    def test_negation_depends_on_its_atom(self):
        deps = column_dependencies(self.columns[1], self.atoms, self.columns)
        assert deps.atom_columns == (2,)
        assert describe_dependencies(deps, self.atoms, self.columns) == "R"

    def test_root_depends_on_subformula_columns(self):
        deps = column_dependencies(self.columns[2], self.atoms, self.columns)
        assert deps.atom_columns == ()
        assert deps.subformula_columns == (0, 1)
        assert describe_dependencies(deps, self.atoms, self.columns) == "(P ∧ Q), ¬R"

    def test_mixed_dependencies(self):
        root = parse_formula("P -> ~Q")
        atoms, columns = get_atoms(root), collect_subformulas(root)
        deps = column_dependencies(root, atoms, columns)
        assert describe_dependencies(deps, atoms, columns) == "P and ¬Q"

    def test_identical_subformulas_resolved_by_identity(self):
        root = parse_formula("(P & Q) v (P & Q)")
        atoms, columns = get_atoms(root), collect_subformulas(root)
        deps = column_dependencies(root, atoms, columns)
        assert deps.subformula_columns == (0, 1)
