# logic/subformulas.py
# This file is part of Tabula - A Truth Table Tutor
#
# Post-order decomposition of a formula into truth table columns

"""Subformula columns and their dependencies.

The non-atomic nodes of a tree, listed children-before-parent, are the
columns of the truth table from left to right. A learner fills them in this
order, so every column only depends on atom columns and columns to its left.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from parser import ast_nodes as ast
from parser.printer import print_unicode


class _PostOrderCollector(ast.Visitor):
    def __init__(self):
        self.nodes: List[ast.Formula] = []

    def visit_var(self, n: ast.Var):
        pass

    def visit_unary(self, n: ast.Unary):
        n.operand.accept(self)
        self.nodes.append(n)

    def visit_binary(self, n: ast.Binary):
        n.left.accept(self)
        n.right.accept(self)
        self.nodes.append(n)


def collect_subformulas(node: ast.Formula) -> List[ast.Formula]:
    """List every Unary and Binary node of ``node`` in post-order.

    Var nodes are never included. Each node appears after its non-atomic
    children, and the root (if non-atomic) is last.
    """
    if not isinstance(node, ast.Formula):
        raise ast.unknown_node(node)
    collector = _PostOrderCollector()
    node.accept(collector)
    return collector.nodes


@dataclass(frozen=True)
class ColumnDependencies:
    """Columns that directly feed one subformula column.

    Attributes:
        atom_columns: Indices into the sorted atom list
        subformula_columns: Indices into the subformula list
    """

    atom_columns: Tuple[int, ...]
    subformula_columns: Tuple[int, ...]


def column_dependencies(
    node: ast.Formula,
    atoms: Sequence[str],
    subformulas: Sequence[ast.Formula],
) -> ColumnDependencies:
    """Find the atom and subformula columns read by ``node``'s connective.

    Subformula children are matched by ``node_id``, not by structure, so two
    identical subformulas in different places map to their own columns.
    """
    atom_index: Dict[str, int] = {name: i for i, name in enumerate(atoms)}
    column_index: Dict[int, int] = {sf.node_id: i for i, sf in enumerate(subformulas)}

    atom_cols = set()
    sub_cols = set()
    for child in getattr(node, "children", ()):
        if isinstance(child, ast.Var):
            if child.name in atom_index:
                atom_cols.add(atom_index[child.name])
        elif child.node_id in column_index:
            sub_cols.add(column_index[child.node_id])

    return ColumnDependencies(tuple(sorted(atom_cols)), tuple(sorted(sub_cols)))


def describe_dependencies(
    deps: ColumnDependencies,
    atoms: Sequence[str],
    subformulas: Sequence[ast.Formula],
) -> str:
    """Render dependencies as e.g. ``"P, Q and ¬R"``; empty when there are none."""
    parts = []
    if deps.atom_columns:
        parts.append(", ".join(atoms[i] for i in deps.atom_columns))
    if deps.subformula_columns:
        parts.append(
            ", ".join(print_unicode(subformulas[i]) for i in deps.subformula_columns)
        )
    return " and ".join(parts)
