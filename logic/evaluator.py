# logic/evaluator.py
# This file is part of Tabula - A Truth Table Tutor
#
# Truth-value evaluation of formula trees under an assignment

"""Boolean evaluation of formula trees.

Evaluation is total over every tree produced by the parser or the random
generator, provided the assignment covers every atom reachable from the node.
A missing atom is a caller bug and raises ``KeyError``.
"""

from __future__ import annotations
from typing import List, Mapping, Set

from parser import ast_nodes as ast
from parser.ast_nodes import Connective

Assignment = Mapping[str, bool]


class Evaluator(ast.Visitor):
    """Compute the truth value of a formula under one fixed assignment.

    Attributes:
        assignment: Truth value for every atom of the formula
    """

    def __init__(self, assignment: Assignment):
        self.assignment = assignment

    def evaluate(self, node: ast.Formula) -> bool:
        if not isinstance(node, ast.Formula):
            raise ast.unknown_node(node)
        return node.accept(self)

    def visit_var(self, n: ast.Var) -> bool:
        try:
            return bool(self.assignment[n.name])
        except KeyError:
            raise KeyError(f"Assignment has no value for atom '{n.name}'") from None

    def visit_unary(self, n: ast.Unary) -> bool:
        return not self.evaluate(n.operand)

    def visit_binary(self, n: ast.Binary) -> bool:
        # Both sides are always evaluated
        left = self.evaluate(n.left)
        right = self.evaluate(n.right)

        if n.op is Connective.AND:
            return left and right
        if n.op is Connective.OR:
            return left or right
        if n.op is Connective.IMP:
            return (not left) or right
        if n.op is Connective.BICOND:
            return left == right
        raise ValueError(f"Unknown binary connective: {n.op}")


def evaluate(node: ast.Formula, assignment: Assignment) -> bool:
    """Evaluate ``node`` under ``assignment``.

    Example:
        >>> from parser import parse_formula
        >>> evaluate(parse_formula("(P ∧ Q) → ¬R"), {"P": True, "Q": True, "R": False})
        True
    """
    return Evaluator(assignment).evaluate(node)


class _AtomCollector(ast.Visitor):
    def __init__(self):
        self.names: Set[str] = set()

    def visit_var(self, n: ast.Var):
        self.names.add(n.name)

    def visit_unary(self, n: ast.Unary):
        n.operand.accept(self)

    def visit_binary(self, n: ast.Binary):
        n.left.accept(self)
        n.right.accept(self)


def get_atoms(node: ast.Formula) -> List[str]:
    """Return the distinct atom names of ``node`` in ascending order."""
    if not isinstance(node, ast.Formula):
        raise ast.unknown_node(node)
    collector = _AtomCollector()
    node.accept(collector)
    return sorted(collector.names)
