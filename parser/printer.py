# parser/printer.py
# This file is part of Tabula - A Truth Table Tutor
#
# Canonical pretty-printers for propositional formulas

"""Fully parenthesized renderers for formula trees.

Two renderers share one visitor and differ only in their glyph table. Every
binary node is printed as ``(left OP right)`` and negation as a prefix, with
no parentheses elided on precedence grounds. The ASCII rendering therefore
doubles as the canonical form used by the grammaticality check, and either
rendering parses back to an equal tree.
"""

from typing import Mapping

from . import ast_nodes as ast
from .ast_nodes import Connective

ASCII_GLYPHS: Mapping[Connective, str] = {
    Connective.NOT: "~",
    Connective.AND: "&",
    Connective.OR: "v",
    Connective.IMP: "->",
    Connective.BICOND: "<->",
}

UNICODE_GLYPHS: Mapping[Connective, str] = {
    Connective.NOT: "¬",
    Connective.AND: "∧",
    Connective.OR: "∨",
    Connective.IMP: "→",
    Connective.BICOND: "↔",
}


class FormulaPrinter(ast.Visitor):
    """Render a formula tree with a given connective glyph table.

    Attributes:
        glyphs: Mapping from each connective to its printed symbol
    """

    def __init__(self, glyphs: Mapping[Connective, str]):
        missing = [c for c in Connective if c not in glyphs]
        if missing:
            raise ValueError(f"Glyph table has no symbol for {missing}")
        self.glyphs = glyphs

    def render(self, node: ast.Formula) -> str:
        if not isinstance(node, ast.Formula):
            raise ast.unknown_node(node)
        return node.accept(self)

    def visit_var(self, n: ast.Var) -> str:
        return n.name

    def visit_unary(self, n: ast.Unary) -> str:
        return f"{self.glyphs[Connective.NOT]}{self.render(n.operand)}"

    def visit_binary(self, n: ast.Binary) -> str:
        return f"({self.render(n.left)} {self.glyphs[n.op]} {self.render(n.right)})"


_ASCII_PRINTER = FormulaPrinter(ASCII_GLYPHS)
_UNICODE_PRINTER = FormulaPrinter(UNICODE_GLYPHS)


def print_ascii(node: ast.Formula) -> str:
    """Render a formula with ASCII connectives, e.g. ``((P & Q) -> ~R)``."""
    return _ASCII_PRINTER.render(node)


def print_unicode(node: ast.Formula) -> str:
    """Render a formula with Unicode connectives, e.g. ``((P ∧ Q) → ¬R)``."""
    return _UNICODE_PRINTER.render(node)
