# parser/ast_nodes.py
# This file is part of Tabula - A Truth Table Tutor
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable node classes used to construct tree
representations of propositional formulas. The tree is a closed sum type of
three variants:

Node Types:
    Var: A single uppercase propositional variable (atom)
    Unary: Negation of exactly one operand
    Binary: AND, OR, IMP or BICOND over a left and a right operand

Every node carries a ``node_id`` assigned once at construction by the parser
or the random generator. The id correlates a node across the subformula
column list and dependency lookups; it is excluded from equality and hashing,
so two separately parsed copies of ``(P & Q)`` compare equal while keeping
distinct ids.

All nodes support the visitor design pattern for traversal.
"""

from __future__ import annotations
import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol


class Connective(Enum):
    """Logical connectives, named after the token kinds that spell them."""

    NOT = "NOT"
    AND = "AND"
    OR = "OR"
    IMP = "IMP"
    BICOND = "BICOND"

    def __str__(self) -> str:
        return self.name

    @property
    def is_binary(self) -> bool:
        return self is not Connective.NOT


BINARY_CONNECTIVES = (
    Connective.AND,
    Connective.OR,
    Connective.IMP,
    Connective.BICOND,
)


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors implement one visit method per node variant, which
    keeps every traversal exhaustive over the three node kinds.
    """

    def visit_var(self, n: Var): ...

    def visit_unary(self, n: Unary): ...

    def visit_binary(self, n: Binary): ...


class NodeIdGenerator:
    """Source of unique node identities for one parse or generation call.

    Ids are consecutive integers starting at zero, handed out in node
    construction order. Each call that builds a tree owns its own generator,
    so there is no process-wide counter to reset.
    """

    def __init__(self, start: int = 0):
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


@dataclass(frozen=True, slots=True)
class Formula:
    """Base class for all formula nodes.

    Provides the visitor dispatch hook and the canonical ASCII string form.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    @property
    def is_atomic(self) -> bool:
        return False

    def __str__(self) -> str:
        """Return the fully parenthesized ASCII rendering of the node."""
        from .printer import print_ascii

        return print_ascii(self)


@dataclass(frozen=True, slots=True)
class Var(Formula):
    """Atomic proposition: a single uppercase letter A-Z.

    Attributes:
        name: The letter naming this atom
        node_id: Identity assigned at construction
    """

    name: str
    node_id: Optional[int] = field(default=None, compare=False)

    def accept(self, v: Visitor):
        return v.visit_var(self)

    @property
    def is_atomic(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Unary(Formula):
    """Logical negation of a single operand.

    Attributes:
        operand: The formula being negated
        node_id: Identity assigned at construction
    """

    operand: Formula
    node_id: Optional[int] = field(default=None, compare=False)

    def accept(self, v: Visitor):
        return v.visit_unary(self)

    @property
    def op(self) -> Connective:
        return Connective.NOT

    @property
    def children(self) -> tuple:
        return (self.operand,)


@dataclass(frozen=True, slots=True)
class Binary(Formula):
    """Binary connective applied to a left and a right operand.

    Attributes:
        op: One of AND, OR, IMP, BICOND
        left: Left operand
        right: Right operand
        node_id: Identity assigned at construction
    """

    op: Connective
    left: Formula
    right: Formula
    node_id: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        if not self.op.is_binary:
            raise ValueError(f"{self.op} is not a binary connective")

    def accept(self, v: Visitor):
        return v.visit_binary(self)

    @property
    def children(self) -> tuple:
        return (self.left, self.right)


def unknown_node(node) -> TypeError:
    """Build the error raised when a traversal meets a non-formula value."""
    return TypeError(f"Unknown formula node: {type(node).__name__}")
