# logic/generator.py
# This file is part of Tabula - A Truth Table Tutor
#
# Random well-formed formula generation for practice questions

"""Random propositional formula generator.

Trees are built top-down directly as ASTs, never as text, so the Unicode
rendering of a generated tree always parses back to an equal tree and prints
identically again.

Generation parameters:
    ATOM_POOL: ordered atom names; the first 2 or 3 are used per formula
    DEPTH_RANGE: maximum recursion depth, drawn uniformly per formula
    NEGATION_PROBABILITY: chance of a negation at each non-leaf step
"""

import random
from typing import Optional, Sequence

from parser.ast_nodes import (
    BINARY_CONNECTIVES,
    Binary,
    Formula,
    NodeIdGenerator,
    Unary,
    Var,
)
from parser.printer import print_unicode
from utils.logger import get_logger

ATOM_POOL = ("P", "Q", "R", "S")
ATOM_COUNT_RANGE = (2, 3)
DEPTH_RANGE = (1, 3)
NEGATION_PROBABILITY = 0.3


def generate_random_ast(
    max_depth: int,
    atoms: Sequence[str],
    rng: Optional[random.Random] = None,
    ids: Optional[NodeIdGenerator] = None,
) -> Formula:
    """Build a random tree of depth at most ``max_depth`` over ``atoms``.

    At depth budget zero a uniformly chosen atom is emitted. Otherwise a
    negation is chosen with probability NEGATION_PROBABILITY, else a binary
    node with a uniformly chosen connective and two independent subtrees.

    Args:
        max_depth: Remaining depth budget
        atoms: Non-empty pool of atom names to draw leaves from
        rng: Random source; the module-level generator when omitted
        ids: Identity source shared by every node of the tree

    Returns:
        Root of the generated tree
    """
    if not atoms:
        raise ValueError("At least one atom is required to generate a formula")

    rng = rng or random.Random()
    ids = ids or NodeIdGenerator()

    if max_depth <= 0:
        return Var(rng.choice(atoms), ids.next_id())

    if rng.random() < NEGATION_PROBABILITY:
        operand = generate_random_ast(max_depth - 1, atoms, rng, ids)
        return Unary(operand, ids.next_id())

    left = generate_random_ast(max_depth - 1, atoms, rng, ids)
    right = generate_random_ast(max_depth - 1, atoms, rng, ids)
    op = rng.choice(BINARY_CONNECTIVES)
    return Binary(op, left, right, ids.next_id())


def generate_random_formula(rng: Optional[random.Random] = None) -> str:
    """Generate a random formula and return its Unicode rendering.

    Args:
        rng: Random source, pass a seeded ``random.Random`` for repeatable output

    Returns:
        Fully parenthesized Unicode formula text, e.g. ``(¬P ∨ (Q ↔ P))``
    """
    logger = get_logger()
    rng = rng or random.Random()

    num_atoms = rng.randint(*ATOM_COUNT_RANGE)
    atoms = ATOM_POOL[:num_atoms]
    depth = rng.randint(*DEPTH_RANGE)

    tree = generate_random_ast(depth, atoms, rng)
    text = print_unicode(tree)

    logger.debug(f"Generated random formula (atoms={atoms}, depth={depth}): {text}")
    return text
