# logic/assignments.py
# This file is part of Tabula - A Truth Table Tutor
#
# Enumeration of truth table rows in classroom order

"""Row enumeration for truth tables.

Rows follow the classroom convention TT, TF, FT, FF: the first atom is the
most significant bit, and rows run from all-true down to all-false.
"""

from typing import Dict, List, Sequence

from utils.logger import get_logger


def all_assignments(atoms: Sequence[str]) -> List[Dict[str, bool]]:
    """Enumerate every assignment to ``atoms`` in descending binary order.

    Atom ``i`` occupies bit ``n-1-i`` of a mask that counts down from
    ``2**n - 1`` to zero. Each row is a fresh dictionary.

    Args:
        atoms: Distinct atom names, normally sorted ascending

    Returns:
        ``2**n`` assignments, first all-true, last all-false

    Raises:
        ValueError: If ``atoms`` contains duplicates

    Example:
        >>> all_assignments(["P", "Q"])
        [{'P': True, 'Q': True}, {'P': True, 'Q': False}, {'P': False, 'Q': True}, {'P': False, 'Q': False}]
    """
    if len(set(atoms)) != len(atoms):
        raise ValueError(f"Atom names must be distinct: {list(atoms)}")

    n = len(atoms)
    rows = []
    for mask in range((1 << n) - 1, -1, -1):
        rows.append(
            {atom: bool(mask & (1 << (n - 1 - i))) for i, atom in enumerate(atoms)}
        )

    get_logger().debug(f"Enumerated {len(rows)} assignments over {list(atoms)}")
    return rows


def format_row(assignment: Dict[str, bool], atoms: Sequence[str]) -> str:
    """Render one row as a compact T/F string in ``atoms`` order, e.g. ``TF``."""
    return "".join("T" if assignment[a] else "F" for a in atoms)
