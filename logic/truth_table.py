# logic/truth_table.py
# This file is part of Tabula - A Truth Table Tutor
#
# Truth table construction, column grading and formula classification

"""Truth tables derived from a parsed formula.

A table is a pure view of one tree: sorted atom columns, rows in TT/TF/FT/FF
order and one column per non-atomic subformula in post-order. Grading compares
a learner's guesses for a column against the computed values row by row.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Sequence, Tuple

from parser.ast_nodes import Formula
from parser.printer import print_unicode
from .assignments import all_assignments, format_row
from .evaluator import evaluate, get_atoms
from .subformulas import (
    ColumnDependencies,
    collect_subformulas,
    column_dependencies,
    describe_dependencies,
)
from utils.logger import get_logger


class Classification(Enum):
    """Semantic status of a formula across all rows."""

    TAUTOLOGY = auto()
    CONTRADICTION = auto()
    CONTINGENT = auto()

    def __str__(self) -> str:
        return self.name.lower()


class CellFeedback(Enum):
    """Outcome of grading one guessed cell."""

    CORRECT = auto()
    INCORRECT = auto()
    MISSING = auto()


@dataclass(frozen=True)
class ColumnReport:
    """Result of grading one column of guesses.

    Attributes:
        column: Zero-based subformula column index
        feedback: Per-row outcome, in row order
    """

    column: int
    feedback: Tuple[CellFeedback, ...]

    @property
    def correct(self) -> int:
        return self.feedback.count(CellFeedback.CORRECT)

    @property
    def incorrect(self) -> int:
        return self.feedback.count(CellFeedback.INCORRECT)

    @property
    def missing(self) -> int:
        return self.feedback.count(CellFeedback.MISSING)

    @property
    def is_complete(self) -> bool:
        """True when every row is filled in and correct."""
        return self.incorrect == 0 and self.missing == 0


@dataclass
class TruthTable:
    """Complete truth table of one formula.

    Attributes:
        root: The formula the table was built from
        atoms: Sorted atom names, one column each
        rows: Assignments in TT/TF/FT/FF order
        columns: Non-atomic subformulas in post-order
        values: ``values[c][r]`` is column ``c`` evaluated on row ``r``
    """

    root: Formula
    atoms: List[str]
    rows: List[Dict[str, bool]]
    columns: List[Formula]
    values: List[List[bool]] = field(repr=False)

    @classmethod
    def from_formula(cls, root: Formula) -> "TruthTable":
        atoms = get_atoms(root)
        rows = all_assignments(atoms)
        columns = collect_subformulas(root)
        values = [[evaluate(col, row) for row in rows] for col in columns]

        get_logger().debug(
            f"Built truth table: {len(atoms)} atoms, {len(rows)} rows, "
            f"{len(columns)} columns"
        )
        return cls(root, atoms, rows, columns, values)

    @property
    def final_values(self) -> List[bool]:
        """Truth values of the whole formula, one per row."""
        return [evaluate(self.root, row) for row in self.rows]

    def classify(self) -> Classification:
        final = self.final_values
        if all(final):
            return Classification.TAUTOLOGY
        if not any(final):
            return Classification.CONTRADICTION
        return Classification.CONTINGENT

    def column_label(self, column: int) -> str:
        return print_unicode(self.columns[column])

    def dependencies(self, column: int) -> ColumnDependencies:
        return column_dependencies(self.columns[column], self.atoms, self.columns)

    def describe_dependencies(self, column: int) -> str:
        return describe_dependencies(self.dependencies(column), self.atoms, self.columns)

    def render_lines(self, label=print_unicode) -> List[str]:
        """Render the table as aligned text lines, header first."""
        headers = list(self.atoms) + [label(col) for col in self.columns]
        widths = [max(len(h), 1) for h in headers]

        def line(cells: Sequence[str]) -> str:
            return " | ".join(cell.center(w) for cell, w in zip(cells, widths))

        lines = [line(headers), "-+-".join("-" * w for w in widths)]
        for r, row in enumerate(self.rows):
            cells = list(format_row(row, self.atoms))
            cells += ["T" if self.values[c][r] else "F" for c in range(len(self.columns))]
            lines.append(line(cells))
        return lines


def grade_column(
    table: TruthTable, column: int, guesses: Sequence[Optional[bool]]
) -> ColumnReport:
    """Compare guesses for one column with the computed values.

    Args:
        table: Table the column belongs to
        column: Zero-based subformula column index
        guesses: One entry per row; None for a cell left blank

    Returns:
        Per-row feedback with counts

    Raises:
        IndexError: ``column`` is out of range
        ValueError: ``guesses`` does not have one entry per row
    """
    if not 0 <= column < len(table.columns):
        raise IndexError(f"Column {column} out of range (0..{len(table.columns) - 1})")
    if len(guesses) != len(table.rows):
        raise ValueError(f"Expected {len(table.rows)} guesses, got {len(guesses)}")

    feedback = []
    for guess, actual in zip(guesses, table.values[column]):
        if guess is None:
            feedback.append(CellFeedback.MISSING)
        elif guess == actual:
            feedback.append(CellFeedback.CORRECT)
        else:
            feedback.append(CellFeedback.INCORRECT)

    report = ColumnReport(column, tuple(feedback))
    get_logger().column_checked(
        column + 1,
        table.column_label(column),
        report.correct,
        report.incorrect,
        report.missing,
    )
    return report
