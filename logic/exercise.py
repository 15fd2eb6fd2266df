# logic/exercise.py
# This file is part of Tabula - A Truth Table Tutor
#
# Column-by-column truth table exercise for a single formula

"""Per-formula truth table exercise.

A learner fills the subformula columns strictly left to right: only the
active column accepts guesses, and checking it advances to the next column
once every row is correct. Completing the last column reveals whether the
formula is a tautology, a contradiction or contingent.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from parser import check_grammar, parse_formula, print_unicode
from parser.ast_nodes import Formula
from .truth_table import Classification, ColumnReport, TruthTable, grade_column
from utils.logger import get_logger


@dataclass(frozen=True)
class LoadedFormula:
    """A successfully parsed formula ready for an exercise.

    Attributes:
        root: Parsed tree
        canonical: Fully parenthesized Unicode rendering shown back to the user
        grammar_warning: True if the raw input relied on precedence
    """

    root: Formula
    canonical: str
    grammar_warning: bool


def load_formula(text: str) -> LoadedFormula:
    """Parse ``text`` and run the grammaticality check on it.

    Raises:
        LexError: Unrecognized character
        ParseError: Malformed formula
    """
    logger = get_logger()

    root = parse_formula(text)
    canonical = print_unicode(root)
    warn = check_grammar(text, root)

    if warn:
        logger.grammar_warning(text, canonical)
    return LoadedFormula(root, canonical, warn)


_VERDICT_PHRASES = {
    Classification.TAUTOLOGY: "a tautology",
    Classification.CONTRADICTION: "a contradiction",
    Classification.CONTINGENT: "contingent",
}


class ColumnStatus(Enum):
    PENDING = auto()
    CORRECT = auto()


def cycle_guess(current: Optional[bool]) -> Optional[bool]:
    """Next value in the blank -> T -> F -> blank rotation."""
    if current is None:
        return True
    if current:
        return False
    return None


class TruthTableExercise:
    """Guesses and progress for one formula's subformula columns.

    Attributes:
        table: Truth table being filled in
        guesses: ``guesses[c][r]`` is the learner's value or None
        status: Per-column status
        active_column: Index of the only editable column
    """

    def __init__(self, loaded: LoadedFormula):
        self.loaded = loaded
        self.table = TruthTable.from_formula(loaded.root)

        num_rows = len(self.table.rows)
        num_cols = len(self.table.columns)
        self.guesses: List[List[Optional[bool]]] = [
            [None] * num_rows for _ in range(num_cols)
        ]
        self.status: List[ColumnStatus] = [ColumnStatus.PENDING] * num_cols
        self.active_column = 0

        get_logger().formula_loaded(
            loaded.canonical, ", ".join(self.table.atoms), num_cols
        )

    @classmethod
    def from_text(cls, text: str) -> "TruthTableExercise":
        return cls(load_formula(text))

    @property
    def is_finished(self) -> bool:
        return all(s is ColumnStatus.CORRECT for s in self.status)

    def can_edit(self, column: int) -> bool:
        return (
            column == self.active_column
            and 0 <= column < len(self.status)
            and self.status[column] is ColumnStatus.PENDING
        )

    def set_guess(self, column: int, row: int, value: Optional[bool]) -> bool:
        """Record a guess; returns False when the column is not editable."""
        if not self.can_edit(column):
            return False
        self.guesses[column][row] = value
        return True

    def toggle_guess(self, column: int, row: int) -> bool:
        """Rotate one cell through blank, T and F; False if not editable."""
        if not self.can_edit(column):
            return False
        self.guesses[column][row] = cycle_guess(self.guesses[column][row])
        return True

    def active_dependencies(self) -> str:
        """Columns the active column is computed from, e.g. ``"P, Q"``."""
        if self.is_finished:
            return ""
        return self.table.describe_dependencies(self.active_column)

    def check_active_column(self) -> Optional[ColumnReport]:
        """Grade the active column, advancing when it is fully correct.

        Returns:
            The column report, or None when there is nothing to check
        """
        if self.is_finished:
            return None

        column = self.active_column
        report = grade_column(self.table, column, self.guesses[column])

        if report.is_complete:
            self.status[column] = ColumnStatus.CORRECT
            if column < len(self.status) - 1:
                self.active_column = column + 1
        return report

    def summarize(self, report: ColumnReport) -> str:
        """Describe a column report the way the exercise reports progress."""
        total = len(self.table.columns)
        column = report.column
        summary = (
            f"Column {column + 1} of {total} ({self.table.column_label(column)}): "
            f"Correct: {report.correct}, Incorrect: {report.incorrect}, "
            f"Missing: {report.missing}."
        )

        if not report.is_complete:
            return summary + " Try fixing the highlighted rows."

        summary += " ✅ All rows correct."
        if column < total - 1:
            return summary + " Moving to the next subformula column."

        summary += " You have completed all subformulas."
        return summary + f" This formula is {_VERDICT_PHRASES[self.table.classify()]}."
