# logic/__init__.py
# This file is part of Tabula - A Truth Table Tutor
#
# Truth table computation over parsed propositional formulas

from .evaluator import Evaluator, evaluate, get_atoms
from .assignments import all_assignments, format_row
from .subformulas import (
    ColumnDependencies,
    collect_subformulas,
    column_dependencies,
    describe_dependencies,
)
from .generator import generate_random_ast, generate_random_formula
from .truth_table import (
    CellFeedback,
    Classification,
    ColumnReport,
    TruthTable,
    grade_column,
)
from .exercise import LoadedFormula, TruthTableExercise, load_formula

__all__ = [
    "Evaluator",
    "evaluate",
    "get_atoms",
    "all_assignments",
    "format_row",
    "ColumnDependencies",
    "collect_subformulas",
    "column_dependencies",
    "describe_dependencies",
    "generate_random_ast",
    "generate_random_formula",
    "CellFeedback",
    "Classification",
    "ColumnReport",
    "TruthTable",
    "grade_column",
    "LoadedFormula",
    "TruthTableExercise",
    "load_formula",
]
