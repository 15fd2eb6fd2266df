#!/usr/bin/env python3
# run_tables.py
# This file is part of Tabula - A Truth Table Tutor
#
# Command-line interface for printing truth tables with configurable logging levels

import sys
import random
import argparse
from pathlib import Path
from typing import List, Optional

from parser import GRAMMAR_WARNING, print_ascii, print_unicode
from parser.exceptions import FormulaError
from logic import TruthTable, generate_random_formula, load_formula
from utils.logger import LogLevel, get_logger, set_log_level


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If the formula file doesn't exist
        ValueError: If the formula file is empty
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def configure_logging_for_tables(verbose: bool = False, debug: bool = False) -> None:
    """Configure logging levels for table output.

    Tables are written at INFO level, so INFO stays on without flags.

    Args:
        verbose: Also show per-column details (DEBUG level)
        debug: Enable DEBUG level logging
    """
    set_log_level(LogLevel.DEBUG if debug or verbose else LogLevel.INFO)


def resolve_formula(args: argparse.Namespace) -> str:
    """Pick the formula text from the command line, a file or the generator."""
    if args.random:
        rng = random.Random(args.seed) if args.seed is not None else None
        return generate_random_formula(rng)
    if args.file is not None:
        return read_formula_file(args.file)
    if args.formula:
        return args.formula
    raise ValueError("No formula given (pass a formula, --file or --random)")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula propositional truth table tutor",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tables.py "(P ∧ Q) → ¬R"
  python run_tables.py "P & Q v R" --check-only
  python run_tables.py -f formula.txt --ascii
  python run_tables.py --random --seed 7 -v

Connectives (ASCII or Unicode):
  ~ ¬   & ∧   v V ∨   -> →   <-> ↔
        """,
    )

    parser.add_argument("formula", nargs="?", help="Formula text")

    parser.add_argument(
        "-f", "--file", type=Path, help="Read the formula from a file"
    )

    parser.add_argument(
        "--random", action="store_true", help="Use a randomly generated formula"
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for --random"
    )

    parser.add_argument(
        "--ascii", action="store_true", help="Print column headers in ASCII notation"
    )

    parser.add_argument(
        "--check-only",
        action="store_true",
        help="Only parse and check the formula, do not print the table",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth table tool.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging_for_tables(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        text = resolve_formula(args)
        loaded = load_formula(text)

        if args.verbose:
            logger.info(f"📋 Formula loaded: {text}")
        logger.info(f"Canonical form: {loaded.canonical}")

        if loaded.grammar_warning:
            logger.warning(GRAMMAR_WARNING)
        else:
            logger.info("✅ Formula is fully parenthesized")

        if args.check_only:
            return 0

        table = TruthTable.from_formula(loaded.root)
        lines = table.render_lines(print_ascii if args.ascii else print_unicode)

        logger.info("")
        for line in lines:
            logger.table_row(line)

        logger.classification(str(table.classify()).upper())
        return 0

    except FormulaError as e:
        logger.error(f"Formula error: {e}")
        return 2

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Input error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
