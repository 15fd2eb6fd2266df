# tests/conftest.py
# This file is part of Tabula - A Truth Table Tutor
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tabula tests.

Puts the project root on the import path so the flat ``parser``, ``logic``
and ``utils`` packages resolve without installation, and provides a few
formulas shared by several suites.
"""

import sys
import random
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages import before any test runs.

    Yields:
        None: Control to test execution
    """
    try:
        import parser
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def default_formula():
    """Formula the tutor opens with."""
    return "(P ∧ Q) → ¬R"


@pytest.fixture
def seeded_rng():
    """Deterministic random source for generator tests."""
    return random.Random(20240611)
