# tests/conftest.py
# This file is part of Lego - A Bounded First-Order Logic Evaluator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Lego evaluator tests.

This module provides pytest configuration, fixtures, and utilities for testing
the parser and evaluator. It ensures proper module path setup and provides
common test infrastructure for all test modules.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import logic
        import syntax
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def env():
    """Provide a fresh, empty binding environment.

    Returns:
        Environment: Empty environment
    """
    from logic.environment import Environment

    return Environment()


@pytest.fixture
def basic_formula():
    """Provide a basic closed formula.

    Returns:
        str: Formula true for every x in its domain
    """
    return "forall x in [1, 5]. x >= 1"


@pytest.fixture
def nested_formula():
    """Provide a formula with nested alternating quantifiers.

    Returns:
        str: forall/exists formula that evaluates to true
    """
    return "forall x in [1, 3]. exists y in [1, 3]. x + y = 4"
