"""
Pytest Configuration and Shared Fixtures
========================================

This module configures pytest for the wordgraph test suite.
It provides:
- Path setup for importing the wordgraph package
- Custom markers for test categorization
- Shared fixtures available to all tests

Test Categories (markers):
- @pytest.mark.unit: Fast, isolated unit tests
- @pytest.mark.integration: Session and CLI end-to-end tests
- @pytest.mark.behavioral: Documented usage scenarios and graph laws
- @pytest.mark.slow: Tests that sleep (walk pacing, cancellation)

Usage:
    # Run only unit tests
    pytest -m unit

    # Run everything except slow tests
    pytest -m "not slow"
"""

import os
import random
import sys

import pytest


# =============================================================================
# PATH SETUP
# =============================================================================

# Ensure the wordgraph package is importable from any test directory
_repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _repo_root not in sys.path:
    sys.path.insert(0, _repo_root)


# =============================================================================
# PYTEST MARKERS
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Fast, isolated unit tests (< 1s each)"
    )
    config.addinivalue_line(
        "markers", "integration: Session and CLI end-to-end tests"
    )
    config.addinivalue_line(
        "markers", "behavioral: Documented usage scenarios and graph laws"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that sleep (walk pacing, cancellation)"
    )


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def fox_session():
    """
    Function-scoped session over the seven-sentence fox/alpha corpus.

    Seeded so that bridge choices are reproducible.
    """
    from wordgraph import Session, WordGraphConfig
    from tests.fixtures.corpus import FOX_CORPUS
    return Session.from_text(FOX_CORPUS, config=WordGraphConfig(random_seed=1234))


@pytest.fixture
def fox_graph():
    """The WordGraph of the fox/alpha corpus."""
    from wordgraph import WordGraph
    from tests.fixtures.corpus import FOX_CORPUS
    return WordGraph.from_text(FOX_CORPUS)


@pytest.fixture
def walk_config(tmp_path):
    """Config writing the walk log under tmp_path, without step delay."""
    from wordgraph import WordGraphConfig
    return WordGraphConfig(
        random_seed=7,
        walk_delay_seconds=0.0,
        walk_log_path=str(tmp_path / "walk_log.txt"),
    )


@pytest.fixture
def rng():
    """Deterministic random generator."""
    return random.Random(42)


# =============================================================================
# TEST COLLECTION HOOKS
# =============================================================================

def pytest_collection_modifyitems(config, items):
    """
    Automatically mark tests based on their location.

    Tests in tests/unit/ get @pytest.mark.unit, etc.
    """
    for item in items:
        test_path = str(item.fspath)

        if '/unit/' in test_path or '\\unit\\' in test_path:
            item.add_marker(pytest.mark.unit)
        elif '/integration/' in test_path or '\\integration\\' in test_path:
            item.add_marker(pytest.mark.integration)
        elif '/behavioral/' in test_path or '\\behavioral\\' in test_path:
            item.add_marker(pytest.mark.behavioral)
