"""
Test Fixtures
=============

Shared test corpora used across test categories.

Usage:
    from tests.fixtures.corpus import FOX_CORPUS, DIAMOND_TEXT, CHAIN_TEXT
"""

from .corpus import FOX_CORPUS, DIAMOND_TEXT, CHAIN_TEXT

__all__ = [
    'FOX_CORPUS',
    'DIAMOND_TEXT',
    'CHAIN_TEXT',
]
