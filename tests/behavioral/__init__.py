"""
Behavioral Tests
================

Tests that verify user-facing behavior.
These tests check:
- Documented query/response scenarios
- Laws that hold for every corpus (tokenization, rebuild, path weights)
- Edge case handling

Run with: python -m pytest tests/behavioral/ -v
"""
