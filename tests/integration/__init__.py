"""
Integration Tests
=================

Tests that verify components work together correctly.
These tests may:
- Take longer than unit tests (but still < 5s each)
- Use the shared session fixtures
- Write walk logs and exports under tmp_path
- Drive the command-line front end

Run with: python -m pytest tests/integration/ -v
"""
