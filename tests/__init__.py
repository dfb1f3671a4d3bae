"""Test suite for compound-config.

Test organization:
- fixtures/: Sample schemas, config files and option builders
- unit/: Unit tests for individual modules

Run tests with:
    pytest tests/
    pytest tests/unit/
    pytest tests/ -v --tb=short
"""
