"""
Test suite for rate-balance-core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
