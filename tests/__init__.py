"""
Test suite for unordered-tuple

Contains:
- tests/unit/          : Unit and property tests for individual modules
"""
