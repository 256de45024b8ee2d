"""
Test suite for balance aggregation

Contains:
- tests/unit/          : Unit tests for individual modules
"""
