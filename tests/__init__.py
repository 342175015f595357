"""
Test suite for moneycalc

Contains:
- tests/unit/          : Unit tests for individual modules
"""
