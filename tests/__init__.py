"""
Test suite for vector-algebra

Contains:
- tests/unit/          : Unit tests for individual modules and algebraic laws
"""
