"""
Test suite for certainty

Contains:
- tests/unit/          : Unit tests for individual modules (pytest, hypothesis)
"""
