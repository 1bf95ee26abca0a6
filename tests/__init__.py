"""
Test suite for decimal-simpson

Contains:
- tests/unit/          : Unit tests for individual modules
"""
