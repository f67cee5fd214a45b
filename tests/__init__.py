"""
Test suite for viewfmt

Contains:
- tests/unit/          : Unit tests for individual modules
"""
