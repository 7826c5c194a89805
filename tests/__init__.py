"""
Test suite for the extended complex library

Contains:
- tests/unit/          : Unit tests for individual modules
"""
