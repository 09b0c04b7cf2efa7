"""
Test suite for intmatrix

Contains:
- tests/unit/          : Unit tests for individual modules
"""
