"""
Test suite for the BigInt engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
