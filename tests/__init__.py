"""
Test suite for the fixed-width integer codec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
