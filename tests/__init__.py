"""
Test suite for the Roman numeral parser

Contains:
- tests/unit/          : Unit tests for individual modules
"""
