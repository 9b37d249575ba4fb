"""
Test suite for Pilosa

Contains:
- tests/unit/          : Unit tests for individual modules
"""
