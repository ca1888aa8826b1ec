"""
Test suite for complexplane

Contains:
- tests/unit/          : Unit tests for individual modules
"""
