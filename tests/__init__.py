"""
Test suite for HR-tech utilities

Contains:
- tests/unit/          : Unit tests for individual modules
"""
