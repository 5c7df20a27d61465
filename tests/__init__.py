"""
Test suite for the exact decimal core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
