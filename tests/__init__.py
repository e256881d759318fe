"""
Test suite for the quadratic equation solver

Contains:
- tests/unit/          : Unit tests for individual modules
"""
