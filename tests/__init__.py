"""
Test suite for the Jalali calendar core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
