"""
Test suite for fincalc

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/integration/   : Calculator + History composition tests
"""
