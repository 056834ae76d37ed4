"""
Test suite for alere-intervals

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/unit/test_interval_properties.py : hypothesis property tests
"""
