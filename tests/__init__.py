"""
Test suite for tokenomics_engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
