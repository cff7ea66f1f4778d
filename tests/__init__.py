"""
Test suite for the token ledger verifier

Contains:
- tests/unit/          : Unit tests for individual modules
"""
