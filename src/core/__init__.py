"""
Core domain models and integer arithmetic primitives.

This module contains the foundational building blocks of the token ledger that
are independent of the host platform (consensus, storage, transport).
"""
