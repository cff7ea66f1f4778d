"""
Core math modules для token ledger

Целочисленные примитивы с гарантией отсутствия переполнения.
"""

# Checked Arithmetic
from src.core.math.checked_arithmetic import (
    INT64_MAX,
    INT64_MIN,
    ArithmeticOverflow,
    checked_add,
)

__all__ = [
    # Checked Arithmetic — Constants
    "INT64_MAX",
    "INT64_MIN",
    # Checked Arithmetic — Exceptions
    "ArithmeticOverflow",
    # Checked Arithmetic — Functions
    "checked_add",
]
