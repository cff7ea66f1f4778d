"""
Checked Arithmetic — целочисленная арифметика с контролем переполнения

Количества токенов хранятся как signed 64-bit integer. Python int не имеет
ограничения разрядности, поэтому границы int64 проверяются явно:
- Сложение с проверкой выхода за диапазон (checked_add)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не выходит за [INT64_MIN, INT64_MAX] (иначе ArithmeticOverflow)
2. Wraparound и усечение не выполняются никогда
3. Все операции детерминированы и воспроизводимы
"""

from typing import Final

# =============================================================================
# ГРАНИЦЫ INT64
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArithmeticOverflow(ArithmeticError):
    """
    Результат операции не представим в заданном диапазоне.

    Attributes:
        left: левый операнд
        right: правый операнд
        min_value: нижняя граница диапазона
        max_value: верхняя граница диапазона
    """

    def __init__(self, left: int, right: int, min_value: int, max_value: int):
        self.left = left
        self.right = right
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"{left} + {right} overflows range [{min_value}, {max_value}]"
        )


# =============================================================================
# CHECKED OPERATIONS
# =============================================================================


def checked_add(
    left: int,
    right: int,
    min_value: int = INT64_MIN,
    max_value: int = INT64_MAX,
) -> int:
    """
    Сложение с контролем переполнения.

    Args:
        left: левый операнд
        right: правый операнд
        min_value: нижняя граница (по умолчанию INT64_MIN)
        max_value: верхняя граница (по умолчанию INT64_MAX)

    Returns:
        left + right

    Raises:
        ArithmeticOverflow: если сумма выходит за [min_value, max_value]

    Examples:
        >>> checked_add(2, 3)
        5
    """
    result = left + right
    if result < min_value or result > max_value:
        raise ArithmeticOverflow(left, right, min_value, max_value)
    return result
