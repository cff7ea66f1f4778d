"""
AssetRecord — Запись о количестве актива

Immutable Pydantic модель: количество актива одного эмитента, принадлежащее
одному держателю.

Жизненный цикл:
- Создаётся только как output транзакции Issue
- Потребляется только как input транзакции Move или Redeem
- Никогда не изменяется: смена количества или держателя уничтожает старую
  запись и создаёт новые

Модель не выполняет бизнес-валидацию (quantity ≤ 0 конструируется):
допустимость записи решает только TokenContract, т.к. одна и та же форма
записи легальна в разных ролях.
"""

from typing import Iterable

from pydantic import BaseModel, Field

from src.core.domain.party import Party
from src.core.math.checked_arithmetic import INT64_MAX, INT64_MIN, checked_add


# =============================================================================
# ASSET RECORD MODEL
# =============================================================================


class AssetRecord(BaseModel):
    """
    Количество актива под одним эмитентом у одного держателя.

    quantity — signed 64-bit integer. Значения вне диапазона int64 не
    представимы и отклоняются при создании (ValidationError).
    """

    issuer: Party = Field(..., description="Эмитент, создавший стоимость")
    holder: Party = Field(..., description="Текущий владелец стоимости")
    quantity: int = Field(
        ...,
        strict=True,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Количество (signed int64, положительность проверяет контракт)",
    )

    model_config = {"frozen": True}

    @property
    def participants(self) -> list[Party]:
        """
        Участники, которых нужно уведомить о записи.

        Только держатель: эмитент не хранит записи, которые он выпустил.
        """
        return [self.holder]


# =============================================================================
# ГРУППИРОВКА ПО ЭМИТЕНТУ
# =============================================================================


def group_sum_by_issuer(
    records: Iterable[AssetRecord],
    min_value: int = INT64_MIN,
    max_value: int = INT64_MAX,
) -> dict[Party, int]:
    """
    Сумма количеств, сгруппированная по эмитенту.

    Используется одинаково для inputs и outputs транзакции Move, поэтому
    поведение при переполнении идентично на обеих сторонах.

    Args:
        records: записи для суммирования
        min_value: нижняя граница суммы (по умолчанию INT64_MIN)
        max_value: верхняя граница суммы (по умолчанию INT64_MAX)

    Returns:
        dict issuer → сумма quantity его записей

    Raises:
        ArithmeticOverflow: если сумма одного эмитента выходит за диапазон
    """
    sums: dict[Party, int] = {}
    for record in records:
        current = sums.get(record.issuer, 0)
        sums[record.issuer] = checked_add(current, record.quantity, min_value, max_value)
    return sums
