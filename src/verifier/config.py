"""Конфигурация TokenContract."""

from dataclasses import dataclass
from typing import Final

from src.core.math.checked_arithmetic import INT64_MAX, INT64_MIN

# Идентификатор контракта по умолчанию (адресат команд в LedgerTransaction)
TOKEN_CONTRACT_ID: Final[str] = "src.verifier.TokenContract"


@dataclass(frozen=True)
class TokenContractConfig:
    """Конфигурация TokenContract.

    Все участники должны использовать одинаковую конфигурацию: от неё зависит
    вердикт, а вердикт обязан совпадать у всех сторон.
    """

    # Адресат команд в гетерогенной транзакции
    contract_id: str = TOKEN_CONTRACT_ID

    # Диапазон сумм по эмитенту: только сужение signed int64
    sum_min: int = INT64_MIN
    sum_max: int = INT64_MAX

    def __post_init__(self):
        if not self.contract_id:
            raise ValueError("contract_id must be non-empty")
        if not INT64_MIN <= self.sum_min < self.sum_max <= INT64_MAX:
            raise ValueError(
                f"sum bounds must satisfy INT64_MIN <= sum_min < sum_max <= INT64_MAX, "
                f"got [{self.sum_min}, {self.sum_max}]"
            )
