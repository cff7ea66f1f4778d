"""
TransitionIntent — Объявленное намерение транзакции

Закрытый набор: Issue (создание стоимости), Move (переназначение держателей
с сохранением сумм по эмитентам), Redeem (уничтожение стоимости).

Command связывает намерение с контрактом и набором подписантов. Значение
команды может быть неизвестной строкой (другая версия протокола): такая
команда представима, чтобы контракт мог её явно отклонить.
"""

from enum import Enum

from pydantic import BaseModel, Field

from src.core.domain.party import PublicKey


# =============================================================================
# ENUMS
# =============================================================================


class TransitionIntent(str, Enum):
    """Намерение транзакции"""

    ISSUE = "Issue"
    MOVE = "Move"
    REDEEM = "Redeem"


# =============================================================================
# COMMAND MODEL
# =============================================================================


class Command(BaseModel):
    """
    Команда транзакции: намерение + ключи, подписавшие его.

    contract_id определяет, какому контракту адресована команда.
    Команды других контрактов TokenContract игнорирует.
    """

    contract_id: str = Field(..., min_length=1, description="Идентификатор контракта-адресата")
    value: TransitionIntent | str = Field(..., description="Намерение (Issue/Move/Redeem или неизвестное)")
    signers: frozenset[PublicKey] = Field(
        default_factory=frozenset, description="Ключи, подписавшие команду"
    )

    model_config = {"frozen": True}
