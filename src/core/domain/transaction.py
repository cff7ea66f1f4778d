"""
Transaction — Модели предлагаемого перехода состояния

ProposedTransition — то, что оценивает TokenContract: уже отфильтрованные
inputs/outputs типа AssetRecord, одно намерение и набор подписантов.

LedgerTransaction — гетерогенная транзакция хост-платформы: записи разных
типов и команды разных контрактов (например, атомарный обмен токена на
другой актив). TokenContract извлекает из неё только свои записи и команду.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, Field

from src.core.domain.asset_record import AssetRecord
from src.core.domain.intent import Command, TransitionIntent
from src.core.domain.party import PublicKey

T = TypeVar("T")


# =============================================================================
# PROPOSED TRANSITION
# =============================================================================


class ProposedTransition(BaseModel):
    """
    Предлагаемый переход состояния для одного типа актива.

    Порядок inputs/outputs не имеет значения для вердикта.
    """

    intent: TransitionIntent | str = Field(..., description="Объявленное намерение")
    inputs: tuple[AssetRecord, ...] = Field(default=(), description="Потребляемые записи")
    outputs: tuple[AssetRecord, ...] = Field(default=(), description="Создаваемые записи")
    signers: frozenset[PublicKey] = Field(
        default_factory=frozenset, description="Ключи, подписавшие переход"
    )

    model_config = {"frozen": True}


# =============================================================================
# LEDGER TRANSACTION
# =============================================================================


class LedgerTransaction(BaseModel):
    """
    Гетерогенная транзакция: записи любых типов и команды любых контрактов.
    """

    inputs: tuple[Any, ...] = Field(default=(), description="Потребляемые записи (любые типы)")
    outputs: tuple[Any, ...] = Field(default=(), description="Создаваемые записи (любые типы)")
    commands: tuple[Command, ...] = Field(default=(), description="Команды всех контрактов")

    model_config = {"frozen": True}

    def inputs_of_type(self, state_type: type[T]) -> list[T]:
        """Inputs заданного типа (в исходном порядке)."""
        return [state for state in self.inputs if isinstance(state, state_type)]

    def outputs_of_type(self, state_type: type[T]) -> list[T]:
        """Outputs заданного типа (в исходном порядке)."""
        return [state for state in self.outputs if isinstance(state, state_type)]

    def commands_for(self, contract_id: str) -> list[Command]:
        """Команды, адресованные контракту contract_id."""
        return [command for command in self.commands if command.contract_id == contract_id]
