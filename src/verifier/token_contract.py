"""TokenContract — проверка допустимости перехода состояния токенов.

Чистая детерминированная функция: по inputs, outputs, объявленному намерению
и набору подписантов решает, допустим ли переход. Никакого I/O, никакого
разделяемого изменяемого состояния: один экземпляр можно использовать
параллельно из любого числа потоков.

Диспетчеризация по намерению:
- Issue  → IssueRules
- Move   → MoveRules
- Redeem → RedeemRules
- иначе  → UnsupportedIntent (ошибка протокола, а не бизнес-правила)

Интеграция с хост-платформой:
- verify() получает уже отфильтрованные записи AssetRecord
- verify_transaction() сам выбирает команду контракта и фильтрует записи
  гетерогенной транзакции (записи других типов игнорируются)
"""

import logging
from typing import Any, Iterable

from src.core.domain.asset_record import AssetRecord
from src.core.domain.intent import TransitionIntent
from src.core.domain.party import PublicKey
from src.core.domain.transaction import LedgerTransaction, ProposedTransition
from src.verifier.config import TokenContractConfig
from src.verifier.result import (
    RejectionKind,
    TransitionRejected,
    VerificationResult,
    rejected_result,
)
from src.verifier.rules import IssueRules, MoveRules, RedeemRules, TransitionFacts

logger = logging.getLogger(__name__)


class TokenContract:
    """Валидатор переходов для fungible токенов с группировкой по эмитенту.

    Порядок проверок:
    1. Намерение из закрытого набора Issue/Move/Redeem
    2. Общие факты (положительность, ключи держателей и эмитентов)
    3. Набор правил намерения, до первого невыполненного правила
    """

    def __init__(self, config: TokenContractConfig | None = None):
        """Инициализация контракта.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or TokenContractConfig()
        self._rules = {
            TransitionIntent.ISSUE: IssueRules(),
            TransitionIntent.MOVE: MoveRules(self.config),
            TransitionIntent.REDEEM: RedeemRules(),
        }

    @property
    def contract_id(self) -> str:
        return self.config.contract_id

    def verify(
        self,
        intent: TransitionIntent | str,
        inputs: Iterable[AssetRecord],
        outputs: Iterable[AssetRecord],
        signers: Iterable[PublicKey],
    ) -> VerificationResult:
        """Оценка перехода.

        Args:
            intent: объявленное намерение (TransitionIntent или его строковое
                значение; любое другое значение или тип → UnsupportedIntent)
            inputs: потребляемые записи этого типа актива
            outputs: создаваемые записи этого типа актива
            signers: ключи, подписавшие переход

        Returns:
            VerificationResult: accepted либо первое невыполненное правило
        """
        resolved = _resolve_intent(intent)
        if resolved is None:
            logger.warning("Unsupported intent for %s: %r", self.contract_id, intent)
            return rejected_result(
                RejectionKind.UNSUPPORTED_INTENT,
                f"Unknown command {intent}",
                intent=str(intent),
            )

        facts = TransitionFacts.collect(inputs, outputs, signers)
        result = self._rules[resolved].evaluate(facts)

        if result.accepted:
            logger.debug("%s accepted: %s", resolved.value, result.details)
        else:
            logger.debug(
                "%s rejected (%s): %s",
                resolved.value,
                result.rejection_kind.value,
                result.details,
            )
        return result

    def verify_proposed(self, transition: ProposedTransition) -> VerificationResult:
        """Оценка ProposedTransition (тот же вердикт, что и verify)."""
        return self.verify(
            transition.intent,
            transition.inputs,
            transition.outputs,
            transition.signers,
        )

    def verify_transaction(self, tx: LedgerTransaction) -> VerificationResult:
        """Оценка гетерогенной транзакции.

        Требует ровно одну команду с contract_id этого контракта; записи
        других типов не участвуют в проверке.

        Args:
            tx: транзакция хост-платформы

        Returns:
            VerificationResult
        """
        commands = tx.commands_for(self.contract_id)
        if len(commands) != 1:
            if not commands:
                reason = f"Required {self.contract_id} command"
            else:
                reason = f"Expected exactly one {self.contract_id} command, found {len(commands)}"
            logger.warning("Transaction rejected: %s", reason)
            return rejected_result(RejectionKind.MISSING_COMMAND, reason, intent="")

        command = commands[0]
        return self.verify(
            command.value,
            tx.inputs_of_type(AssetRecord),
            tx.outputs_of_type(AssetRecord),
            command.signers,
        )

    def require_valid(
        self,
        intent: TransitionIntent | str,
        inputs: Iterable[AssetRecord],
        outputs: Iterable[AssetRecord],
        signers: Iterable[PublicKey],
    ) -> VerificationResult:
        """То же, что verify, но отказ выбрасывается как исключение.

        Raises:
            TransitionRejected: если переход недопустим
        """
        result = self.verify(intent, inputs, outputs, signers)
        if not result.accepted:
            raise TransitionRejected(result)
        return result


def _resolve_intent(value: Any) -> TransitionIntent | None:
    """Намерение из закрытого набора либо None для неизвестного значения."""
    if isinstance(value, TransitionIntent):
        return value
    if isinstance(value, str):
        try:
            return TransitionIntent(value)
        except ValueError:
            return None
    return None


# Экземпляр с конфигурацией по умолчанию
_DEFAULT_CONTRACT = TokenContract()


def verify(
    intent: TransitionIntent | str,
    inputs: Iterable[AssetRecord],
    outputs: Iterable[AssetRecord],
    signers: Iterable[PublicKey],
) -> VerificationResult:
    """Оценка перехода контрактом с конфигурацией по умолчанию."""
    return _DEFAULT_CONTRACT.verify(intent, inputs, outputs, signers)


def verify_transaction(tx: LedgerTransaction) -> VerificationResult:
    """Оценка гетерогенной транзакции контрактом с конфигурацией по умолчанию."""
    return _DEFAULT_CONTRACT.verify_transaction(tx)
