"""Результат проверки перехода и таксономия причин отказа.

Причина отказа — это вид (RejectionKind) + стабильная строка (block_reason).
Обе части одинаковы у всех участников, независимо перепроверяющих один и тот
же переход, поэтому строки причин являются частью контракта.
"""

from dataclasses import dataclass
from enum import Enum


class RejectionKind(str, Enum):
    """Вид причины отказа."""

    SHAPE_VIOLATION = "ShapeViolation"  # неверное количество inputs/outputs
    NON_POSITIVE_QUANTITY = "NonPositiveQuantity"  # quantity ≤ 0
    ISSUER_SET_MISMATCH = "IssuerSetMismatch"  # Move: множества эмитентов различаются
    CONSERVATION_VIOLATION = "ConservationViolation"  # Move: сумма эмитента изменилась
    ARITHMETIC_OVERFLOW = "ArithmeticOverflow"  # сумма эмитента не помещается в int64
    MISSING_SIGNATURE = "MissingSignature"  # нет подписи эмитента или держателя
    UNSUPPORTED_INTENT = "UnsupportedIntent"  # неизвестное намерение (ошибка протокола)
    MISSING_COMMAND = "MissingCommand"  # нет ровно одной команды контракта


# Виды, означающие ошибку вызывающей стороны/протокола, а не бизнес-правила
PROTOCOL_ERROR_KINDS: frozenset[RejectionKind] = frozenset(
    {RejectionKind.UNSUPPORTED_INTENT, RejectionKind.MISSING_COMMAND}
)


@dataclass(frozen=True)
class VerificationResult:
    """Вердикт TokenContract по одному переходу."""

    accepted: bool
    rejection_kind: RejectionKind | None
    block_reason: str

    # Намерение в том виде, в котором оно было объявлено
    intent: str

    # Детали для диагностики (не участвуют в консенсусе)
    details: str

    @property
    def is_protocol_error(self) -> bool:
        """True если отказ вызван ошибкой протокола, а не нарушением бизнес-правила."""
        return self.rejection_kind in PROTOCOL_ERROR_KINDS


def accepted_result(intent: str, details: str = "") -> VerificationResult:
    """Вердикт PASS."""
    return VerificationResult(
        accepted=True,
        rejection_kind=None,
        block_reason="",
        intent=intent,
        details=details or f"PASS: intent={intent}",
    )


def rejected_result(
    kind: RejectionKind,
    reason: str,
    intent: str,
    details: str = "",
) -> VerificationResult:
    """Вердикт REJECT по первому невыполненному правилу."""
    return VerificationResult(
        accepted=False,
        rejection_kind=kind,
        block_reason=reason,
        intent=intent,
        details=details or reason,
    )


class TransitionRejected(Exception):
    """
    Переход отклонён контрактом.

    Используется вызывающими сторонами, которые предпочитают исключения
    (TokenContract.require_valid). Несёт исходный VerificationResult.
    """

    def __init__(self, result: VerificationResult):
        self.result = result
        super().__init__(f"{result.rejection_kind.value}: {result.block_reason}")
