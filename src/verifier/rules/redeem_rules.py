"""Правила Redeem: уничтожение стоимости.

Порядок проверок:
1. inputs не пусты
2. outputs пусты (погашение не может одновременно выпускать)
3. Все quantity > 0
4. Подписали все эмитенты из inputs
5. Подписали все текущие держатели
"""

from typing import Final

from src.core.domain.intent import TransitionIntent
from src.verifier.result import (
    RejectionKind,
    VerificationResult,
    accepted_result,
    rejected_result,
)
from src.verifier.rules.facts import TransitionFacts

REASON_INPUTS_EMPTY: Final[str] = "There should be tokens to redeem, in inputs."
REASON_OUTPUTS_NOT_EMPTY: Final[str] = "No tokens should be issued, in outputs, when redeeming."
REASON_NON_POSITIVE: Final[str] = "All quantities must be above 0."
REASON_ISSUERS_MUST_SIGN: Final[str] = "The issuers should sign."
REASON_HOLDERS_MUST_SIGN: Final[str] = "The current holders should sign."


class RedeemRules:
    """Набор правил для TransitionIntent.REDEEM (stateless)."""

    intent = TransitionIntent.REDEEM

    def evaluate(self, facts: TransitionFacts) -> VerificationResult:
        intent = self.intent.value

        # 1-2. Форма транзакции
        if not facts.inputs:
            return rejected_result(
                RejectionKind.SHAPE_VIOLATION, REASON_INPUTS_EMPTY, intent
            )

        if facts.outputs:
            return rejected_result(
                RejectionKind.SHAPE_VIOLATION,
                REASON_OUTPUTS_NOT_EMPTY,
                intent,
                details=f"outputs={len(facts.outputs)}, expected 0",
            )

        # 3. Погашаемые записи
        if not facts.all_positive:
            return rejected_result(
                RejectionKind.NON_POSITIVE_QUANTITY, REASON_NON_POSITIVE, intent
            )

        # 4-5. Подписанты: сначала эмитенты, затем держатели
        missing_issuers = facts.missing_signers(facts.input_issuer_keys)
        if missing_issuers:
            return rejected_result(
                RejectionKind.MISSING_SIGNATURE,
                REASON_ISSUERS_MUST_SIGN,
                intent,
                details=f"missing issuer keys: {missing_issuers}",
            )

        missing_holders = facts.missing_signers(facts.input_holder_keys)
        if missing_holders:
            return rejected_result(
                RejectionKind.MISSING_SIGNATURE,
                REASON_HOLDERS_MUST_SIGN,
                intent,
                details=f"missing holder keys: {missing_holders}",
            )

        return accepted_result(intent, details=f"PASS: redeemed {len(facts.inputs)} record(s)")
