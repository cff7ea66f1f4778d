"""Правила Issue: создание новой стоимости эмитентом.

Порядок проверок:
1. inputs пусты (при выпуске ничего не потребляется)
2. outputs не пусты (выпуск создаёт хотя бы одну запись)
3. Все quantity > 0
4. Подписали все эмитенты из outputs (держатели подписывать не обязаны)
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

REASON_INPUTS_NOT_EMPTY: Final[str] = "No tokens should be consumed, in inputs, when issuing."
REASON_OUTPUTS_EMPTY: Final[str] = "There should be issued tokens, in outputs."
REASON_NON_POSITIVE: Final[str] = "All quantities must be above 0."
REASON_ISSUERS_MUST_SIGN: Final[str] = "The issuers should sign."


class IssueRules:
    """Набор правил для TransitionIntent.ISSUE (stateless)."""

    intent = TransitionIntent.ISSUE

    def evaluate(self, facts: TransitionFacts) -> VerificationResult:
        intent = self.intent.value

        # 1-2. Форма транзакции
        if facts.inputs:
            return rejected_result(
                RejectionKind.SHAPE_VIOLATION,
                REASON_INPUTS_NOT_EMPTY,
                intent,
                details=f"inputs={len(facts.inputs)}, expected 0",
            )

        if not facts.outputs:
            return rejected_result(
                RejectionKind.SHAPE_VIOLATION, REASON_OUTPUTS_EMPTY, intent
            )

        # 3. Выпускаемые записи
        if not facts.all_positive:
            return rejected_result(
                RejectionKind.NON_POSITIVE_QUANTITY, REASON_NON_POSITIVE, intent
            )

        # 4. Подписанты
        missing = facts.missing_signers(facts.output_issuer_keys)
        if missing:
            return rejected_result(
                RejectionKind.MISSING_SIGNATURE,
                REASON_ISSUERS_MUST_SIGN,
                intent,
                details=f"missing issuer keys: {missing}",
            )

        return accepted_result(intent, details=f"PASS: issued {len(facts.outputs)} record(s)")
