"""Правила Move: переназначение держателей с сохранением сумм по эмитентам.

Сохранение проверяется отдельно для каждого эмитента: стоимость эмитента A
не может быть перемаркирована в стоимость эмитента B, даже если общие суммы
совпадают.

Порядок проверок:
1. inputs не пусты
2. outputs не пусты
3. Все quantity > 0
4. Суммы по эмитентам для inputs и outputs (переполнение → отказ)
5. Множество эмитентов сохраняется
6. Сумма каждого эмитента сохраняется
7. Подписали все текущие держатели (эмитенты подписывать не обязаны)
"""

import logging
from typing import Final

from src.core.domain.asset_record import group_sum_by_issuer
from src.core.domain.intent import TransitionIntent
from src.core.math.checked_arithmetic import ArithmeticOverflow
from src.verifier.config import TokenContractConfig
from src.verifier.result import (
    RejectionKind,
    VerificationResult,
    accepted_result,
    rejected_result,
)
from src.verifier.rules.facts import TransitionFacts

logger = logging.getLogger(__name__)

REASON_INPUTS_EMPTY: Final[str] = "There should be tokens to move, in inputs."
REASON_OUTPUTS_EMPTY: Final[str] = "There should be moved tokens, in outputs."
REASON_NON_POSITIVE: Final[str] = "All quantities must be above 0."
REASON_SUM_OVERFLOW: Final[str] = "The sum of quantities for an issuer overflows."
REASON_ISSUERS_NOT_CONSERVED: Final[str] = "The list of issuers should be conserved."
REASON_SUM_NOT_CONSERVED: Final[str] = "The sum of quantities for each issuer should be conserved."
REASON_HOLDERS_MUST_SIGN: Final[str] = "The current holders should sign."


class MoveRules:
    """Набор правил для TransitionIntent.MOVE."""

    intent = TransitionIntent.MOVE

    def __init__(self, config: TokenContractConfig | None = None):
        """
        Args:
            config: конфигурация контракта (диапазон сумм по эмитенту)
        """
        self.config = config or TokenContractConfig()

    def evaluate(self, facts: TransitionFacts) -> VerificationResult:
        intent = self.intent.value

        # 1-2. Форма транзакции
        if not facts.inputs:
            return rejected_result(
                RejectionKind.SHAPE_VIOLATION, REASON_INPUTS_EMPTY, intent
            )

        if not facts.outputs:
            return rejected_result(
                RejectionKind.SHAPE_VIOLATION, REASON_OUTPUTS_EMPTY, intent
            )

        # 3. Перемещаемые записи
        if not facts.all_positive:
            return rejected_result(
                RejectionKind.NON_POSITIVE_QUANTITY, REASON_NON_POSITIVE, intent
            )

        # 4. Суммы по эмитентам (одна и та же функция для обеих сторон)
        try:
            input_sums = group_sum_by_issuer(
                facts.inputs, self.config.sum_min, self.config.sum_max
            )
            output_sums = group_sum_by_issuer(
                facts.outputs, self.config.sum_min, self.config.sum_max
            )
        except ArithmeticOverflow as e:
            logger.debug("Move sum overflow: %s", e)
            return rejected_result(
                RejectionKind.ARITHMETIC_OVERFLOW,
                REASON_SUM_OVERFLOW,
                intent,
                details=str(e),
            )

        # 5. Множество эмитентов
        if input_sums.keys() != output_sums.keys():
            only_in = sorted(p.sort_key() for p in input_sums.keys() - output_sums.keys())
            only_out = sorted(p.sort_key() for p in output_sums.keys() - input_sums.keys())
            return rejected_result(
                RejectionKind.ISSUER_SET_MISMATCH,
                REASON_ISSUERS_NOT_CONSERVED,
                intent,
                details=f"only in inputs: {only_in}, only in outputs: {only_out}",
            )

        # 6. Сумма каждого эмитента (детерминированный порядок для details)
        for issuer in sorted(input_sums, key=lambda p: p.sort_key()):
            if input_sums[issuer] != output_sums[issuer]:
                return rejected_result(
                    RejectionKind.CONSERVATION_VIOLATION,
                    REASON_SUM_NOT_CONSERVED,
                    intent,
                    details=(
                        f"issuer {issuer.name}: inputs={input_sums[issuer]}, "
                        f"outputs={output_sums[issuer]}"
                    ),
                )

        # 7. Подписанты
        missing = facts.missing_signers(facts.input_holder_keys)
        if missing:
            return rejected_result(
                RejectionKind.MISSING_SIGNATURE,
                REASON_HOLDERS_MUST_SIGN,
                intent,
                details=f"missing holder keys: {missing}",
            )

        return accepted_result(
            intent,
            details=f"PASS: moved {len(facts.inputs)} → {len(facts.outputs)} record(s), "
            f"issuers={len(input_sums)}",
        )
