"""Общие факты перехода, вычисляемые один раз на вызов (независимо от намерения)."""

from dataclasses import dataclass
from typing import Iterable

from src.core.domain.asset_record import AssetRecord
from src.core.domain.party import PublicKey


@dataclass(frozen=True)
class TransitionFacts:
    """Факты о переходе, общие для всех наборов правил."""

    inputs: tuple[AssetRecord, ...]
    outputs: tuple[AssetRecord, ...]
    signers: frozenset[PublicKey]

    # Все quantity во inputs и outputs > 0
    all_positive: bool

    # Дедуплицированные owning keys
    input_holder_keys: frozenset[PublicKey]
    input_issuer_keys: frozenset[PublicKey]
    output_issuer_keys: frozenset[PublicKey]

    @classmethod
    def collect(
        cls,
        inputs: Iterable[AssetRecord],
        outputs: Iterable[AssetRecord],
        signers: Iterable[PublicKey],
    ) -> "TransitionFacts":
        """Вычисление фактов по записям и подписантам."""
        inputs = tuple(inputs)
        outputs = tuple(outputs)
        return cls(
            inputs=inputs,
            outputs=outputs,
            signers=frozenset(signers),
            all_positive=all(record.quantity > 0 for record in inputs + outputs),
            input_holder_keys=frozenset(record.holder.owning_key for record in inputs),
            input_issuer_keys=frozenset(record.issuer.owning_key for record in inputs),
            output_issuer_keys=frozenset(record.issuer.owning_key for record in outputs),
        )

    def missing_signers(self, required: frozenset[PublicKey]) -> list[PublicKey]:
        """Требуемые ключи, отсутствующие среди подписантов (отсортированы)."""
        return sorted(required - self.signers)
