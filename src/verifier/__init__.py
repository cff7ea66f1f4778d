"""Verifier — проверка допустимости переходов состояния токенов.

- TokenContract: диспетчеризация Issue/Move/Redeem по наборам правил
- VerificationResult / RejectionKind: вердикт и таксономия отказов
- TokenContractConfig: идентификатор контракта и диапазон сумм
"""

from .config import TOKEN_CONTRACT_ID, TokenContractConfig
from .result import (
    PROTOCOL_ERROR_KINDS,
    RejectionKind,
    TransitionRejected,
    VerificationResult,
)
from .token_contract import TokenContract, verify, verify_transaction

__all__ = [
    "TOKEN_CONTRACT_ID",
    "TokenContractConfig",
    "PROTOCOL_ERROR_KINDS",
    "RejectionKind",
    "TransitionRejected",
    "VerificationResult",
    "TokenContract",
    "verify",
    "verify_transaction",
]
