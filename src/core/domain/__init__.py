"""
Domain models and value objects.

Contains fundamental domain entities like Party, AssetRecord, Command and transactions.
"""

from src.core.domain.asset_record import AssetRecord, group_sum_by_issuer
from src.core.domain.intent import Command, TransitionIntent
from src.core.domain.party import Party, PublicKey
from src.core.domain.transaction import LedgerTransaction, ProposedTransition

__all__ = [
    # Party model
    "Party",
    "PublicKey",
    # Asset record model
    "AssetRecord",
    "group_sum_by_issuer",
    # Intent and command
    "TransitionIntent",
    "Command",
    # Transactions
    "ProposedTransition",
    "LedgerTransaction",
]
