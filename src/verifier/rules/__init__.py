"""Rules — наборы правил TokenContract, по одному на намерение.

- Issue: форма, положительность, подписи эмитентов
- Move: форма, положительность, сохранение сумм по эмитентам, подписи держателей
- Redeem: форма, положительность, подписи эмитентов и держателей

Каждый набор возвращает первое невыполненное правило в фиксированном порядке.
"""

from .facts import TransitionFacts
from .issue_rules import IssueRules
from .move_rules import MoveRules
from .redeem_rules import RedeemRules

__all__ = [
    "TransitionFacts",
    "IssueRules",
    "MoveRules",
    "RedeemRules",
]
