"""Тесты для TokenContract: диспетчеризация, сценарии, интеграция с транзакцией

Покрытие:
- Сценарии Issue/Move/Redeem end-to-end
- Неизвестное намерение (ошибка протокола)
- ProposedTransition и LedgerTransaction (выбор команды, фильтрация типов)
- require_valid / TransitionRejected
- Конфигурация
- Детерминизм и логирование
"""

import logging

import pytest
from pydantic import BaseModel

from src.core.domain import (
    AssetRecord,
    Command,
    LedgerTransaction,
    Party,
    ProposedTransition,
    TransitionIntent,
)
from src.core.math import INT64_MAX, INT64_MIN
from src.verifier import (
    TOKEN_CONTRACT_ID,
    RejectionKind,
    TokenContract,
    TokenContractConfig,
    TransitionRejected,
    VerificationResult,
    verify,
    verify_transaction,
)

ALICE = Party(name="O=Alice, L=London, C=GB", owning_key="alice-key")
BOB = Party(name="O=Bob, L=New York, C=US", owning_key="bob-key")
CARLY = Party(name="O=Carly, L=New York, C=US", owning_key="carly-key")


class CarState(BaseModel):
    """Запись другого типа актива (атомарный обмен токенов на автомобиль)"""

    owner: Party
    vin: str

    model_config = {"frozen": True}


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def contract():
    """TokenContract с конфигурацией по умолчанию."""
    return TokenContract()


def rec(issuer: Party, holder: Party, quantity: int) -> AssetRecord:
    """Helper: создает AssetRecord."""
    return AssetRecord(issuer=issuer, holder=holder, quantity=quantity)


# =============================================================================
# SCENARIOS
# =============================================================================


class TestScenarios:
    """Сквозные сценарии"""

    def test_issue_accepted(self, contract):
        result = contract.verify(TransitionIntent.ISSUE, [], [rec(ALICE, BOB, 10)], {"alice-key"})
        assert result.accepted is True

    def test_move_accepted(self, contract):
        result = contract.verify(TransitionIntent.MOVE, [rec(ALICE, BOB, 10)], [rec(ALICE, CARLY, 10)], {"bob-key"})
        assert result.accepted is True

    def test_move_issuer_relabel_rejected(self, contract):
        result = contract.verify(TransitionIntent.MOVE, [rec(ALICE, BOB, 10)], [rec(CARLY, BOB, 10)], {"bob-key"})
        assert result.rejection_kind == RejectionKind.ISSUER_SET_MISMATCH

    def test_move_overflow_rejected(self, contract):
        result = contract.verify(
            TransitionIntent.MOVE,
            [rec(ALICE, BOB, INT64_MAX), rec(ALICE, CARLY, 1)],
            [rec(ALICE, BOB, 1), rec(ALICE, CARLY, INT64_MAX)],
            {"bob-key", "carly-key"},
        )
        assert result.rejection_kind == RejectionKind.ARITHMETIC_OVERFLOW

    def test_redeem_accepted_and_rejected(self, contract):
        inputs = [rec(ALICE, BOB, 10)]
        assert contract.verify(TransitionIntent.REDEEM, inputs, [], {"alice-key", "bob-key"}).accepted is True

        result = contract.verify(TransitionIntent.REDEEM, inputs, [], {"alice-key"})
        assert result.rejection_kind == RejectionKind.MISSING_SIGNATURE

    def test_move_zero_quantity_rejected_before_conservation(self, contract):
        result = contract.verify(
            TransitionIntent.MOVE,
            [rec(ALICE, BOB, 10), rec(ALICE, BOB, 0)],
            [rec(ALICE, BOB, 10)],
            {"bob-key"},
        )
        assert result.rejection_kind == RejectionKind.NON_POSITIVE_QUANTITY

    def test_issue_move_redeem_lifecycle(self, contract):
        """Выпуск → перемещение с разделением → погашение"""
        issued = [rec(ALICE, BOB, 100)]
        assert contract.verify(TransitionIntent.ISSUE, [], issued, {"alice-key"}).accepted

        moved = [rec(ALICE, BOB, 60), rec(ALICE, CARLY, 40)]
        assert contract.verify(TransitionIntent.MOVE, issued, moved, {"bob-key"}).accepted

        assert contract.verify(TransitionIntent.REDEEM, moved[1:], [], {"alice-key", "carly-key"}).accepted


# =============================================================================
# INTENT DISPATCH
# =============================================================================


class TestIntentDispatch:
    """Диспетчеризация по намерению"""

    @pytest.mark.parametrize("intent", ["Issue", TransitionIntent.ISSUE])
    def test_intent_accepted_as_enum_or_value(self, contract, intent):
        result = contract.verify(intent, [], [rec(ALICE, BOB, 10)], {"alice-key"})
        assert result.accepted is True
        assert result.intent == "Issue"

    @pytest.mark.parametrize("intent", ["Burn", "issue", "", None, 42])
    def test_unknown_intent_rejected(self, contract, intent):
        result = contract.verify(intent, [], [rec(ALICE, BOB, 10)], {"alice-key"})

        assert result.accepted is False
        assert result.rejection_kind == RejectionKind.UNSUPPORTED_INTENT
        assert result.block_reason == f"Unknown command {intent}"
        assert result.is_protocol_error is True

    def test_unknown_intent_checked_before_records(self, contract):
        """Неизвестное намерение отклоняется до любых правил"""
        result = contract.verify("Burn", [rec(ALICE, BOB, 0)], [], set())
        assert result.rejection_kind == RejectionKind.UNSUPPORTED_INTENT

    def test_business_rejection_is_not_protocol_error(self, contract):
        result = contract.verify(TransitionIntent.ISSUE, [], [], set())
        assert result.is_protocol_error is False

    def test_accepted_result_is_not_protocol_error(self, contract):
        result = contract.verify(TransitionIntent.ISSUE, [], [rec(ALICE, BOB, 1)], {"alice-key"})
        assert result.is_protocol_error is False

    def test_inputs_accept_generators(self, contract):
        """inputs/outputs/signers — любые iterable"""
        result = contract.verify(
            TransitionIntent.MOVE,
            (r for r in [rec(ALICE, BOB, 10)]),
            (r for r in [rec(ALICE, CARLY, 10)]),
            iter(["bob-key"]),
        )
        assert result.accepted is True


# =============================================================================
# PROPOSED TRANSITION
# =============================================================================


class TestVerifyProposed:
    """verify_proposed даёт тот же вердикт, что и verify"""

    def test_accepted(self, contract):
        transition = ProposedTransition(
            intent=TransitionIntent.MOVE,
            inputs=(rec(ALICE, BOB, 10),),
            outputs=(rec(ALICE, CARLY, 10),),
            signers={"bob-key"},
        )
        assert contract.verify_proposed(transition).accepted is True

    def test_unknown_intent(self, contract):
        transition = ProposedTransition(intent="Burn", inputs=(rec(ALICE, BOB, 10),))
        result = contract.verify_proposed(transition)
        assert result.rejection_kind == RejectionKind.UNSUPPORTED_INTENT

    def test_same_verdict_as_verify(self, contract):
        transition = ProposedTransition(
            intent=TransitionIntent.REDEEM,
            inputs=(rec(ALICE, BOB, 10),),
            signers={"alice-key"},
        )
        direct = contract.verify(TransitionIntent.REDEEM, [rec(ALICE, BOB, 10)], [], {"alice-key"})
        assert contract.verify_proposed(transition) == direct


# =============================================================================
# LEDGER TRANSACTION
# =============================================================================


class TestVerifyTransaction:
    """Выбор команды контракта и фильтрация записей гетерогенной транзакции"""

    def test_missing_command(self, contract):
        """Команда другого контракта не считается"""
        tx = LedgerTransaction(
            inputs=(rec(ALICE, BOB, 10),),
            outputs=(rec(ALICE, BOB, 10),),
            commands=(Command(contract_id="dummy", value="Create", signers={"alice-key"}),),
        )

        result = contract.verify_transaction(tx)

        assert result.rejection_kind == RejectionKind.MISSING_COMMAND
        assert result.block_reason == f"Required {TOKEN_CONTRACT_ID} command"
        assert result.is_protocol_error is True

    def test_command_added_makes_transaction_valid(self, contract):
        tx = LedgerTransaction(
            inputs=(rec(ALICE, BOB, 10),),
            outputs=(rec(ALICE, BOB, 10),),
            commands=(
                Command(contract_id="dummy", value="Create", signers={"alice-key"}),
                Command(contract_id=TOKEN_CONTRACT_ID, value=TransitionIntent.MOVE, signers={"bob-key"}),
            ),
        )

        assert contract.verify_transaction(tx).accepted is True

    def test_multiple_commands_rejected(self, contract):
        tx = LedgerTransaction(
            inputs=(rec(ALICE, BOB, 10),),
            outputs=(rec(ALICE, BOB, 10),),
            commands=(
                Command(contract_id=TOKEN_CONTRACT_ID, value=TransitionIntent.MOVE, signers={"bob-key"}),
                Command(contract_id=TOKEN_CONTRACT_ID, value=TransitionIntent.MOVE, signers={"bob-key"}),
            ),
        )

        result = contract.verify_transaction(tx)

        assert result.rejection_kind == RejectionKind.MISSING_COMMAND
        assert "found 2" in result.block_reason

    def test_foreign_records_ignored(self, contract):
        """Атомарный обмен: токены B → C, автомобиль C → B"""
        tx = LedgerTransaction(
            inputs=(rec(ALICE, BOB, 25_000), CarState(owner=CARLY, vin="WBA123")),
            outputs=(CarState(owner=BOB, vin="WBA123"), rec(ALICE, CARLY, 25_000)),
            commands=(
                Command(contract_id=TOKEN_CONTRACT_ID, value=TransitionIntent.MOVE, signers={"bob-key", "carly-key"}),
                Command(contract_id="cars", value="Transfer", signers={"carly-key"}),
            ),
        )

        assert contract.verify_transaction(tx).accepted is True

    def test_command_signers_used(self, contract):
        """Используются подписанты команды этого контракта"""
        tx = LedgerTransaction(
            inputs=(rec(ALICE, BOB, 10),),
            outputs=(rec(ALICE, CARLY, 10),),
            commands=(
                Command(contract_id=TOKEN_CONTRACT_ID, value=TransitionIntent.MOVE, signers={"alice-key"}),
                Command(contract_id="cars", value="Transfer", signers={"bob-key"}),
            ),
        )

        result = contract.verify_transaction(tx)

        assert result.rejection_kind == RejectionKind.MISSING_SIGNATURE

    def test_unknown_command_value(self, contract):
        tx = LedgerTransaction(
            outputs=(rec(ALICE, BOB, 10),),
            commands=(Command(contract_id=TOKEN_CONTRACT_ID, value="Burn", signers={"alice-key"}),),
        )

        result = contract.verify_transaction(tx)

        assert result.rejection_kind == RejectionKind.UNSUPPORTED_INTENT
        assert result.block_reason == "Unknown command Burn"

    def test_custom_contract_id(self):
        contract = TokenContract(TokenContractConfig(contract_id="usd-tokens"))
        tx = LedgerTransaction(
            outputs=(rec(ALICE, BOB, 10),),
            commands=(Command(contract_id="usd-tokens", value=TransitionIntent.ISSUE, signers={"alice-key"}),),
        )

        assert contract.contract_id == "usd-tokens"
        assert contract.verify_transaction(tx).accepted is True


# =============================================================================
# REQUIRE VALID
# =============================================================================


class TestRequireValid:
    """require_valid выбрасывает TransitionRejected при отказе"""

    def test_returns_result_when_valid(self, contract):
        result = contract.require_valid(TransitionIntent.ISSUE, [], [rec(ALICE, BOB, 10)], {"alice-key"})
        assert isinstance(result, VerificationResult)
        assert result.accepted is True

    def test_raises_when_rejected(self, contract):
        with pytest.raises(TransitionRejected) as exc_info:
            contract.require_valid(TransitionIntent.ISSUE, [], [rec(ALICE, BOB, 10)], {"bob-key"})

        assert exc_info.value.result.rejection_kind == RejectionKind.MISSING_SIGNATURE
        assert str(exc_info.value) == "MissingSignature: The issuers should sign."


# =============================================================================
# CONFIG
# =============================================================================


class TestConfig:
    """TokenContractConfig"""

    def test_defaults(self):
        config = TokenContractConfig()
        assert config.contract_id == TOKEN_CONTRACT_ID
        assert config.sum_max == INT64_MAX

    def test_invalid_bounds_rejected(self):
        with pytest.raises(ValueError):
            TokenContractConfig(sum_min=10, sum_max=10)

    @pytest.mark.parametrize(
        "bounds",
        [
            {"sum_max": INT64_MAX + 1},
            {"sum_max": 2**70},
            {"sum_min": INT64_MIN - 1},
        ],
    )
    def test_bounds_wider_than_int64_rejected(self, bounds):
        """Диапазон сумм можно только сузить относительно int64"""
        with pytest.raises(ValueError):
            TokenContractConfig(**bounds)

    def test_narrowed_bounds_accepted(self):
        config = TokenContractConfig(sum_min=0, sum_max=1_000_000)
        assert config.sum_max == 1_000_000

    def test_overflow_rule_cannot_be_disabled_by_config(self):
        """С любым допустимым конфигом (MAX)+(1) одного эмитента → ArithmeticOverflow"""
        contract = TokenContract(TokenContractConfig(sum_max=INT64_MAX))
        result = contract.verify(
            TransitionIntent.MOVE,
            [rec(ALICE, BOB, INT64_MAX), rec(ALICE, CARLY, 1)],
            [rec(ALICE, BOB, 1), rec(ALICE, CARLY, INT64_MAX)],
            {"bob-key", "carly-key"},
        )
        assert result.rejection_kind == RejectionKind.ARITHMETIC_OVERFLOW

    def test_empty_contract_id_rejected(self):
        with pytest.raises(ValueError):
            TokenContractConfig(contract_id="")


# =============================================================================
# MODULE-LEVEL HELPERS, DETERMINISM, LOGGING
# =============================================================================


def test_module_level_verify():
    result = verify(TransitionIntent.ISSUE, [], [rec(ALICE, BOB, 10)], {"alice-key"})
    assert result.accepted is True


def test_module_level_verify_transaction():
    tx = LedgerTransaction(
        outputs=(rec(ALICE, BOB, 10),),
        commands=(Command(contract_id=TOKEN_CONTRACT_ID, value=TransitionIntent.ISSUE, signers={"alice-key"}),),
    )
    assert verify_transaction(tx).accepted is True


def test_repeated_calls_identical(contract):
    """Вердикт детерминирован: одинаковые входы → одинаковый результат"""
    args = (
        TransitionIntent.MOVE,
        [rec(ALICE, BOB, 10), rec(CARLY, BOB, 10)],
        [rec(ALICE, BOB, 20)],
        {"bob-key"},
    )
    results = [contract.verify(*args) for _ in range(5)]
    assert all(r == results[0] for r in results)
    assert results[0] == TokenContract().verify(*args)


def test_unsupported_intent_logged_as_warning(contract, caplog):
    with caplog.at_level(logging.WARNING, logger="src.verifier.token_contract"):
        contract.verify("Burn", [], [], set())

    assert any("Unsupported intent" in record.getMessage() for record in caplog.records)


def test_rejection_logged_at_debug(contract, caplog):
    with caplog.at_level(logging.DEBUG, logger="src.verifier.token_contract"):
        contract.verify(TransitionIntent.ISSUE, [], [], set())

    assert any("rejected (ShapeViolation)" in record.getMessage() for record in caplog.records)
