from decimal import Decimal
import pytest
from WalletWithdrawal.ledger.exceptions import (
    InsufficientFunds,
    NonPositiveAmount,
    WithdrawalError,
)
from WalletWithdrawal.ledger.models import Ledger


def test_withdraw_reduces_balance_exactly():
    ledger = Ledger(Decimal("10000.00"))
    ledger.withdraw(Decimal("0.10"))
    ledger.withdraw(Decimal("0.20"))
    assert ledger.balance == Decimal("9999.70")


@pytest.mark.parametrize("amount", ["0", "-0.01", "-100"])
def test_non_positive_amount_rejected(amount):
    ledger = Ledger(Decimal("100.00"))
    with pytest.raises(NonPositiveAmount):
        ledger.withdraw(Decimal(amount))
    assert ledger.balance == Decimal("100.00")


def test_amount_over_balance_rejected():
    ledger = Ledger(Decimal("100.00"))
    with pytest.raises(InsufficientFunds):
        ledger.withdraw(Decimal("100.01"))
    assert ledger.balance == Decimal("100.00")


def test_withdraw_whole_balance_leaves_zero():
    ledger = Ledger(Decimal("100.00"))
    ledger.withdraw(Decimal("100"))
    assert ledger.balance == Decimal("0.00")

    with pytest.raises(InsufficientFunds):
        ledger.withdraw(Decimal("0.01"))


def test_errors_share_a_base_class():
    assert issubclass(NonPositiveAmount, WithdrawalError)
    assert issubclass(InsufficientFunds, WithdrawalError)
    assert InsufficientFunds().message == "insufficient balance"
    assert str(NonPositiveAmount()) == "amount must be greater than 0"


def test_negative_initial_balance_rejected():
    with pytest.raises(ValueError):
        Ledger(Decimal("-1"))


def test_tiny_amount_is_not_rounded_away():
    ledger = Ledger(Decimal("10000.00"))
    ledger.withdraw(Decimal("0.00000000000000000000000001"))
    assert ledger.balance < Decimal("10000.00")
    assert ledger.balance == Decimal("9999.99999999999999999999999999")
