"""Withdrawal flow: raw text in, next screen out."""

import logging
from dataclasses import dataclass
from typing import Optional, Union
from WalletWithdrawal.ledger.exceptions import WithdrawalError
from WalletWithdrawal.ledger.models import Ledger
from WalletWithdrawal.ledger.money import format_amount, parse_amount
from .navigation import Navigator


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StayOnWallet:
    error_message: str


@dataclass(frozen=True)
class NavigateToReceipt:
    amount: str


FlowResult = Union[StayOnWallet, NavigateToReceipt]


class WithdrawalFlowController:
    """Owns the wallet screen's input and error, and decides where to go next."""

    def __init__(self, ledger: Ledger, navigator: Optional[Navigator] = None):
        self.ledger = ledger
        self.navigator = navigator or Navigator()
        self.input_text = ""
        self.error: Optional[str] = None

    @property
    def can_submit(self) -> bool:
        return bool(self.input_text.strip())

    def update_input(self, text: str) -> None:
        self.input_text = text or ""
        self.error = None

    def attempt_withdrawal(self, raw_text: str) -> FlowResult:
        try:
            amount = parse_amount(raw_text)
            self.ledger.withdraw(amount)
        except WithdrawalError as e:
            logger.warning(f"Withdrawal of {raw_text!r} rejected: {e.message}")
            self.error = e.message
            return StayOnWallet(error_message=e.message)

        self.error = None
        self.input_text = ""
        return NavigateToReceipt(amount=format_amount(amount))

    def submit(self, raw_text: Optional[str] = None) -> FlowResult:
        """Run an attempt and push the receipt screen when it succeeds.

        Without ``raw_text`` the current field contents are used.
        """
        if raw_text is not None:
            self.input_text = raw_text
        result = self.attempt_withdrawal(self.input_text)
        if isinstance(result, NavigateToReceipt):
            self.navigator.show_receipt(result.amount)
        return result
