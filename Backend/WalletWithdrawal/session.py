"""In-memory wallet session"""

from decimal import Decimal
from typing import Optional
from WalletWithdrawal.config import INITIAL_BALANCE
from WalletWithdrawal.ledger.models import Ledger
from WalletWithdrawal.withdrawal.controller import WithdrawalFlowController
from WalletWithdrawal.withdrawal.navigation import Navigator


class WalletSession:
    """The ledger, flow controller and navigator shared by every screen."""

    def __init__(self, initial_balance: Optional[Decimal] = None):
        if initial_balance is None:
            initial_balance = INITIAL_BALANCE
        self.ledger = Ledger(initial_balance)
        self.navigator = Navigator()
        self.controller = WithdrawalFlowController(self.ledger, self.navigator)


wallet_session = WalletSession()


def get_session():
    """Wallet session."""
    yield wallet_session
