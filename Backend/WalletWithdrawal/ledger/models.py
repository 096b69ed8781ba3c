import logging
from decimal import Decimal
from .exceptions import InsufficientFunds, NonPositiveAmount
from .money import exact_subtract


logger = logging.getLogger(__name__)


class Ledger:
    """Holds the wallet balance.

    ``withdraw`` is the only operation that changes it. A rejected withdrawal
    raises and leaves the balance untouched.
    """

    def __init__(self, balance: Decimal):
        balance = Decimal(balance)
        if balance < 0:
            raise ValueError("Initial balance cannot be negative")
        self._balance = balance

    def __repr__(self) -> str:
        return f"Ledger(balance={self._balance})"

    @property
    def balance(self) -> Decimal:
        return self._balance

    def withdraw(self, amount: Decimal) -> None:
        if amount <= 0:
            raise NonPositiveAmount()
        if amount > self._balance:
            raise InsufficientFunds()
        self._balance = exact_subtract(self._balance, amount)
        logger.info(f"Withdrew {amount}, balance is now {self._balance}")
