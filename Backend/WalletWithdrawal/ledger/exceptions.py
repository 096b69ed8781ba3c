"""Withdrawal domain specific exceptions."""


class WithdrawalError(Exception):
    """Base class for a rejected withdrawal attempt.

    ``message`` is the text shown to the user on the wallet screen.
    """

    message = "withdrawal rejected"

    def __init__(self):
        super().__init__(self.message)


class AmountParseError(WithdrawalError):
    """Raised when the entered text is not a decimal number."""

    message = "invalid number"


class NonPositiveAmount(WithdrawalError):
    """Raised when the amount is zero or negative."""

    message = "amount must be greater than 0"


class InsufficientFunds(WithdrawalError):
    """Raised when the amount is larger than the current balance."""

    message = "insufficient balance"
