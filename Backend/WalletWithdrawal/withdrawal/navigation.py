from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import quote
import logging


logger = logging.getLogger(__name__)

WALLET_ROUTE = "/wallet"
RECEIPT_ROUTE = "/receipt"


class Screen(Enum):
    WALLET = "wallet"
    RECEIPT = "receipt"


@dataclass(frozen=True)
class NavigationState:
    screen: Screen
    amount: Optional[str] = None

    @property
    def route(self) -> str:
        if self.screen is Screen.RECEIPT:
            return receipt_route(self.amount or "0.00")
        return WALLET_ROUTE


WALLET = NavigationState(Screen.WALLET)


def receipt_route(amount: str) -> str:
    return f"{RECEIPT_ROUTE}/{quote(amount, safe='')}"


class Navigator:
    """Current screen: the wallet, or one receipt shown over it."""

    def __init__(self):
        self._current = WALLET

    @property
    def current(self) -> NavigationState:
        return self._current

    def show_receipt(self, amount: str) -> str:
        # a newer receipt replaces the one already shown
        self._current = NavigationState(Screen.RECEIPT, amount)
        logger.debug(f"Navigated to {self._current.route}")
        return self._current.route

    def back(self) -> str:
        self._current = WALLET
        logger.debug(f"Navigated back to {WALLET_ROUTE}")
        return WALLET_ROUTE
