"""Wallet settings"""

from decimal import Decimal, InvalidOperation
from pathlib import Path
from dotenv import load_dotenv
from WalletWithdrawal.ledger.money import as_money
import os


env_path = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(env_path)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
APP_TITLE = os.getenv("WALLET_APP_TITLE", "Virtual Wallet")
CURRENCY_SYMBOL = os.getenv("WALLET_CURRENCY_SYMBOL", "$")

_raw_initial_balance = os.getenv("WALLET_INITIAL_BALANCE", "10000.00")

try:
    INITIAL_BALANCE = Decimal(_raw_initial_balance.strip())
except InvalidOperation:
    raise ValueError(
        f"❌ WALLET_INITIAL_BALANCE is not a number: {_raw_initial_balance!r}"
    )

if not INITIAL_BALANCE.is_finite() or INITIAL_BALANCE < 0:
    raise ValueError("❌ WALLET_INITIAL_BALANCE must be a non-negative amount.")

try:
    as_money(INITIAL_BALANCE)
except InvalidOperation:
    raise ValueError(
        f"❌ WALLET_INITIAL_BALANCE is too large to display: {_raw_initial_balance!r}"
    )
