"""Main Entry Point"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from WalletWithdrawal.app import router as wallet_router
from WalletWithdrawal.config import APP_TITLE, CURRENCY_SYMBOL, LOG_LEVEL
from WalletWithdrawal.ledger.money import format_balance
from WalletWithdrawal.session import wallet_session
from WalletWithdrawal.withdrawal.navigation import WALLET_ROUTE
import logging
import sys


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
    force=True,
)
logger = logging.getLogger(__name__)
logger.propagate = True


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Starting up: balance {format_balance(wallet_session.ledger.balance, CURRENCY_SYMBOL)}"
    )

    yield
    logger.info("Shutting down...")


app = FastAPI(
    title=APP_TITLE,
    description="Check the wallet balance, withdraw an amount and get a receipt.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(wallet_router)


@app.get("/")
def entry_point():
    return RedirectResponse(WALLET_ROUTE)


@app.get("/health")
def health_check():
    return {"health": "ok"}
