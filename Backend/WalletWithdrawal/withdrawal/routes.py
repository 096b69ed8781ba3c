import logging
from fastapi import APIRouter, Depends, HTTPException
from WalletWithdrawal.config import CURRENCY_SYMBOL
from WalletWithdrawal.ledger.money import format_amount, format_balance
from WalletWithdrawal.session import WalletSession, get_session
from .controller import StayOnWallet
from .schemas import BalanceOut, NavigationOut, WithdrawalOut, WithdrawalRequest

router = APIRouter(prefix="/api/wallet", tags=["wallet-api"])

logger = logging.getLogger(__name__)


@router.get("/balance", response_model=BalanceOut)
def balance(session: WalletSession = Depends(get_session)):
    bal = session.ledger.balance
    return BalanceOut(
        balance=format_amount(bal), display=format_balance(bal, CURRENCY_SYMBOL)
    )


@router.post("/withdrawals", response_model=WithdrawalOut)
def withdraw(req: WithdrawalRequest, session: WalletSession = Depends(get_session)):
    result = session.controller.submit(req.amount)
    if isinstance(result, StayOnWallet):
        raise HTTPException(status_code=400, detail=result.error_message)

    route = session.navigator.current.route
    logger.debug(f"Withdrawal of {result.amount} accepted, next screen {route}")
    return WithdrawalOut(
        status="success",
        amount=result.amount,
        balance=format_amount(session.ledger.balance),
        redirect=route,
    )


@router.get("/navigation", response_model=NavigationOut)
def navigation(session: WalletSession = Depends(get_session)):
    state = session.navigator.current
    return NavigationOut(screen=state.screen.value, amount=state.amount, route=state.route)
