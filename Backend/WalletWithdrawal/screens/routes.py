import logging
from pathlib import Path
from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from WalletWithdrawal.config import APP_TITLE, CURRENCY_SYMBOL
from WalletWithdrawal.ledger.money import format_balance
from WalletWithdrawal.session import WalletSession, get_session
from WalletWithdrawal.withdrawal.controller import NavigateToReceipt
from WalletWithdrawal.withdrawal.navigation import WALLET_ROUTE

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

router = APIRouter(tags=["wallet-screens"])

logger = logging.getLogger(__name__)


def _wallet_page(request: Request, session: WalletSession):
    controller = session.controller
    return templates.TemplateResponse(
        request,
        "wallet.html",
        {
            "title": APP_TITLE,
            "balance": format_balance(session.ledger.balance, CURRENCY_SYMBOL),
            "input_text": controller.input_text,
            "error": controller.error,
            "can_submit": controller.can_submit,
        },
    )


@router.get("/wallet", response_class=HTMLResponse)
def wallet_screen(request: Request, session: WalletSession = Depends(get_session)):
    return _wallet_page(request, session)


@router.post("/wallet/input")
def wallet_input(amount: str = Form(""), session: WalletSession = Depends(get_session)):
    """Store the field text without submitting; clears the last error."""
    session.controller.update_input(amount)
    return RedirectResponse(WALLET_ROUTE, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/wallet/withdraw", response_class=HTMLResponse)
def wallet_withdraw(
    request: Request,
    amount: str = Form(""),
    session: WalletSession = Depends(get_session),
):
    result = session.controller.submit(amount)
    if isinstance(result, NavigateToReceipt):
        route = session.navigator.current.route
        logger.debug(f"Redirecting to {route}")
        return RedirectResponse(route, status_code=status.HTTP_303_SEE_OTHER)
    return _wallet_page(request, session)


@router.get("/receipt/{amount}", response_class=HTMLResponse)
def receipt_screen(request: Request, amount: str):
    return templates.TemplateResponse(
        request,
        "receipt.html",
        {"title": "Receipt", "currency_symbol": CURRENCY_SYMBOL, "amount": amount or "0.00"},
    )


@router.post("/receipt/back")
def receipt_back(session: WalletSession = Depends(get_session)):
    route = session.navigator.back()
    logger.debug(f"Redirecting to {route}")
    return RedirectResponse(route, status_code=status.HTTP_303_SEE_OTHER)
