from pydantic import BaseModel
from typing import Optional


class WithdrawalRequest(BaseModel):
    amount: str


class WithdrawalOut(BaseModel):
    status: str
    amount: str
    balance: str
    redirect: str


class BalanceOut(BaseModel):
    balance: str
    display: str


class NavigationOut(BaseModel):
    screen: str
    amount: Optional[str] = None
    route: str
