from fastapi import APIRouter
from WalletWithdrawal.screens.routes import router as screens_router
from WalletWithdrawal.withdrawal.routes import router as api_router


router = APIRouter()
router.include_router(screens_router)
router.include_router(api_router)

__all__ = ["router"]
