from .unit_of_work import UnitOfWork
from .wallet_service import WalletService, WalletDebitResult

__all__ = [
    "UnitOfWork",
    "WalletService",
    "WalletDebitResult",
]
