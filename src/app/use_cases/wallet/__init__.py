"""Customer wallet use cases"""
from .record_wallet_transaction import RecordWalletTransaction
from .list_wallet_transactions import ListWalletTransactions
from .dtos import (
    RecordWalletTransactionCommandDTO,
    WalletTransactionDTO,
    ListWalletTransactionsResponseDTO,
)

__all__ = [
    "RecordWalletTransaction",
    "ListWalletTransactions",
    "RecordWalletTransactionCommandDTO",
    "WalletTransactionDTO",
    "ListWalletTransactionsResponseDTO",
]
