from src.domain.wallet_transaction import WalletTransaction
from .dtos import WalletTransactionDTO


def to_wallet_transaction_dto(transaction: WalletTransaction) -> WalletTransactionDTO:
    return WalletTransactionDTO(
        id=transaction.id,
        customer_id=transaction.customer_id,
        transaction_type=transaction.transaction_type.value,
        amount=transaction.amount,
        balance_after=transaction.balance_after,
        status=transaction.status,
        notes=transaction.notes,
        reference_id=transaction.reference_id,
        processed_by=transaction.processed_by,
        processed_at=transaction.processed_at,
    )
