from src.domain.reseller_transaction import ResellerTransaction
from .dtos import ResellerTransactionDTO


def to_transaction_dto(transaction: ResellerTransaction) -> ResellerTransactionDTO:
    return ResellerTransactionDTO(
        id=transaction.id,
        reseller_id=transaction.reseller_id,
        type=transaction.type.value,
        amount=transaction.amount,
        balance_before=transaction.balance_before,
        balance_after=transaction.balance_after,
        from_reseller_id=transaction.from_reseller_id,
        to_reseller_id=transaction.to_reseller_id,
        customer_id=transaction.customer_id,
        description=transaction.description,
        created_at=transaction.created_at,
    )
