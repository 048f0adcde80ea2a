from .party_repository import SqlAlchemyPartyRepository
from .party_ledger_repository import SqlAlchemyPartyLedgerRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_line_repository import SqlAlchemyInvoiceLineRepository
from .payment_repository import SqlAlchemyPaymentRepository
from .customer_recharge_repository import SqlAlchemyCustomerRechargeRepository
from .customer_payment_repository import SqlAlchemyCustomerPaymentRepository
from .reseller_transaction_repository import SqlAlchemyResellerTransactionRepository
from .wallet_transaction_repository import SqlAlchemyWalletTransactionRepository
from .activity_log_repository import SqlAlchemyActivityLogRepository
from .item_repository import SqlAlchemyItemCategoryRepository, SqlAlchemyItemRepository

__all__ = [
    "SqlAlchemyPartyRepository",
    "SqlAlchemyPartyLedgerRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceLineRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyCustomerRechargeRepository",
    "SqlAlchemyCustomerPaymentRepository",
    "SqlAlchemyResellerTransactionRepository",
    "SqlAlchemyWalletTransactionRepository",
    "SqlAlchemyActivityLogRepository",
    "SqlAlchemyItemCategoryRepository",
    "SqlAlchemyItemRepository",
]
