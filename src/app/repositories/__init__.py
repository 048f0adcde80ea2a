from .party_repository import PartyRepository
from .party_ledger_repository import PartyLedgerRepository
from .invoice_repository import InvoiceRepository
from .invoice_line_repository import InvoiceLineRepository
from .payment_repository import PaymentRepository
from .customer_recharge_repository import CustomerRechargeRepository
from .customer_payment_repository import CustomerPaymentRepository
from .reseller_transaction_repository import ResellerTransactionRepository
from .wallet_transaction_repository import WalletTransactionRepository
from .activity_log_repository import ActivityLogRepository
from .item_repository import ItemCategoryRepository, ItemRepository

__all__ = [
    "PartyRepository",
    "PartyLedgerRepository",
    "InvoiceRepository",
    "InvoiceLineRepository",
    "PaymentRepository",
    "CustomerRechargeRepository",
    "CustomerPaymentRepository",
    "ResellerTransactionRepository",
    "WalletTransactionRepository",
    "ActivityLogRepository",
    "ItemCategoryRepository",
    "ItemRepository",
]
