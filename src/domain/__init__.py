from .base import BaseModel, generate_uuid, generate_document_number, money
from .party import (
    PartyKind,
    CustomerStatus,
    Provider,
    Client,
    Reseller,
    Customer,
    Party,
    PARTY_MODELS,
    BALANCE_FIELDS,
    FLOORED_KINDS,
    party_kind_of,
    balance_of,
    set_balance,
)
from .party_ledger_entry import PartyLedgerEntry, LedgerEntryType
from .invoice import Invoice, DocumentType, PaymentStatus, derive_payment_status, derive_due_amount
from .invoice_line import InvoiceLine, compute_line_amounts
from .item import ItemCategory, Item
from .payment import Payment, PaymentType
from .customer_recharge import CustomerRecharge, RechargeStatus
from .customer_payment import CustomerPayment
from .wallet_transaction import WalletTransaction, WalletTransactionType
from .reseller_transaction import ResellerTransaction, ResellerTransactionType
from .activity_log import ActivityLog

__all__ = [
    "BaseModel",
    "generate_uuid",
    "generate_document_number",
    "money",
    "PartyKind",
    "CustomerStatus",
    "Provider",
    "Client",
    "Reseller",
    "Customer",
    "Party",
    "PARTY_MODELS",
    "BALANCE_FIELDS",
    "FLOORED_KINDS",
    "party_kind_of",
    "balance_of",
    "set_balance",
    "PartyLedgerEntry",
    "LedgerEntryType",
    "Invoice",
    "DocumentType",
    "PaymentStatus",
    "derive_payment_status",
    "derive_due_amount",
    "InvoiceLine",
    "compute_line_amounts",
    "ItemCategory",
    "Item",
    "Payment",
    "PaymentType",
    "CustomerRecharge",
    "RechargeStatus",
    "CustomerPayment",
    "WalletTransaction",
    "WalletTransactionType",
    "ResellerTransaction",
    "ResellerTransactionType",
    "ActivityLog",
]
