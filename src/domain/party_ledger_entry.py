"""Party Ledger Entry Domain Entity

Immutable append-only record of every change to a party's cached balance.
The sum of a party's entries equals its cached balance field.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String
from src.domain.base import BaseModel, generate_uuid
from src.domain.party import PartyKind


class LedgerEntryType(str, Enum):
    """Reason for a balance change"""
    OPENING_BALANCE = "opening_balance"
    INVOICE_ISSUED = "invoice_issued"
    INVOICE_DELETED = "invoice_deleted"
    PAYMENT_APPLIED = "payment_applied"
    PAYMENT_ADJUSTED = "payment_adjusted"
    PAYMENT_REVERSED = "payment_reversed"
    RECHARGE_DUE = "recharge_due"
    RECHARGE_PAID = "recharge_paid"
    RECHARGE_SETTLED = "recharge_settled"
    TRANSFER_IN = "transfer_in"
    TRANSFER_OUT = "transfer_out"
    CUSTOMER_RECHARGE = "customer_recharge"
    TOP_UP = "top_up"


class PartyLedgerEntry(BaseModel, table=True):
    """
    Party Ledger Entry - Signed balance delta for one party

    Domain Rules:
    - Entries are immutable (append-only)
    - amount is the delta actually applied, after any floor at zero
    - balance_after == balance_before + amount
    - reference_type/reference_id point at the document that caused the change
    """

    __tablename__ = "party_ledger_entries"
    __table_args__ = (
        Index("ix_party_ledger_entries_party", "party_kind", "party_id"),
        Index("ix_party_ledger_entries_reference", "reference_type", "reference_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str = Field(index=True)
    party_kind: PartyKind
    party_id: str = Field(sa_column=Column(String(36), nullable=False))
    entry_type: LedgerEntryType
    amount: Decimal = Field(
        sa_column=Column(Numeric(18, 2), nullable=False),
        description="Signed delta applied to the cached balance"
    )
    balance_before: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    balance_after: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    reference_type: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    reference_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    created_at: datetime = Field(default_factory=datetime.utcnow)
