"""Invoice Domain Entity

Purchase bills (from providers) and sales invoices (to clients) share one
table, discriminated by document_type. Paid/due amounts and the payment
status are only ever changed through apply_payment().
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, Text
from src.domain.base import BaseModel, generate_uuid, money
from src.domain.party import PartyKind


class DocumentType(str, Enum):
    """Billable document types"""
    PURCHASE_BILL = "purchase_bill"    # We owe a provider
    SALES_INVOICE = "sales_invoice"    # A client owes us


class PaymentStatus(str, Enum):
    """Invoice payment status, derived from paid/due amounts"""
    DUE = "due"
    PARTIAL = "partial"
    PAID = "paid"


DOCUMENT_PREFIXES = {
    DocumentType.PURCHASE_BILL: "PB",
    DocumentType.SALES_INVOICE: "SI",
}

DOCUMENT_PARTY_KINDS = {
    DocumentType.PURCHASE_BILL: PartyKind.PROVIDER,
    DocumentType.SALES_INVOICE: PartyKind.CLIENT,
}


def derive_payment_status(total_amount: Decimal, paid_amount: Decimal) -> PaymentStatus:
    """
    Derive payment status from totals

    Rule (used by create, apply, edit and reversal alike):
    - due <= 0 -> paid
    - paid > 0 -> partial
    - otherwise -> due
    """
    due = Decimal(total_amount) - Decimal(paid_amount)
    if due <= 0:
        return PaymentStatus.PAID
    if paid_amount > 0:
        return PaymentStatus.PARTIAL
    return PaymentStatus.DUE


def derive_due_amount(total_amount: Decimal, paid_amount: Decimal) -> Decimal:
    return max(Decimal("0"), money(total_amount) - money(paid_amount))


class Invoice(BaseModel, table=True):
    """
    Invoice - Purchase bill or sales invoice with a paid/due split

    Domain Rules:
    - invoice_number is unique (PB-/SI- prefix)
    - due_amount == max(0, total_amount - paid_amount) after every mutation
    - payment_status is derived by derive_payment_status()
    - paid_amount never goes below zero
    """

    __tablename__ = "invoices"
    __table_args__ = (
        Index("ix_invoices_tenant_id", "tenant_id"),
        Index("ix_invoices_party", "party_kind", "party_id"),
        Index("ix_invoices_payment_status", "payment_status"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    document_type: DocumentType
    invoice_number: str = Field(sa_column=Column(String(50), nullable=False, unique=True))
    party_kind: PartyKind
    party_id: str = Field(sa_column=Column(String(36), nullable=False))
    billing_date: date = Field(sa_column=Column(Date, nullable=False))
    due_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    from_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    to_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    subtotal: Decimal = Field(default=Decimal("0"), sa_column=Column(Numeric(18, 2), nullable=False, default=0))
    vat_amount: Decimal = Field(default=Decimal("0"), sa_column=Column(Numeric(18, 2), nullable=False, default=0))
    discount: Decimal = Field(default=Decimal("0"), sa_column=Column(Numeric(18, 2), nullable=False, default=0))
    total_amount: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    paid_amount: Decimal = Field(default=Decimal("0"), sa_column=Column(Numeric(18, 2), nullable=False, default=0))
    due_amount: Decimal = Field(default=Decimal("0"), sa_column=Column(Numeric(18, 2), nullable=False, default=0))
    payment_status: PaymentStatus = Field(default=PaymentStatus.DUE)
    remarks: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    created_by: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def recalculate(self) -> None:
        """Re-derive due_amount and payment_status from total/paid"""
        self.due_amount = derive_due_amount(self.total_amount, self.paid_amount)
        self.payment_status = derive_payment_status(money(self.total_amount), money(self.paid_amount))
        self.updated_at = datetime.utcnow()

    def apply_payment(self, delta: Decimal) -> None:
        """
        Apply a signed payment delta

        Positive delta records money received/paid, negative delta reverses it.
        paid_amount is clamped at zero.
        """
        self.paid_amount = max(Decimal("0"), money(self.paid_amount) + money(delta))
        self.recalculate()
