"""Payment Domain Entity

Money received from a client (collection) or paid to a provider
(provider payment), optionally applied against one invoice.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, Text
from src.domain.base import BaseModel, generate_uuid
from src.domain.invoice import DocumentType
from src.domain.party import PartyKind


class PaymentType(str, Enum):
    """Payment directions"""
    COLLECTION = "collection"                # Received from a client
    PROVIDER_PAYMENT = "provider_payment"    # Paid to a provider


PAYMENT_PREFIXES = {
    PaymentType.COLLECTION: "RC",
    PaymentType.PROVIDER_PAYMENT: "PP",
}

PAYMENT_PARTY_KINDS = {
    PaymentType.COLLECTION: PartyKind.CLIENT,
    PaymentType.PROVIDER_PAYMENT: PartyKind.PROVIDER,
}

PAYMENT_DOCUMENT_TYPES = {
    PaymentType.COLLECTION: DocumentType.SALES_INVOICE,
    PaymentType.PROVIDER_PAYMENT: DocumentType.PURCHASE_BILL,
}


class Payment(BaseModel, table=True):
    """
    Payment - A collection or provider payment record

    Domain Rules:
    - amount is stored unsigned; the direction comes from payment_type
    - payment_number is unique (RC-/PP- prefix)
    - A linked invoice belongs to the same party as the payment
    - Editing or deleting a payment re-applies the difference to the
      linked invoice and the party balance
    """

    __tablename__ = "payments"
    __table_args__ = (
        Index("ix_payments_tenant_id", "tenant_id"),
        Index("ix_payments_invoice_id", "invoice_id"),
        Index("ix_payments_party", "party_kind", "party_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    payment_type: PaymentType
    payment_number: str = Field(sa_column=Column(String(50), nullable=False, unique=True))
    invoice_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    party_kind: PartyKind
    party_id: str = Field(sa_column=Column(String(36), nullable=False))
    amount: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    payment_method: str = Field(default="cash", sa_column=Column(String(50), nullable=False, default="cash"))
    payment_date: date = Field(sa_column=Column(Date, nullable=False))
    handled_by: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True),
        description="received_by for collections, paid_by for provider payments"
    )
    remarks: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    status: str = Field(default="completed", sa_column=Column(String(20), nullable=False, default="completed"))
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "0b7f8f5e-4c61-4f63-9d1b-8f1f7a2f8d10",
                "tenant_id": "tenant_isp01",
                "payment_type": "provider_payment",
                "payment_number": "PP-LZ3K9QW2A7F0XC",
                "invoice_id": "5d0c3a7e-2f34-4b9e-9b52-3d3f0a1b2c3d",
                "party_kind": "provider",
                "party_id": "a4c2e1f0-1111-4a2b-8c3d-0e9f8a7b6c5d",
                "amount": "4000.00",
                "payment_method": "bank",
                "payment_date": "2024-01-15",
                "handled_by": "accounts",
                "status": "completed"
            }
        }
