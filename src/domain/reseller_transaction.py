"""Reseller Transaction Domain Entity

Immutable record of reseller wallet movements. A transfer between a parent
reseller and a sub-reseller always produces two rows, one per reseller.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class ResellerTransactionType(str, Enum):
    """Reseller wallet movements"""
    RECHARGE = "recharge"          # ISP tops up the reseller
    TRANSFER_IN = "transfer_in"    # Received from another reseller
    TRANSFER_OUT = "transfer_out"  # Sent to a sub-reseller
    DEDUCTION = "deduction"        # Pulled back by the parent reseller
    CUSTOMER_PAYMENT = "customer_payment"  # Paid for a customer recharge


class ResellerTransaction(BaseModel, table=True):
    """
    Reseller Transaction - Signed movement on one reseller's wallet

    Domain Rules:
    - amount is signed (transfer_out and deduction are negative)
    - balance_before/balance_after belong to the reseller on this row
    - from_reseller_id/to_reseller_id identify the counterparty
    - customer_id names the customer a customer_payment row paid for
    """

    __tablename__ = "reseller_transactions"
    __table_args__ = (
        Index("ix_reseller_transactions_reseller_id", "reseller_id"),
        Index("ix_reseller_transactions_created_at", "created_at"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    reseller_id: str = Field(sa_column=Column(String(36), nullable=False))
    type: ResellerTransactionType
    amount: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    balance_before: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    balance_after: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    from_reseller_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    to_reseller_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    customer_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    created_at: datetime = Field(default_factory=datetime.utcnow)

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": "f3a9c0de-7c1b-4a52-93a0-2b6e8c4d1a11",
                "tenant_id": "tenant_isp01",
                "reseller_id": "9e1d7c3b-5a2f-4e6d-8b0c-1f2a3b4c5d6e",
                "type": "transfer_out",
                "amount": "-300.00",
                "balance_before": "1000.00",
                "balance_after": "700.00",
                "to_reseller_id": "2c4e6a8b-0d1f-4a3c-9e5b-7d9f1b3d5f7a",
                "description": "Balance transfer to Sub Net"
            }
        }
