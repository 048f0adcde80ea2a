"""Customer Wallet Transaction Domain Entity"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class WalletTransactionType(str, Enum):
    """Customer wallet movements"""
    TOPUP = "topup"
    WITHDRAW = "withdraw"
    BONUS = "bonus"
    RECHARGE_PAYMENT = "recharge_payment"    # Wallet used to pay a recharge


CREDIT_TYPES = frozenset({WalletTransactionType.TOPUP, WalletTransactionType.BONUS})


class WalletTransaction(BaseModel, table=True):
    """
    Wallet Transaction - Movement on a customer's prepaid wallet

    Domain Rules:
    - amount is signed (credits positive, debits negative)
    - balance_after is the wallet balance after this movement
    - A debit never takes the wallet below zero
    """

    __tablename__ = "customer_wallet_transactions"
    __table_args__ = (
        Index("ix_customer_wallet_transactions_customer_id", "customer_id"),
        Index("ix_customer_wallet_transactions_reference_id", "reference_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    customer_id: str = Field(sa_column=Column(String(36), nullable=False))
    transaction_type: WalletTransactionType
    amount: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    balance_after: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    status: str = Field(default="completed", sa_column=Column(String(20), nullable=False, default="completed"))
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    reference_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    reference_type: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    processed_by: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    processed_at: datetime = Field(default_factory=datetime.utcnow)
