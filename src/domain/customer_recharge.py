"""Customer Recharge Domain Entity

A renewal of a customer's service window, with its payment lifecycle:

    due ----------(mark paid)------------> completed
    pending_manual --(verify)------------> completed
    pending_manual --(reject)------------> rejected

completed and rejected are terminal.
"""

import re
from datetime import datetime, date, timedelta
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date, Text
from src.domain.base import BaseModel, generate_uuid


class RechargeStatus(str, Enum):
    """Recharge lifecycle states"""
    DUE = "due"                        # Granted on credit, not yet paid
    PENDING_MANUAL = "pending_manual"  # Customer-submitted manual payment awaiting review
    COMPLETED = "completed"
    REJECTED = "rejected"


DUE_PAYMENT_METHOD = "due"

TERMINAL_STATUSES = frozenset({RechargeStatus.COMPLETED, RechargeStatus.REJECTED})


class CustomerRecharge(BaseModel, table=True):
    """
    Customer Recharge - One renewal and its payment state

    Domain Rules:
    - A due recharge extends expiry immediately and adds amount to the
      customer's due_amount
    - A pending_manual recharge changes nothing on the customer until verified
    - reseller_id is set when a reseller paid for the recharge from its balance
    - Only due -> completed, pending_manual -> completed and
      pending_manual -> rejected transitions are allowed
    """

    __tablename__ = "customer_recharges"
    __table_args__ = (
        Index("ix_customer_recharges_tenant_id", "tenant_id"),
        Index("ix_customer_recharges_customer_id", "customer_id"),
        Index("ix_customer_recharges_status", "status"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    customer_id: str = Field(sa_column=Column(String(36), nullable=False))
    reseller_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    amount: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    months: int = Field(default=1)
    discount: Decimal = Field(default=Decimal("0"), sa_column=Column(Numeric(18, 2), nullable=False, default=0))
    payment_method: str = Field(sa_column=Column(String(50), nullable=False))
    original_payment_method: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    old_expiry: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    new_expiry: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    status: RechargeStatus = Field(default=RechargeStatus.COMPLETED)
    collected_by_type: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    collected_by_name: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    paid_by: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    paid_by_name: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    paid_at: Optional[datetime] = Field(default=None)
    transaction_id: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    rejection_reason: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    recharge_date: datetime = Field(default_factory=datetime.utcnow)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    def is_package_change(self) -> bool:
        return "package change" in (self.notes or "").lower()


_WALLET_NOTE_PATTERN = re.compile(r"\(?Wallet:\s*৳?\s*(\d+(?:\.\d+)?)\)?")


def parse_wallet_amount(notes: Optional[str]) -> Decimal:
    """
    Extract the wallet contribution recorded in recharge notes

    Accepts "(Wallet: ৳250)" and "Wallet: 250". Returns Decimal("0") when the
    notes carry no wallet contribution.
    """
    if not notes:
        return Decimal("0")
    match = _WALLET_NOTE_PATTERN.search(notes)
    if not match:
        return Decimal("0")
    return Decimal(match.group(1))


def compute_new_expiry(old_expiry: Optional[date], today: date, months: int, validity_days: int) -> date:
    """
    Extend a service window

    The extension starts from the current expiry while it is still in the
    future, otherwise from today.
    """
    base = old_expiry if old_expiry and old_expiry > today else today
    return base + timedelta(days=validity_days * months)
