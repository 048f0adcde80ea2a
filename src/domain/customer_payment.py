"""Customer Payment Domain Entity

Payment history row written whenever a customer recharge is settled.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class CustomerPayment(BaseModel, table=True):
    """Customer Payment - Settled recharge payment (history only, no balance effect)"""

    __tablename__ = "customer_payments"
    __table_args__ = (
        Index("ix_customer_payments_tenant_id", "tenant_id"),
        Index("ix_customer_payments_customer_id", "customer_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    customer_id: str = Field(sa_column=Column(String(36), nullable=False))
    recharge_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    amount: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    payment_method: str = Field(sa_column=Column(String(50), nullable=False))
    transaction_id: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    payment_date: datetime = Field(default_factory=datetime.utcnow)
