"""Invoice Line Domain Entity

Tracks individual line items within an invoice.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String, Date
from src.domain.base import BaseModel, generate_uuid, money


class InvoiceLine(BaseModel, table=True):
    """
    Invoice Line - Individual line item within an invoice

    Domain Rules:
    - Each line item belongs to exactly one invoice
    - item_id optionally points at the catalogue item the line was priced from;
      item_name, unit and rate are copied so later catalogue edits do not
      change issued documents
    - vat_amount = quantity * rate * vat_percent / 100
    - total = quantity * rate + vat_amount
    """

    __tablename__ = "invoice_lines"
    __table_args__ = (
        Index("ix_invoice_lines_invoice_id", "invoice_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    invoice_id: str = Field(
        sa_column=Column(String(36), ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False)
    )
    item_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    item_name: str = Field(sa_column=Column(String(255), nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    unit: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    quantity: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    rate: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    vat_percent: Decimal = Field(default=Decimal("0"), sa_column=Column(Numeric(5, 2), nullable=False, default=0))
    vat_amount: Decimal = Field(default=Decimal("0"), sa_column=Column(Numeric(18, 2), nullable=False, default=0))
    from_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    to_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    total: Decimal = Field(sa_column=Column(Numeric(18, 2), nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow)


def compute_line_amounts(quantity: Decimal, rate: Decimal, vat_percent: Decimal) -> tuple[Decimal, Decimal, Decimal]:
    """Return (net, vat_amount, total) for a line"""
    net = money(Decimal(quantity) * Decimal(rate))
    vat = money(net * Decimal(vat_percent) / Decimal("100"))
    return net, vat, net + vat
