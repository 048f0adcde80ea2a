"""Item Catalogue Domain Entities

Categories and priced items (bandwidth, IP blocks, colocation, ...) that
bill and invoice lines are picked from.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Text
from src.domain.base import BaseModel, generate_uuid


class ItemCategory(BaseModel, table=True):
    """Item Category - Grouping of catalogue items within one tenant"""

    __tablename__ = "item_categories"
    __table_args__ = (
        Index("ix_item_categories_tenant_id", "tenant_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    name: str = Field(sa_column=Column(String(255), nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class Item(BaseModel, table=True):
    """
    Item - A sellable or purchasable unit with a default price

    Domain Rules:
    - category_id, when set, names a category of the same tenant
    - unit_price is the default rate offered when an invoice line picks the item
    """

    __tablename__ = "items"
    __table_args__ = (
        Index("ix_items_tenant_id", "tenant_id"),
        Index("ix_items_category_id", "category_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    category_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    name: str = Field(sa_column=Column(String(255), nullable=False))
    description: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    unit: str = Field(default="Mbps", sa_column=Column(String(50), nullable=False, default="Mbps"))
    unit_price: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
    )
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
