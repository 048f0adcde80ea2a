"""Party Domain Entities

Trading parties that hold a cached running balance:
- Provider: bandwidth provider, balance = total_due (what we owe)
- Client: bandwidth client, balance = total_receivable (what they owe us)
- Reseller: wallet balance used for transfers and customer recharges
- Customer: subscriber, balance = due_amount (unpaid recharges)

The cached balance is a materialized value. Every mutation goes through the
party ledger (see party_ledger_entry.py) in the same transaction.
"""

from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union
from sqlmodel import Field, Column, Index
from sqlalchemy import Numeric, String, Date
from src.domain.base import BaseModel, generate_uuid


class PartyKind(str, Enum):
    """Kinds of trading party"""
    PROVIDER = "provider"
    CLIENT = "client"
    RESELLER = "reseller"
    CUSTOMER = "customer"


class CustomerStatus(str, Enum):
    """Subscriber service status"""
    ACTIVE = "active"
    EXPIRED = "expired"
    SUSPENDED = "suspended"


class Provider(BaseModel, table=True):
    """
    Provider - Bandwidth provider we purchase from

    Domain Rules:
    - total_due is increased by purchase bills and decreased by provider payments
    - total_due never goes below zero
    """

    __tablename__ = "providers"
    __table_args__ = (Index("ix_providers_tenant_id", "tenant_id"),)

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    name: str = Field(sa_column=Column(String(255), nullable=False))
    company_name: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    contact_person: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    phone: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    total_due: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="Payable to the provider (cached, >= 0)"
    )
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class Client(BaseModel, table=True):
    """
    Client - Bandwidth client we sell to

    Domain Rules:
    - total_receivable is increased by sales invoices and decreased by collections
    - total_receivable never goes below zero
    """

    __tablename__ = "clients"
    __table_args__ = (Index("ix_clients_tenant_id", "tenant_id"),)

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    name: str = Field(sa_column=Column(String(255), nullable=False))
    company_name: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    contact_person: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    phone: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    total_receivable: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="Receivable from the client (cached, >= 0)"
    )
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class Reseller(BaseModel, table=True):
    """
    Reseller - Wallet-holding reseller, optionally under a parent reseller

    Domain Rules:
    - parent_id links a sub-reseller to the reseller that funds it
    - Transfers require can_transfer_balance on the sending parent
    - Transfers are validated against the available balance
    - Paying for a customer recharge requires can_recharge_customers and
      the full amount in balance
    """

    __tablename__ = "resellers"
    __table_args__ = (
        Index("ix_resellers_tenant_id", "tenant_id"),
        Index("ix_resellers_parent_id", "parent_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    name: str = Field(sa_column=Column(String(255), nullable=False))
    phone: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    parent_id: Optional[str] = Field(default=None, sa_column=Column(String(36), nullable=True))
    level: int = Field(default=1)
    can_transfer_balance: bool = Field(default=True)
    can_recharge_customers: bool = Field(default=True)
    balance: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="Wallet balance (cached)"
    )
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


class Customer(BaseModel, table=True):
    """
    Customer - Subscriber with a renewable service window

    Domain Rules:
    - due_amount accumulates recharges granted on credit ("due" recharges)
    - due_amount never goes below zero
    - wallet_balance is the prepaid wallet, debited by the wallet service
    """

    __tablename__ = "customers"
    __table_args__ = (Index("ix_customers_tenant_id", "tenant_id"),)

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    tenant_id: str
    name: str = Field(sa_column=Column(String(255), nullable=False))
    customer_code: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    phone: Optional[str] = Field(default=None, sa_column=Column(String(50), nullable=True))
    email: Optional[str] = Field(default=None, sa_column=Column(String(255), nullable=True))
    status: CustomerStatus = Field(default=CustomerStatus.ACTIVE)
    expiry_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    last_payment_date: Optional[date] = Field(default=None, sa_column=Column(Date, nullable=True))
    monthly_bill: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
    )
    due_amount: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
        description="Unpaid recharge amount (cached, >= 0)"
    )
    wallet_balance: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(Numeric(18, 2), nullable=False, default=0),
    )
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)


Party = Union[Provider, Client, Reseller, Customer]

PARTY_MODELS = {
    PartyKind.PROVIDER: Provider,
    PartyKind.CLIENT: Client,
    PartyKind.RESELLER: Reseller,
    PartyKind.CUSTOMER: Customer,
}

BALANCE_FIELDS = {
    PartyKind.PROVIDER: "total_due",
    PartyKind.CLIENT: "total_receivable",
    PartyKind.RESELLER: "balance",
    PartyKind.CUSTOMER: "due_amount",
}

# Payable/receivable style balances that are clamped at zero
FLOORED_KINDS = frozenset({PartyKind.PROVIDER, PartyKind.CLIENT, PartyKind.CUSTOMER})


def party_kind_of(party: Party) -> PartyKind:
    for kind, model in PARTY_MODELS.items():
        if isinstance(party, model):
            return kind
    raise TypeError(f"Not a party entity: {type(party).__name__}")


def balance_of(party: Party) -> Decimal:
    value = getattr(party, BALANCE_FIELDS[party_kind_of(party)])
    return Decimal(value or 0)


def set_balance(party: Party, value: Decimal) -> None:
    setattr(party, BALANCE_FIELDS[party_kind_of(party)], value)
    party.updated_at = datetime.utcnow()
