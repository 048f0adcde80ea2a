"""Data Transfer Objects for Party Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field
from src.domain.party import PartyKind


class CreatePartyCommandDTO(BaseModel):
    """
    Command DTO for creating a provider, client, reseller or customer

    Used as input to CreateParty use case.
    """

    tenant_id: str = Field(..., description="Tenant identifier")
    kind: PartyKind = Field(..., description="Party kind")
    name: str = Field(..., min_length=1, description="Display name")
    phone: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)
    company_name: Optional[str] = Field(default=None, description="Provider/client only")
    contact_person: Optional[str] = Field(default=None, description="Provider/client only")
    parent_id: Optional[str] = Field(default=None, description="Parent reseller (resellers only)")
    can_transfer_balance: bool = Field(default=True, description="Resellers only")
    can_recharge_customers: bool = Field(default=True, description="Resellers only")
    customer_code: Optional[str] = Field(default=None, description="Customers only")
    expiry_date: Optional[date] = Field(default=None, description="Customers only")
    monthly_bill: Decimal = Field(default=Decimal("0"), ge=0, description="Customers only")
    opening_balance: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Initial balance, recorded as an opening_balance ledger entry"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "tenant_isp01",
                "kind": "provider",
                "name": "Upstream Transit Ltd",
                "company_name": "Upstream Transit Ltd",
                "opening_balance": "0"
            }
        }


class PartyResponseDTO(BaseModel):
    """Response DTO describing a party and its cached balance"""

    id: str
    tenant_id: str
    kind: str
    name: str
    balance: Decimal = Field(..., description="Cached balance (total_due/total_receivable/balance/due_amount)")
    parent_id: Optional[str] = None
    level: Optional[int] = None
    can_transfer_balance: Optional[bool] = None
    can_recharge_customers: Optional[bool] = None
    status: Optional[str] = None
    expiry_date: Optional[date] = None
    wallet_balance: Optional[Decimal] = None
    created_at: datetime
    updated_at: datetime


class PartyBalanceResponseDTO(BaseModel):
    """
    Response DTO for get party balance operation

    Returned by GetPartyBalance use case.
    """

    party_id: str
    tenant_id: str
    kind: str
    balance: Decimal = Field(..., description="Cached balance")
    ledger_balance: Decimal = Field(..., description="Sum of ledger entries")
    in_sync: bool = Field(..., description="True when balance == ledger_balance")
    updated_at: datetime


class LedgerEntryDTO(BaseModel):
    id: str
    entry_type: str
    amount: Decimal
    balance_before: Decimal
    balance_after: Decimal
    reference_type: Optional[str] = None
    reference_id: Optional[str] = None
    created_at: datetime


class ListPartyLedgerResponseDTO(BaseModel):
    """
    Response DTO for list party ledger operation

    Returned by ListPartyLedger use case.
    """

    party_id: str
    kind: str
    entries: List[LedgerEntryDTO]
    total: int
    limit: int
    offset: int
