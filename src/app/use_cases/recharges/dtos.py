"""Data Transfer Objects for Customer Recharge Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field
from src.domain.customer_recharge import RechargeStatus


class RechargeCustomerCommandDTO(BaseModel):
    """
    Command DTO for renewing a customer's service

    Used as input to RechargeCustomer use case.
    payment_method "due" grants the renewal on credit; manual=True records a
    customer-submitted payment that must be verified before it takes effect.
    """

    tenant_id: str = Field(..., description="Tenant identifier")
    customer_id: str = Field(..., description="Customer to recharge")
    amount: Decimal = Field(..., ge=0, description="Charged amount")
    months: int = Field(default=1, ge=1, description="Number of billing months")
    discount: Decimal = Field(default=Decimal("0"), ge=0)
    payment_method: str = Field(..., min_length=1, description="cash, bkash, due, ...")
    manual: bool = Field(default=False, description="Manual payment awaiting verification")
    validity_days: Optional[int] = Field(default=None, ge=1, description="Days per month (default from config)")
    transaction_id: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)
    collected_by_type: Optional[str] = Field(default=None, description="admin, staff, reseller, customer")
    collected_by_name: Optional[str] = Field(default=None)
    recharge_date: Optional[date] = Field(default=None, description="Defaults to today")

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "tenant_isp01",
                "customer_id": "c7d9e1f3-5a6b-4c8d-9e0f-1a2b3c4d5e6f",
                "amount": "500",
                "months": 1,
                "payment_method": "due",
                "collected_by_type": "admin",
                "collected_by_name": "Front Desk"
            }
        }


class BulkRechargeCommandDTO(BaseModel):
    items: List[RechargeCustomerCommandDTO] = Field(..., min_length=1)


class MarkRechargePaidCommandDTO(BaseModel):
    """Command DTO for collecting a due recharge"""

    recharge_id: str
    payment_method: str = Field(..., description="Method the due was collected with (not 'due')")
    paid_by: Optional[str] = None
    paid_by_name: Optional[str] = None
    transaction_id: Optional[str] = None


class VerifyManualRechargeCommandDTO(BaseModel):
    """Command DTO for approving a pending manual payment"""

    recharge_id: str
    paid_by: Optional[str] = Field(default=None, description="Verifier ID")
    paid_by_name: Optional[str] = Field(default=None, description="Verifier name")


class RejectManualRechargeCommandDTO(BaseModel):
    """Command DTO for rejecting a pending manual payment"""

    recharge_id: str
    reason: str = Field(default="", description="Rejection reason (required)")
    paid_by: Optional[str] = None
    paid_by_name: Optional[str] = None


class RechargeResponseDTO(BaseModel):
    """
    Response DTO for recharge operations

    Includes the customer's state after the operation.
    """

    id: str
    tenant_id: str
    customer_id: str
    reseller_id: Optional[str] = None
    amount: Decimal
    months: int
    discount: Decimal
    payment_method: str
    original_payment_method: Optional[str] = None
    old_expiry: Optional[date] = None
    new_expiry: Optional[date] = None
    status: str
    collected_by_type: Optional[str] = None
    collected_by_name: Optional[str] = None
    paid_by: Optional[str] = None
    paid_by_name: Optional[str] = None
    paid_at: Optional[datetime] = None
    transaction_id: Optional[str] = None
    notes: Optional[str] = None
    rejection_reason: Optional[str] = None
    recharge_date: datetime
    customer_due_amount: Optional[Decimal] = None
    customer_expiry_date: Optional[date] = None
    customer_status: Optional[str] = None
    wallet_amount_used: Optional[Decimal] = Field(
        default=None,
        description="Wallet contribution debited on verification"
    )


class BulkRechargeItemResultDTO(BaseModel):
    customer_id: str
    success: bool
    recharge: Optional[RechargeResponseDTO] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None


class BulkRechargeResponseDTO(BaseModel):
    """Per-customer outcome of a bulk recharge"""

    results: List[BulkRechargeItemResultDTO]
    succeeded: int
    failed: int


class ListRechargesQueryDTO(BaseModel):
    tenant_id: str
    customer_id: Optional[str] = None
    status: Optional[RechargeStatus] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListRechargesResponseDTO(BaseModel):
    recharges: List[RechargeResponseDTO]
    limit: int
    offset: int
