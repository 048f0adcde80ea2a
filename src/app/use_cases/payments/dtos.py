"""Data Transfer Objects for Payment Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field
from src.domain.payment import PaymentType


class RecordPaymentCommandDTO(BaseModel):
    """
    Command DTO for recording a collection or provider payment

    Used as input to RecordPayment use case.
    """

    tenant_id: str = Field(..., description="Tenant identifier")
    payment_type: PaymentType = Field(..., description="collection (client) or provider_payment (provider)")
    party_id: str = Field(..., description="Client ID for collections, provider ID for provider payments")
    invoice_id: Optional[str] = Field(default=None, description="Invoice the payment is applied to")
    amount: Decimal = Field(..., gt=0, description="Payment amount (must be > 0)")
    payment_method: str = Field(default="cash", description="cash, bank, bkash, ...")
    payment_date: date = Field(default_factory=date.today)
    handled_by: Optional[str] = Field(default=None, description="received_by / paid_by")
    remarks: Optional[str] = Field(default=None)

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "tenant_isp01",
                "payment_type": "provider_payment",
                "party_id": "a4c2e1f0-1111-4a2b-8c3d-0e9f8a7b6c5d",
                "invoice_id": "5d0c3a7e-2f34-4b9e-9b52-3d3f0a1b2c3d",
                "amount": "4000",
                "payment_method": "bank"
            }
        }


class EditPaymentCommandDTO(BaseModel):
    """
    Command DTO for editing a payment

    previous_amount is the amount the editor saw; when given it is used as
    the base of the adjustment instead of the stored amount.
    """

    payment_id: str
    amount: Optional[Decimal] = Field(default=None, gt=0, description="New amount (must be > 0)")
    payment_method: Optional[str] = None
    payment_date: Optional[date] = None
    handled_by: Optional[str] = None
    remarks: Optional[str] = None
    previous_amount: Optional[Decimal] = Field(default=None, ge=0)
    actor: Optional[str] = Field(default=None, description="Who performed the edit")


class DeletePaymentCommandDTO(BaseModel):
    payment_id: str
    actor: Optional[str] = Field(default=None, description="Who performed the delete")


class PaymentResponseDTO(BaseModel):
    """
    Response DTO for payment operations

    Carries the payment plus the resulting invoice and party state.
    """

    id: str
    tenant_id: str
    payment_type: str
    payment_number: str
    invoice_id: Optional[str] = None
    party_kind: str
    party_id: str
    amount: Decimal
    payment_method: str
    payment_date: date
    handled_by: Optional[str] = None
    remarks: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime
    invoice_paid_amount: Optional[Decimal] = None
    invoice_due_amount: Optional[Decimal] = None
    invoice_payment_status: Optional[str] = None
    party_balance: Optional[Decimal] = None


class DeletePaymentResponseDTO(BaseModel):
    payment_id: str
    payment_number: str
    amount: Decimal
    invoice_id: Optional[str] = None
    invoice_paid_amount: Optional[Decimal] = None
    invoice_due_amount: Optional[Decimal] = None
    invoice_payment_status: Optional[str] = None
    party_balance: Optional[Decimal] = None


class ListPaymentsQueryDTO(BaseModel):
    tenant_id: str
    payment_type: Optional[PaymentType] = None
    party_id: Optional[str] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPaymentsResponseDTO(BaseModel):
    payments: List[PaymentResponseDTO]
    limit: int
    offset: int
