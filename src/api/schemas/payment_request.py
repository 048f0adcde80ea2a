"""Request schemas for Payment API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator
from config import ApplicationConfig
from src.domain.payment import PaymentType


def _check_minimum(value: Optional[Decimal]) -> Optional[Decimal]:
    minimum = Decimal(str(ApplicationConfig.MIN_PAYMENT_AMOUNT))
    if value is not None and value < minimum:
        raise ValueError(f"Amount must be at least {minimum}")
    return value


class RecordPaymentRequestSchema(BaseModel):
    """
    Request schema for recording a payment

    Used for POST /payments endpoint.
    """

    tenant_id: str = Field(..., min_length=1, description="Tenant identifier (required, non-empty)")
    payment_type: PaymentType = Field(..., description="collection or provider_payment")
    party_id: str = Field(..., min_length=1, description="Client or provider ID")
    invoice_id: Optional[str] = Field(default=None, description="Invoice to apply the payment to")
    amount: Decimal = Field(..., gt=0, description="Payment amount (at least MIN_PAYMENT_AMOUNT)")
    payment_method: str = Field(default="cash", min_length=1)
    payment_date: date = Field(default_factory=date.today)
    handled_by: Optional[str] = Field(default=None, description="received_by / paid_by")
    remarks: Optional[str] = Field(default=None)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        return _check_minimum(v)

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "tenant_isp01",
                "payment_type": "provider_payment",
                "party_id": "a4c2e1f0-1111-4a2b-8c3d-0e9f8a7b6c5d",
                "invoice_id": "5d0c3a7e-2f34-4b9e-9b52-3d3f0a1b2c3d",
                "amount": "4000",
                "payment_method": "bank",
                "handled_by": "accounts"
            }
        }


class EditPaymentRequestSchema(BaseModel):
    """
    Request schema for editing a payment

    Used for PATCH /payments/{payment_id} endpoint. Omitted fields are kept.
    """

    amount: Optional[Decimal] = Field(default=None, gt=0)
    payment_method: Optional[str] = Field(default=None, min_length=1)
    payment_date: Optional[date] = None
    handled_by: Optional[str] = None
    remarks: Optional[str] = None
    previous_amount: Optional[Decimal] = Field(
        default=None,
        ge=0,
        description="Amount the editor last saw (falls back to the stored amount)"
    )
    actor: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v):
        return _check_minimum(v)
