"""Request schemas for Reseller API"""

from datetime import date
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field


class TransferRequestSchema(BaseModel):
    """
    Request schema for moving balance between a reseller and a sub-reseller

    Used for POST /resellers/{reseller_id}/fund and /deduct endpoints.
    """

    sub_reseller_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0, description="Amount to move (must be > 0)")
    description: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "sub_reseller_id": "0b5d4f3e-7c21-4a8e-b9f0-12ab34cd56ef",
                "amount": "300",
                "description": "Weekly float"
            }
        }


class TopUpRequestSchema(BaseModel):
    """Used for POST /resellers/{reseller_id}/top-up"""

    amount: Decimal = Field(..., gt=0)
    description: Optional[str] = None


class ResellerRechargeRequestSchema(BaseModel):
    """Used for POST /resellers/{reseller_id}/recharge-customer"""

    customer_id: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    months: int = Field(default=1, ge=1)
    validity_days: Optional[int] = Field(default=None, ge=1)
    recharge_date: Optional[date] = None
