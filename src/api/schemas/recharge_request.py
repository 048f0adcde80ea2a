"""Request schemas for Recharge API"""

from typing import Optional
from pydantic import BaseModel, Field


class MarkRechargePaidRequestSchema(BaseModel):
    """Used for POST /recharges/{recharge_id}/mark-paid"""

    payment_method: str = Field(..., min_length=1, description="Collection method (not 'due')")
    paid_by: Optional[str] = None
    paid_by_name: Optional[str] = None
    transaction_id: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {"payment_method": "cash", "paid_by": "staff_12", "paid_by_name": "Rahim"}
        }


class VerifyRechargeRequestSchema(BaseModel):
    """Used for POST /recharges/{recharge_id}/verify"""

    paid_by: Optional[str] = None
    paid_by_name: Optional[str] = None


class RejectRechargeRequestSchema(BaseModel):
    """Used for POST /recharges/{recharge_id}/reject"""

    reason: str = Field(default="", description="Rejection reason (required)")
    paid_by: Optional[str] = None
    paid_by_name: Optional[str] = None
