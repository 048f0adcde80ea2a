"""Data Transfer Objects for Reseller Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field
from src.app.use_cases.recharges.dtos import RechargeResponseDTO


class TransferCommandDTO(BaseModel):
    """
    Command DTO for moving balance between a reseller and its sub-reseller

    Used as input to FundSubReseller and DeductSubReseller use cases.
    """

    reseller_id: str = Field(..., description="Parent reseller")
    sub_reseller_id: str = Field(..., description="Sub-reseller (parent_id must equal reseller_id)")
    amount: Decimal = Field(..., gt=0, description="Amount to move (must be > 0)")
    description: Optional[str] = Field(default=None, description="Overrides the default transaction description")

    class Config:
        json_schema_extra = {
            "example": {
                "reseller_id": "9e1d7c3b-5a2f-4e6d-8b0c-1f2a3b4c5d6e",
                "sub_reseller_id": "2c4e6a8b-0d1f-4a3c-9e5b-7d9f1b3d5f7a",
                "amount": "300"
            }
        }


class TopUpResellerCommandDTO(BaseModel):
    """Command DTO for ISP -> reseller balance recharge"""

    reseller_id: str
    amount: Decimal = Field(..., gt=0)
    description: Optional[str] = None


class ResellerRechargeCustomerCommandDTO(BaseModel):
    """
    Command DTO for a reseller paying a customer's renewal from its own balance

    Used as input to RechargeCustomerFromReseller use case.
    """

    reseller_id: str = Field(..., description="Paying reseller")
    customer_id: str = Field(..., description="Customer to recharge (same tenant)")
    amount: Decimal = Field(..., gt=0, description="Charged to the reseller balance")
    months: int = Field(default=1, ge=1)
    validity_days: Optional[int] = Field(default=None, ge=1, description="Days per month (default from config)")
    recharge_date: Optional[date] = Field(default=None, description="Defaults to today")

    class Config:
        json_schema_extra = {
            "example": {
                "reseller_id": "9e1d7c3b-5a2f-4e6d-8b0c-1f2a3b4c5d6e",
                "customer_id": "c7d9e1f3-5a6b-4c8d-9e0f-1a2b3c4d5e6f",
                "amount": "500",
                "months": 1
            }
        }


class ResellerTransactionDTO(BaseModel):
    id: str
    reseller_id: str
    type: str
    amount: Decimal
    balance_before: Decimal
    balance_after: Decimal
    from_reseller_id: Optional[str] = None
    to_reseller_id: Optional[str] = None
    customer_id: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime


class TransferResponseDTO(BaseModel):
    """
    Response DTO for reseller transfers

    Holds both transaction rows; each balance_after is that reseller's
    post-transfer balance.
    """

    reseller_id: str
    sub_reseller_id: str
    amount: Decimal
    reseller_balance: Decimal
    sub_reseller_balance: Decimal
    reseller_transaction: ResellerTransactionDTO
    sub_reseller_transaction: ResellerTransactionDTO


class ListResellerTransactionsResponseDTO(BaseModel):
    reseller_id: str
    transactions: List[ResellerTransactionDTO]
    total: int
    limit: int
    offset: int


class ResellerRechargeCustomerResponseDTO(BaseModel):
    """Reseller balance after paying, its customer_payment row and the completed recharge"""

    reseller_id: str
    reseller_balance: Decimal
    reseller_transaction: ResellerTransactionDTO
    recharge: RechargeResponseDTO
