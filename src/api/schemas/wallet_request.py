"""Request schemas for Customer Wallet API"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.wallet_transaction import WalletTransactionType


class WalletTransactionRequestSchema(BaseModel):
    """Used for POST /wallet/{customer_id}/transactions"""

    transaction_type: WalletTransactionType = Field(..., description="topup, bonus or withdraw")
    amount: Decimal = Field(..., gt=0)
    notes: Optional[str] = None
    processed_by: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {"transaction_type": "topup", "amount": "200", "notes": "Counter top-up"}
        }
