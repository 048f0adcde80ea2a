"""Data Transfer Objects for Customer Wallet Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field
from src.domain.wallet_transaction import WalletTransactionType


class RecordWalletTransactionCommandDTO(BaseModel):
    """
    Command DTO for a manual wallet movement

    topup and bonus credit the wallet, withdraw debits it.
    """

    customer_id: str = Field(..., description="Customer whose wallet moves")
    transaction_type: WalletTransactionType = Field(..., description="topup, bonus or withdraw")
    amount: Decimal = Field(..., gt=0, description="Unsigned amount (must be > 0)")
    notes: Optional[str] = Field(default=None)
    processed_by: Optional[str] = Field(default=None)

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": "c7d9e1f3-5a6b-4c8d-9e0f-1a2b3c4d5e6f",
                "transaction_type": "topup",
                "amount": "250",
                "notes": "bKash top-up"
            }
        }


class WalletTransactionDTO(BaseModel):
    id: str
    customer_id: str
    transaction_type: str
    amount: Decimal
    balance_after: Decimal
    status: str
    notes: Optional[str] = None
    reference_id: Optional[str] = None
    processed_by: Optional[str] = None
    processed_at: datetime


class ListWalletTransactionsResponseDTO(BaseModel):
    customer_id: str
    wallet_balance: Decimal
    transactions: List[WalletTransactionDTO]
    limit: int
    offset: int
