"""Wallet Service Interface

Customer wallet debits requested while verifying a manual recharge.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class WalletDebitResult:
    """Outcome of a wallet debit request"""
    success: bool
    error: Optional[str] = None
    balance_after: Optional[Decimal] = None


class WalletService(ABC):
    """
    Service interface for debiting a customer's prepaid wallet

    Implementations:
    - SQL (same session, joins the caller's transaction)
    - HTTP (remote wallet RPC)
    """

    @abstractmethod
    async def debit(
        self,
        customer_id: str,
        amount: Decimal,
        notes: str,
        reference_id: Optional[str] = None,
    ) -> WalletDebitResult:
        """
        Debit a customer's wallet

        Args:
            customer_id: Customer whose wallet is debited
            amount: Amount to debit (> 0)
            notes: Free text stored with the wallet movement
            reference_id: ID of the document that caused the debit

        Returns:
            WalletDebitResult; success=False carries a human-readable error
        """
        pass
