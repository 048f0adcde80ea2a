"""Wallet Service Implementations

Debits a customer's prepaid wallet either in the caller's own database
session or through a remote wallet RPC endpoint.
"""

import logging
from decimal import Decimal
from typing import Optional
import httpx
from sqlmodel.ext.asyncio.session import AsyncSession
from src.adapter.repositories.party_repository import SqlAlchemyPartyRepository
from src.adapter.repositories.wallet_transaction_repository import SqlAlchemyWalletTransactionRepository
from src.app.services.wallet_service import WalletService, WalletDebitResult
from src.domain.base import money
from src.domain.party import PartyKind
from src.domain.wallet_transaction import WalletTransaction, WalletTransactionType

logger = logging.getLogger(__name__)


class SqlAlchemyWalletService(WalletService):
    """
    Wallet service backed by the customers table

    Runs on the caller's session, so the debit commits or rolls back together
    with the recharge verification that requested it.
    """

    def __init__(self, session: AsyncSession):
        self.party_repo = SqlAlchemyPartyRepository(session)
        self.wallet_transaction_repo = SqlAlchemyWalletTransactionRepository(session)

    async def debit(
        self,
        customer_id: str,
        amount: Decimal,
        notes: str,
        reference_id: Optional[str] = None,
    ) -> WalletDebitResult:
        amount = money(amount)
        if amount <= 0:
            return WalletDebitResult(success=False, error="Debit amount must be positive")

        customer = await self.party_repo.get_by_id(PartyKind.CUSTOMER, customer_id, for_update=True)
        if not customer:
            return WalletDebitResult(success=False, error=f"Customer {customer_id} not found")

        wallet_balance = money(customer.wallet_balance)
        if wallet_balance < amount:
            return WalletDebitResult(
                success=False,
                error=f"Insufficient wallet balance: {wallet_balance} < {amount}",
            )

        customer.wallet_balance = wallet_balance - amount
        await self.party_repo.update(customer)

        await self.wallet_transaction_repo.create(
            WalletTransaction(
                tenant_id=customer.tenant_id,
                customer_id=customer.id,
                transaction_type=WalletTransactionType.RECHARGE_PAYMENT,
                amount=-amount,
                balance_after=customer.wallet_balance,
                notes=notes,
                reference_id=reference_id,
                reference_type="customer_recharge" if reference_id else None,
            )
        )

        logger.info(f"Debited {amount} from wallet of customer {customer_id}")
        return WalletDebitResult(success=True, balance_after=customer.wallet_balance)


class HttpWalletService(WalletService):
    """
    Wallet service that calls a remote wallet RPC

    POSTs {p_customer_id, p_amount, p_notes, p_reference_id} and expects a
    JSON body {"success": bool, "error": str | null}.
    """

    def __init__(self, url: str, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout

    async def debit(
        self,
        customer_id: str,
        amount: Decimal,
        notes: str,
        reference_id: Optional[str] = None,
    ) -> WalletDebitResult:
        payload = {
            "p_customer_id": customer_id,
            "p_amount": str(money(amount)),
            "p_notes": notes,
            "p_reference_id": reference_id,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.error(f"Wallet debit request for customer {customer_id} failed: {e}")
            return WalletDebitResult(success=False, error=str(e))
        except ValueError as e:
            logger.error(f"Wallet debit response for customer {customer_id} is not JSON: {e}")
            return WalletDebitResult(success=False, error="Invalid wallet service response")

        if not isinstance(data, dict) or not data.get("success"):
            error = data.get("error") if isinstance(data, dict) else None
            return WalletDebitResult(success=False, error=error or "Wallet debit rejected")

        balance_after = data.get("balance_after")
        return WalletDebitResult(
            success=True,
            balance_after=Decimal(str(balance_after)) if balance_after is not None else None,
        )


def create_wallet_service(
    session: AsyncSession,
    url: Optional[str] = None,
    timeout: float = 10.0,
) -> WalletService:
    """
    Factory function to create the configured wallet service

    Args:
        session: Current database session (used by the SQL implementation)
        url: Remote wallet RPC URL. If provided, debits go over HTTP.

    Returns:
        Configured WalletService
    """
    if url:
        return HttpWalletService(url, timeout=timeout)
    return SqlAlchemyWalletService(session)
