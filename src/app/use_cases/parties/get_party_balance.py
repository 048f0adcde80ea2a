"""GetPartyBalance Use Case

Returns a party's cached balance alongside the sum of its ledger entries.
"""

from libs.result import Result, Return, Error
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.domain.base import money
from src.domain.party import PartyKind, balance_of
from .dtos import PartyBalanceResponseDTO


class GetPartyBalance:
    """
    Use Case: Get party balance

    Read-only; does not lock the party.
    """

    def __init__(self, party_repo: PartyRepository, ledger_repo: PartyLedgerRepository):
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo

    async def execute(self, kind: PartyKind, party_id: str) -> Result[PartyBalanceResponseDTO]:
        try:
            party = await self.party_repo.get_by_id(kind, party_id)

            if not party:
                return Return.err(
                    Error(
                        code="PARTY_NOT_FOUND",
                        message=f"{kind.value.capitalize()} {party_id} not found",
                    )
                )

            balance = money(balance_of(party))
            ledger_balance = money(await self.ledger_repo.get_sum(kind, party_id))

            return Return.ok(
                PartyBalanceResponseDTO(
                    party_id=party.id,
                    tenant_id=party.tenant_id,
                    kind=kind.value,
                    balance=balance,
                    ledger_balance=ledger_balance,
                    in_sync=balance == ledger_balance,
                    updated_at=party.updated_at,
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_BALANCE_FAILED",
                    message="Failed to retrieve party balance",
                    reason=str(e),
                )
            )
