"""ListPartyLedger Use Case

Paginated history of a party's balance changes.
"""

from libs.result import Result, Return, Error
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.domain.party import PartyKind
from .dtos import LedgerEntryDTO, ListPartyLedgerResponseDTO


class ListPartyLedger:

    def __init__(self, party_repo: PartyRepository, ledger_repo: PartyLedgerRepository):
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo

    async def execute(
        self,
        kind: PartyKind,
        party_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> Result[ListPartyLedgerResponseDTO]:
        try:
            party = await self.party_repo.get_by_id(kind, party_id)

            if not party:
                return Return.err(
                    Error(
                        code="PARTY_NOT_FOUND",
                        message=f"{kind.value.capitalize()} {party_id} not found",
                    )
                )

            entries = await self.ledger_repo.list_by_party(kind, party_id, limit=limit, offset=offset)
            total = await self.ledger_repo.count_by_party(kind, party_id)

            return Return.ok(
                ListPartyLedgerResponseDTO(
                    party_id=party_id,
                    kind=kind.value,
                    entries=[
                        LedgerEntryDTO(
                            id=entry.id,
                            entry_type=entry.entry_type.value,
                            amount=entry.amount,
                            balance_before=entry.balance_before,
                            balance_after=entry.balance_after,
                            reference_type=entry.reference_type,
                            reference_id=entry.reference_id,
                            created_at=entry.created_at,
                        )
                        for entry in entries
                    ],
                    total=total,
                    limit=limit,
                    offset=offset,
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_LEDGER_FAILED",
                    message="Failed to list party ledger",
                    reason=str(e),
                )
            )
