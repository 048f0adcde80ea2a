"""SQLAlchemy implementation of PartyLedgerRepository

Append-only persistence for party ledger entries.
"""

from decimal import Decimal
from typing import List
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.domain.party import PartyKind
from src.domain.party_ledger_entry import PartyLedgerEntry


class SqlAlchemyPartyLedgerRepository(PartyLedgerRepository):
    """SQLAlchemy implementation of PartyLedgerRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, entry: PartyLedgerEntry) -> PartyLedgerEntry:
        self.session.add(entry)
        await self.session.flush()
        await self.session.refresh(entry)
        return entry

    async def get_sum(self, kind: PartyKind, party_id: str) -> Decimal:
        """
        Sum of all entry amounts for a party

        Args:
            kind: Party kind
            party_id: Party identifier

        Returns:
            Sum of amounts, Decimal("0") when the party has no entries
        """
        stmt = select(func.coalesce(func.sum(PartyLedgerEntry.amount), 0)).where(
            PartyLedgerEntry.party_kind == kind,
            PartyLedgerEntry.party_id == party_id,
        )
        result = await self.session.execute(stmt)
        total = result.scalar()
        return Decimal(str(total or 0))

    async def get_sum_by_reference(self, reference_type: str, reference_id: str) -> Decimal:
        stmt = select(func.coalesce(func.sum(PartyLedgerEntry.amount), 0)).where(
            PartyLedgerEntry.reference_type == reference_type,
            PartyLedgerEntry.reference_id == reference_id,
        )
        result = await self.session.execute(stmt)
        return Decimal(str(result.scalar() or 0))

    async def list_by_party(
        self,
        kind: PartyKind,
        party_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> List[PartyLedgerEntry]:
        stmt = (
            select(PartyLedgerEntry)
            .where(
                PartyLedgerEntry.party_kind == kind,
                PartyLedgerEntry.party_id == party_id,
            )
            .order_by(PartyLedgerEntry.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_party(self, kind: PartyKind, party_id: str) -> int:
        stmt = select(func.count()).select_from(PartyLedgerEntry).where(
            PartyLedgerEntry.party_kind == kind,
            PartyLedgerEntry.party_id == party_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
