"""SQLAlchemy implementation of PartyRepository

Provides persistence for all party kinds with pessimistic locking support
so that balance read-modify-write cycles cannot interleave.
"""

from typing import Optional, List
from datetime import datetime
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.party_repository import PartyRepository
from src.domain.party import Party, PartyKind, PARTY_MODELS


class SqlAlchemyPartyRepository(PartyRepository):
    """
    SQLAlchemy implementation of PartyRepository

    Features:
    - One repository over the four party tables (selected by PartyKind)
    - Pessimistic locking via SELECT FOR UPDATE
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, kind: PartyKind, party_id: str, for_update: bool = False) -> Optional[Party]:
        """
        Retrieve a party by ID with optional row-level locking

        Args:
            kind: Party kind
            party_id: Party identifier
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Party if found, None otherwise
        """
        model = PARTY_MODELS[kind]
        stmt = select(model).where(model.id == party_id)

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, party: Party) -> Party:
        self.session.add(party)
        await self.session.flush()
        await self.session.refresh(party)
        return party

    async def update(self, party: Party) -> Party:
        """
        Persist party changes

        Note:
            Should be called within a transaction with the party already locked
        """
        party.updated_at = datetime.utcnow()
        self.session.add(party)
        await self.session.flush()
        return party

    async def list_by_kind(self, kind: PartyKind, tenant_id: Optional[str] = None) -> List[Party]:
        model = PARTY_MODELS[kind]
        stmt = select(model)

        if tenant_id:
            stmt = stmt.where(model.tenant_id == tenant_id)

        stmt = stmt.order_by(model.created_at)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
