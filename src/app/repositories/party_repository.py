"""Party Repository Interface

Defines the contract for provider/client/reseller/customer persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.party import Party, PartyKind


class PartyRepository(ABC):
    """
    Repository interface for all party kinds

    Methods use pessimistic locking (SELECT FOR UPDATE) to ensure
    consistency when a balance is read and then rewritten.
    """

    @abstractmethod
    async def get_by_id(self, kind: PartyKind, party_id: str, for_update: bool = False) -> Optional[Party]:
        """
        Retrieve a party by kind and ID

        Args:
            kind: Party kind (selects the table)
            party_id: Party identifier
            for_update: If True, lock the row with SELECT FOR UPDATE (pessimistic lock)

        Returns:
            Party entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, party: Party) -> Party:
        """
        Create a new party

        Args:
            party: Provider, Client, Reseller or Customer entity

        Returns:
            Created party
        """
        pass

    @abstractmethod
    async def update(self, party: Party) -> Party:
        """
        Persist changes to a party

        Args:
            party: Party entity with updated values (should already be locked)

        Returns:
            Updated party
        """
        pass

    @abstractmethod
    async def list_by_kind(self, kind: PartyKind, tenant_id: Optional[str] = None) -> List[Party]:
        """
        List parties of one kind

        Args:
            kind: Party kind
            tenant_id: Optional tenant filter (None = all tenants)

        Returns:
            List of parties
        """
        pass
