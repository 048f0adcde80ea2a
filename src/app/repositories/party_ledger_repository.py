"""Party Ledger Repository Interface"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List
from src.domain.party import PartyKind
from src.domain.party_ledger_entry import PartyLedgerEntry


class PartyLedgerRepository(ABC):
    """Repository interface for append-only party ledger entries"""

    @abstractmethod
    async def create(self, entry: PartyLedgerEntry) -> PartyLedgerEntry:
        """
        Append a ledger entry

        Args:
            entry: PartyLedgerEntry to persist

        Returns:
            Created entry
        """
        pass

    @abstractmethod
    async def get_sum(self, kind: PartyKind, party_id: str) -> Decimal:
        """
        Sum of all entry amounts for a party

        Args:
            kind: Party kind
            party_id: Party identifier

        Returns:
            Sum of amounts (Decimal("0") when no entries exist)
        """
        pass

    @abstractmethod
    async def get_sum_by_reference(self, reference_type: str, reference_id: str) -> Decimal:
        """
        Net balance change caused by one document

        A payment's entries (applied, adjusted) sum to what it actually took
        off the party balance after any floor at zero.
        """
        pass

    @abstractmethod
    async def list_by_party(
        self,
        kind: PartyKind,
        party_id: str,
        limit: int = 50,
        offset: int = 0,
    ) -> List[PartyLedgerEntry]:
        """
        List a party's entries, newest first

        Args:
            kind: Party kind
            party_id: Party identifier
            limit: Maximum number of entries
            offset: Offset for pagination

        Returns:
            List of entries
        """
        pass

    @abstractmethod
    async def count_by_party(self, kind: PartyKind, party_id: str) -> int:
        pass
