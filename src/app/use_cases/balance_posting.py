"""Party balance posting

Every change to a cached party balance goes through post_balance_change(),
which writes the new cached value and appends the matching ledger entry
in the caller's unit of work.
"""

from decimal import Decimal
from typing import Optional
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.domain.base import money
from src.domain.party import Party, FLOORED_KINDS, party_kind_of, balance_of, set_balance
from src.domain.party_ledger_entry import PartyLedgerEntry, LedgerEntryType


async def post_balance_change(
    party_repo: PartyRepository,
    ledger_repo: PartyLedgerRepository,
    party: Party,
    delta: Decimal,
    entry_type: LedgerEntryType,
    reference_type: Optional[str] = None,
    reference_id: Optional[str] = None,
) -> Optional[PartyLedgerEntry]:
    """
    Apply a signed delta to a party's cached balance

    Payable/receivable balances (provider, client, customer) are floored at
    zero; the ledger entry records the delta that was actually applied so
    that the ledger sum keeps matching the cached balance.

    Args:
        party_repo: Repository used to persist the party
        ledger_repo: Repository used to append the ledger entry
        party: Party entity, already locked by the caller
        delta: Requested signed change
        entry_type: Reason for the change
        reference_type: Type of the causing document (e.g. "invoice", "payment")
        reference_id: ID of the causing document

    Returns:
        The appended PartyLedgerEntry, or None when the applied delta is zero
    """
    kind = party_kind_of(party)
    balance_before = money(balance_of(party))
    balance_after = balance_before + money(delta)

    if kind in FLOORED_KINDS:
        balance_after = max(Decimal("0.00"), balance_after)

    applied = balance_after - balance_before
    if applied == 0:
        return None

    set_balance(party, balance_after)
    await party_repo.update(party)

    entry = PartyLedgerEntry(
        tenant_id=party.tenant_id,
        party_kind=kind,
        party_id=party.id,
        entry_type=entry_type,
        amount=applied,
        balance_before=balance_before,
        balance_after=balance_after,
        reference_type=reference_type,
        reference_id=reference_id,
    )
    return await ledger_repo.create(entry)
