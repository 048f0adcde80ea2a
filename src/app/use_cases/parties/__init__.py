"""Party use cases"""
from .create_party import CreateParty
from .get_party_balance import GetPartyBalance
from .list_party_ledger import ListPartyLedger
from .dtos import (
    CreatePartyCommandDTO,
    PartyResponseDTO,
    PartyBalanceResponseDTO,
    LedgerEntryDTO,
    ListPartyLedgerResponseDTO,
)

__all__ = [
    "CreateParty",
    "GetPartyBalance",
    "ListPartyLedger",
    "CreatePartyCommandDTO",
    "PartyResponseDTO",
    "PartyBalanceResponseDTO",
    "LedgerEntryDTO",
    "ListPartyLedgerResponseDTO",
]
