from src.domain.party import Party, PartyKind, party_kind_of, balance_of
from .dtos import PartyResponseDTO


def to_party_response(party: Party) -> PartyResponseDTO:
    kind = party_kind_of(party)
    response = PartyResponseDTO(
        id=party.id,
        tenant_id=party.tenant_id,
        kind=kind.value,
        name=party.name,
        balance=balance_of(party),
        created_at=party.created_at,
        updated_at=party.updated_at,
    )
    if kind == PartyKind.RESELLER:
        response.parent_id = party.parent_id
        response.level = party.level
        response.can_transfer_balance = party.can_transfer_balance
        response.can_recharge_customers = party.can_recharge_customers
    elif kind == PartyKind.CUSTOMER:
        response.status = party.status.value
        response.expiry_date = party.expiry_date
        response.wallet_balance = party.wallet_balance
    return response
