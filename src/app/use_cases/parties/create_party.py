"""CreateParty Use Case

Registers a provider, client, reseller or customer with an optional
opening balance.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.party_repository import PartyRepository
from src.app.repositories.party_ledger_repository import PartyLedgerRepository
from src.app.use_cases.balance_posting import post_balance_change
from src.domain.party import PartyKind, Party, Provider, Client, Reseller, Customer
from src.domain.party_ledger_entry import LedgerEntryType
from .dtos import CreatePartyCommandDTO, PartyResponseDTO
from .mappers import to_party_response

logger = logging.getLogger(__name__)


class CreateParty:
    """
    Use Case: Create a trading party

    Business Rules:
    1. A sub-reseller's parent must exist in the same tenant
    2. A sub-reseller sits one level below its parent
    3. A non-zero opening balance is posted through the party ledger

    Flow:
    1. Validate parent reseller (resellers only)
    2. Build and insert the party with a zero balance
    3. Post the opening balance
    4. Commit transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        party_repo: PartyRepository,
        ledger_repo: PartyLedgerRepository,
    ):
        self.uow = uow
        self.party_repo = party_repo
        self.ledger_repo = ledger_repo

    async def execute(self, command: CreatePartyCommandDTO) -> Result[PartyResponseDTO]:
        try:
            # Step 1: Resolve the parent reseller
            level = 1
            if command.kind == PartyKind.RESELLER and command.parent_id:
                parent = await self.party_repo.get_by_id(PartyKind.RESELLER, command.parent_id)
                if not parent or parent.tenant_id != command.tenant_id:
                    return Return.err(
                        Error(
                            code="PARENT_RESELLER_NOT_FOUND",
                            message=f"Parent reseller {command.parent_id} not found",
                            reason="Sub-resellers must belong to an existing reseller of the same tenant",
                        )
                    )
                level = parent.level + 1

            # Step 2: Insert party
            party = await self.party_repo.create(self._build(command, level))

            # Step 3: Opening balance
            if command.opening_balance > 0:
                await post_balance_change(
                    self.party_repo,
                    self.ledger_repo,
                    party,
                    command.opening_balance,
                    LedgerEntryType.OPENING_BALANCE,
                )

            # Step 4: Commit transaction
            await self.uow.commit()

            logger.info(f"Created {command.kind.value} {party.id} for tenant {command.tenant_id}")
            return Return.ok(to_party_response(party))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create {command.kind.value}: {e}")
            return Return.err(
                Error(
                    code="CREATE_PARTY_FAILED",
                    message="Failed to create party",
                    reason=str(e),
                )
            )

    def _build(self, command: CreatePartyCommandDTO, level: int) -> Party:
        common = dict(
            tenant_id=command.tenant_id,
            name=command.name,
            phone=command.phone,
            email=command.email,
        )
        if command.kind == PartyKind.PROVIDER:
            return Provider(company_name=command.company_name, contact_person=command.contact_person, **common)
        if command.kind == PartyKind.CLIENT:
            return Client(company_name=command.company_name, contact_person=command.contact_person, **common)
        if command.kind == PartyKind.RESELLER:
            return Reseller(
                parent_id=command.parent_id,
                level=level,
                can_transfer_balance=command.can_transfer_balance,
                can_recharge_customers=command.can_recharge_customers,
                **common,
            )
        return Customer(
            customer_code=command.customer_code,
            expiry_date=command.expiry_date,
            monthly_bill=command.monthly_bill,
            **common,
        )
