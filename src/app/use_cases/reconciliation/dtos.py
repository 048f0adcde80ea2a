"""Data Transfer Objects for Balance Reconciliation"""

from datetime import datetime
from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field, computed_field


class PartyBalanceDiscrepancyDTO(BaseModel):
    """
    A party whose cached balance differs from its ledger sum
    """

    tenant_id: str
    party_kind: str
    party_id: str
    party_name: str
    cached_balance: Decimal = Field(..., description="Balance stored on the party row")
    ledger_balance: Decimal = Field(..., description="Sum of the party's ledger entries")
    difference: Decimal = Field(..., description="cached_balance - ledger_balance")


class InvoiceDiscrepancyDTO(BaseModel):
    """
    An invoice whose due amount or status disagrees with its totals
    """

    tenant_id: str
    invoice_id: str
    invoice_number: str
    total_amount: Decimal
    paid_amount: Decimal
    due_amount: Decimal
    expected_due_amount: Decimal
    payment_status: str
    expected_payment_status: str


class ReconciliationReportDTO(BaseModel):
    """
    Result of one reconciliation run

    Returned by ReconcileBalances use case.
    """

    parties_checked: int
    invoices_checked: int
    party_discrepancies: List[PartyBalanceDiscrepancyDTO] = Field(default_factory=list)
    invoice_discrepancies: List[InvoiceDiscrepancyDTO] = Field(default_factory=list)
    reconciliation_time: datetime
    execution_time_ms: int

    @computed_field
    @property
    def discrepancies_found(self) -> int:
        return len(self.party_discrepancies) + len(self.invoice_discrepancies)
