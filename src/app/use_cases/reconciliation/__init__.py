"""Balance reconciliation use cases"""
from .dtos import (
    PartyBalanceDiscrepancyDTO,
    InvoiceDiscrepancyDTO,
    ReconciliationReportDTO,
)
from .reconcile_balances import ReconcileBalances

__all__ = [
    "ReconcileBalances",
    "PartyBalanceDiscrepancyDTO",
    "InvoiceDiscrepancyDTO",
    "ReconciliationReportDTO",
]
