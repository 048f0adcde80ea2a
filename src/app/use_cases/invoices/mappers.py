from decimal import Decimal
from typing import List, Optional
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from .dtos import InvoiceResponseDTO, InvoiceLineDTO


def to_line_dto(line: InvoiceLine) -> InvoiceLineDTO:
    return InvoiceLineDTO(
        id=line.id,
        item_id=line.item_id,
        item_name=line.item_name,
        description=line.description,
        unit=line.unit,
        quantity=line.quantity,
        rate=line.rate,
        vat_percent=line.vat_percent,
        vat_amount=line.vat_amount,
        from_date=line.from_date,
        to_date=line.to_date,
        total=line.total,
    )


def to_invoice_response(
    invoice: Invoice,
    lines: Optional[List[InvoiceLine]] = None,
    party_balance: Optional[Decimal] = None,
) -> InvoiceResponseDTO:
    return InvoiceResponseDTO(
        id=invoice.id,
        tenant_id=invoice.tenant_id,
        document_type=invoice.document_type.value,
        invoice_number=invoice.invoice_number,
        party_kind=invoice.party_kind.value,
        party_id=invoice.party_id,
        billing_date=invoice.billing_date,
        due_date=invoice.due_date,
        from_date=invoice.from_date,
        to_date=invoice.to_date,
        subtotal=invoice.subtotal,
        vat_amount=invoice.vat_amount,
        discount=invoice.discount,
        total_amount=invoice.total_amount,
        paid_amount=invoice.paid_amount,
        due_amount=invoice.due_amount,
        payment_status=invoice.payment_status.value,
        remarks=invoice.remarks,
        created_by=invoice.created_by,
        created_at=invoice.created_at,
        updated_at=invoice.updated_at,
        lines=[to_line_dto(line) for line in (lines or [])],
        party_balance=party_balance,
    )
