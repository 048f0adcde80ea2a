from typing import Optional
from src.domain.invoice import Invoice
from src.domain.party import Party, balance_of
from src.domain.payment import Payment
from .dtos import PaymentResponseDTO


def to_payment_response(
    payment: Payment,
    invoice: Optional[Invoice] = None,
    party: Optional[Party] = None,
) -> PaymentResponseDTO:
    return PaymentResponseDTO(
        id=payment.id,
        tenant_id=payment.tenant_id,
        payment_type=payment.payment_type.value,
        payment_number=payment.payment_number,
        invoice_id=payment.invoice_id,
        party_kind=payment.party_kind.value,
        party_id=payment.party_id,
        amount=payment.amount,
        payment_method=payment.payment_method,
        payment_date=payment.payment_date,
        handled_by=payment.handled_by,
        remarks=payment.remarks,
        status=payment.status,
        created_at=payment.created_at,
        updated_at=payment.updated_at,
        invoice_paid_amount=invoice.paid_amount if invoice else None,
        invoice_due_amount=invoice.due_amount if invoice else None,
        invoice_payment_status=invoice.payment_status.value if invoice else None,
        party_balance=balance_of(party) if party else None,
    )
