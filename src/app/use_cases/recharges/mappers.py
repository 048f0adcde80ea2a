from decimal import Decimal
from typing import Optional
from src.domain.customer_recharge import CustomerRecharge
from src.domain.party import Customer
from .dtos import RechargeResponseDTO


def to_recharge_response(
    recharge: CustomerRecharge,
    customer: Optional[Customer] = None,
    wallet_amount_used: Optional[Decimal] = None,
) -> RechargeResponseDTO:
    return RechargeResponseDTO(
        id=recharge.id,
        tenant_id=recharge.tenant_id,
        customer_id=recharge.customer_id,
        reseller_id=recharge.reseller_id,
        amount=recharge.amount,
        months=recharge.months,
        discount=recharge.discount,
        payment_method=recharge.payment_method,
        original_payment_method=recharge.original_payment_method,
        old_expiry=recharge.old_expiry,
        new_expiry=recharge.new_expiry,
        status=recharge.status.value,
        collected_by_type=recharge.collected_by_type,
        collected_by_name=recharge.collected_by_name,
        paid_by=recharge.paid_by,
        paid_by_name=recharge.paid_by_name,
        paid_at=recharge.paid_at,
        transaction_id=recharge.transaction_id,
        notes=recharge.notes,
        rejection_reason=recharge.rejection_reason,
        recharge_date=recharge.recharge_date,
        customer_due_amount=customer.due_amount if customer else None,
        customer_expiry_date=customer.expiry_date if customer else None,
        customer_status=customer.status.value if customer else None,
        wallet_amount_used=wallet_amount_used,
    )
