"""Customer recharge use cases"""
from .recharge_customer import RechargeCustomer
from .bulk_recharge_customers import BulkRechargeCustomers
from .mark_recharge_paid import MarkRechargePaid
from .verify_manual_recharge import VerifyManualRecharge
from .reject_manual_recharge import RejectManualRecharge
from .list_recharges import ListRecharges
from .dtos import (
    RechargeCustomerCommandDTO,
    BulkRechargeCommandDTO,
    MarkRechargePaidCommandDTO,
    VerifyManualRechargeCommandDTO,
    RejectManualRechargeCommandDTO,
    RechargeResponseDTO,
    BulkRechargeItemResultDTO,
    BulkRechargeResponseDTO,
    ListRechargesQueryDTO,
    ListRechargesResponseDTO,
)

__all__ = [
    "RechargeCustomer",
    "BulkRechargeCustomers",
    "MarkRechargePaid",
    "VerifyManualRecharge",
    "RejectManualRecharge",
    "ListRecharges",
    "RechargeCustomerCommandDTO",
    "BulkRechargeCommandDTO",
    "MarkRechargePaidCommandDTO",
    "VerifyManualRechargeCommandDTO",
    "RejectManualRechargeCommandDTO",
    "RechargeResponseDTO",
    "BulkRechargeItemResultDTO",
    "BulkRechargeResponseDTO",
    "ListRechargesQueryDTO",
    "ListRechargesResponseDTO",
]
