"""Payment use cases"""
from .record_payment import RecordPayment
from .edit_payment import EditPayment
from .delete_payment import DeletePayment
from .list_payments import ListPayments
from .dtos import (
    RecordPaymentCommandDTO,
    EditPaymentCommandDTO,
    DeletePaymentCommandDTO,
    PaymentResponseDTO,
    DeletePaymentResponseDTO,
    ListPaymentsQueryDTO,
    ListPaymentsResponseDTO,
)

__all__ = [
    "RecordPayment",
    "EditPayment",
    "DeletePayment",
    "ListPayments",
    "RecordPaymentCommandDTO",
    "EditPaymentCommandDTO",
    "DeletePaymentCommandDTO",
    "PaymentResponseDTO",
    "DeletePaymentResponseDTO",
    "ListPaymentsQueryDTO",
    "ListPaymentsResponseDTO",
]
