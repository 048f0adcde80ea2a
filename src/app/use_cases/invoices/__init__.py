"""Invoice use cases"""
from .create_invoice import CreateInvoice
from .delete_invoice import DeleteInvoice
from .get_invoice import GetInvoice
from .list_invoices import ListInvoices
from .generate_invoice_pdf import GenerateInvoicePdf
from .dtos import (
    InvoiceLineInputDTO,
    CreateInvoiceCommandDTO,
    InvoiceLineDTO,
    InvoiceResponseDTO,
    ListInvoicesQueryDTO,
    ListInvoicesResponseDTO,
    DeleteInvoiceCommandDTO,
    DeleteInvoiceResponseDTO,
    InvoicePdfResponseDTO,
)

__all__ = [
    "CreateInvoice",
    "DeleteInvoice",
    "GetInvoice",
    "ListInvoices",
    "GenerateInvoicePdf",
    "InvoiceLineInputDTO",
    "CreateInvoiceCommandDTO",
    "InvoiceLineDTO",
    "InvoiceResponseDTO",
    "ListInvoicesQueryDTO",
    "ListInvoicesResponseDTO",
    "DeleteInvoiceCommandDTO",
    "DeleteInvoiceResponseDTO",
    "InvoicePdfResponseDTO",
]
