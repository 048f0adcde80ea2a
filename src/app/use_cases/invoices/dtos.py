"""Data Transfer Objects for Invoice Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional, List
from pydantic import BaseModel, Field
from src.domain.invoice import DocumentType, PaymentStatus


class InvoiceLineInputDTO(BaseModel):
    """Line item supplied when creating an invoice"""

    item_id: Optional[str] = Field(default=None, description="Catalogue item the line is priced from")
    item_name: str = Field(..., min_length=1, description="Item or service name")
    description: Optional[str] = Field(default=None)
    unit: Optional[str] = Field(default=None, description="Unit of measure (e.g. Mbps)")
    quantity: Decimal = Field(..., gt=0, description="Quantity (must be > 0)")
    rate: Decimal = Field(..., ge=0, description="Price per unit")
    vat_percent: Decimal = Field(default=Decimal("0"), ge=0, le=100, description="VAT percentage")
    from_date: Optional[date] = Field(default=None)
    to_date: Optional[date] = Field(default=None)


class CreateInvoiceCommandDTO(BaseModel):
    """
    Command DTO for creating a purchase bill or sales invoice

    Used as input to CreateInvoice use case.
    subtotal, vat_amount and total_amount are computed from the lines
    when omitted.
    """

    tenant_id: str = Field(..., description="Tenant identifier")
    document_type: DocumentType = Field(..., description="purchase_bill (provider) or sales_invoice (client)")
    party_id: str = Field(..., description="Provider ID for bills, client ID for invoices")
    billing_date: date = Field(default_factory=date.today)
    due_date: Optional[date] = Field(default=None)
    from_date: Optional[date] = Field(default=None, description="Service period start")
    to_date: Optional[date] = Field(default=None, description="Service period end")
    lines: List[InvoiceLineInputDTO] = Field(default_factory=list)
    subtotal: Optional[Decimal] = Field(default=None, ge=0)
    vat_amount: Optional[Decimal] = Field(default=None, ge=0)
    discount: Decimal = Field(default=Decimal("0"), ge=0)
    total_amount: Optional[Decimal] = Field(default=None)
    paid_amount: Decimal = Field(default=Decimal("0"), ge=0, description="Amount settled at creation")
    remarks: Optional[str] = Field(default=None)
    created_by: Optional[str] = Field(default=None)

    class Config:
        json_schema_extra = {
            "example": {
                "tenant_id": "tenant_isp01",
                "document_type": "purchase_bill",
                "party_id": "a4c2e1f0-1111-4a2b-8c3d-0e9f8a7b6c5d",
                "billing_date": "2024-01-01",
                "lines": [
                    {"item_name": "IIG Bandwidth", "unit": "Mbps", "quantity": "100", "rate": "100"}
                ],
                "paid_amount": "0"
            }
        }


class InvoiceLineDTO(BaseModel):
    id: str
    item_id: Optional[str] = None
    item_name: str
    description: Optional[str] = None
    unit: Optional[str] = None
    quantity: Decimal
    rate: Decimal
    vat_percent: Decimal
    vat_amount: Decimal
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    total: Decimal


class InvoiceResponseDTO(BaseModel):
    """
    Response DTO for invoice operations

    Returned by CreateInvoice, GetInvoice and ListInvoices.
    """

    id: str
    tenant_id: str
    document_type: str
    invoice_number: str
    party_kind: str
    party_id: str
    billing_date: date
    due_date: Optional[date] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    subtotal: Decimal
    vat_amount: Decimal
    discount: Decimal
    total_amount: Decimal
    paid_amount: Decimal
    due_amount: Decimal
    payment_status: str
    remarks: Optional[str] = None
    created_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    lines: List[InvoiceLineDTO] = Field(default_factory=list)
    party_balance: Optional[Decimal] = Field(
        default=None,
        description="Party balance after the operation (mutating operations only)"
    )


class ListInvoicesResponseDTO(BaseModel):
    invoices: List[InvoiceResponseDTO]
    total: int
    limit: int
    offset: int


class ListInvoicesQueryDTO(BaseModel):
    """Query DTO for listing invoices"""

    tenant_id: str
    document_type: Optional[DocumentType] = None
    party_id: Optional[str] = None
    payment_status: Optional[PaymentStatus] = None
    limit: int = Field(default=20, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class DeleteInvoiceCommandDTO(BaseModel):
    invoice_id: str
    actor: Optional[str] = Field(default=None, description="Who performed the delete")


class DeleteInvoiceResponseDTO(BaseModel):
    """Response DTO for DeleteInvoice"""

    invoice_id: str
    invoice_number: str
    deleted_payments: int = Field(..., description="Number of payments removed with the invoice")
    balance_reversed: Decimal = Field(..., description="Amount removed from the party balance")
    party_balance: Decimal


class InvoicePdfResponseDTO(BaseModel):
    """Response DTO for GenerateInvoicePdf"""

    invoice_id: str
    invoice_number: str
    document_type: str
    pdf_base64: str = Field(..., description="PDF document, base64 encoded")
    generated_at: datetime
