"""PDF Generation Service Interface

Defines the contract for PDF generation operations.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice import Invoice
from src.domain.invoice_line import InvoiceLine
from src.domain.party import Party


class PdfService(ABC):
    """
    Service interface for PDF generation

    Renders purchase bills and sales invoices.
    """

    @abstractmethod
    def generate_invoice(
        self,
        invoice: Invoice,
        invoice_lines: List[InvoiceLine],
        party: Party,
        company_name: str,
        company_address: str,
        currency_symbol: str,
    ) -> bytes:
        """
        Generate an invoice/bill PDF

        Args:
            invoice: Invoice entity with totals and payment status
            invoice_lines: Line items of the invoice
            party: Provider or client the document is addressed to
            company_name: Company name to display on the document
            company_address: Company address to display on the document
            currency_symbol: Symbol printed before amounts

        Returns:
            PDF document as bytes
        """
        pass
