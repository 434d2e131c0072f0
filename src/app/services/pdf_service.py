"""PDF Generation Service Interface

Defines the contract for rendering invoices as PDF documents.
"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.client import Client
from src.domain.invoice import Invoice
from src.domain.invoice_item import InvoiceItem


class PdfService(ABC):
    """
    Service interface for PDF generation
    """

    @abstractmethod
    def generate_invoice(
        self,
        invoice: Invoice,
        items: List[InvoiceItem],
        client: Client,
        company_name: str,
        company_address: str = "",
        currency: str = "USD",
    ) -> bytes:
        """
        Render an invoice as a PDF

        Args:
            invoice: Invoice with totals and dates
            items: Line items of the invoice
            client: Billed client
            company_name: Issuer name printed in the header
            company_address: Issuer address printed under the name
            currency: Currency code printed next to amounts

        Returns:
            PDF document as bytes
        """
        pass
