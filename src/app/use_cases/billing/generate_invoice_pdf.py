"""GenerateInvoicePdf Use Case

Renders an invoice with its line items as a PDF document.
"""

from libs.result import Result, Return, Error
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.invoice_item_repository import InvoiceItemRepository
from src.app.services.pdf_service import PdfService
from .dtos import InvoiceDocumentDTO


class GenerateInvoicePdf:
    """
    Use Case: Render invoice PDF

    Flow:
    1. Retrieve invoice by ID
    2. Retrieve billed client and line items
    3. Render PDF using PDF service
    """

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        invoice_item_repo: InvoiceItemRepository,
        client_repo: ClientRepository,
        pdf_service: PdfService,
        company_name: str,
        company_address: str = "",
        currency: str = "USD",
    ):
        self.invoice_repo = invoice_repo
        self.invoice_item_repo = invoice_item_repo
        self.client_repo = client_repo
        self.pdf_service = pdf_service
        self.company_name = company_name
        self.company_address = company_address
        self.currency = currency

    async def execute(self, invoice_id: int) -> Result[InvoiceDocumentDTO]:
        try:
            invoice = await self.invoice_repo.get_by_id(invoice_id)
            if not invoice:
                return Return.err(
                    Error(
                        code="INVOICE_NOT_FOUND",
                        message=f"Invoice with ID {invoice_id} not found",
                    )
                )

            client = await self.client_repo.get_by_id(invoice.client_id)
            items = await self.invoice_item_repo.get_by_invoice_id(invoice_id)

            pdf_bytes = self.pdf_service.generate_invoice(
                invoice=invoice,
                items=items,
                client=client,
                company_name=self.company_name,
                company_address=self.company_address,
                currency=self.currency,
            )

            return Return.ok(
                InvoiceDocumentDTO(
                    invoice_id=invoice.id,
                    invoice_number=invoice.invoice_number,
                    pdf=pdf_bytes,
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GENERATE_INVOICE_PDF_FAILED",
                    message="Failed to generate invoice PDF",
                    reason=str(e),
                )
            )
