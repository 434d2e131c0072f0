"""Data Transfer Objects for Billing Use Cases

Pydantic models for recurring invoice generation and invoice documents.
"""

from datetime import date
from typing import List, Optional
from pydantic import Field
from src.app.use_cases.dtos import CamelModel, Money


class GeneratedInvoiceDTO(CamelModel):
    """
    One invoice created by a recurring invoice run

    Serialized as {invoiceNumber, clientName, serviceName, amount}.
    """

    invoice_number: str = Field(
        ...,
        description="Generated invoice number"
    )

    client_name: str = Field(
        ...,
        description="Billed client display name"
    )

    service_name: str = Field(
        ...,
        description="Name of the billed service plan"
    )

    amount: Money = Field(
        ...,
        description="Invoice total"
    )

    invoice_id: Optional[int] = Field(default=None, exclude=True)
    client_service_id: Optional[int] = Field(default=None, exclude=True)


class RecurringInvoiceRunDTO(CamelModel):
    """
    Summary of one recurring invoice run

    Returned by GenerateRecurringInvoices.
    """

    run_date: date = Field(
        ...,
        description="Issue date used for the run"
    )

    candidates: int = Field(
        ...,
        description="Services matched by the candidate query"
    )

    skipped: int = Field(
        ...,
        description="Candidates already invoiced this month"
    )

    invoices: List[GeneratedInvoiceDTO] = Field(
        default_factory=list,
        description="Invoices created by this run"
    )

    @property
    def invoices_created(self) -> int:
        return len(self.invoices)


class GenerateRecurringInvoicesResponseDTO(CamelModel):
    """Response of POST /services/generate-recurring-invoices"""

    success: bool = True
    message: str
    invoices: List[GeneratedInvoiceDTO] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "message": "Generated 1 recurring invoice(s)",
                "invoices": [
                    {
                        "invoiceNumber": "INV-2024-000001",
                        "clientName": "Acme Corp",
                        "serviceName": "Fiber 100",
                        "amount": 29.99,
                    }
                ],
            }
        }


class InvoiceDocumentDTO(CamelModel):
    """Rendered invoice PDF"""

    invoice_id: int
    invoice_number: str
    pdf: bytes = Field(..., exclude=True)

    @property
    def filename(self) -> str:
        return f"invoice_{self.invoice_number}.pdf"
