"""GetUnpaidInvoices Use Case

Lists a client's invoices that still have an amount due, oldest due date first.
"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import UnpaidInvoiceDTO


class GetUnpaidInvoices:
    """
    Read-only use case backing the payment allocation form
    """

    def __init__(self, invoice_repo: InvoiceRepository):
        self.invoice_repo = invoice_repo

    async def execute(self, client_id: int) -> Result[List[UnpaidInvoiceDTO]]:
        try:
            invoices = await self.invoice_repo.get_unpaid_by_client(client_id)
            return Return.ok(
                [
                    UnpaidInvoiceDTO(
                        id=invoice.id,
                        invoice_number=invoice.invoice_number,
                        client_id=invoice.client_id,
                        issue_date=invoice.issue_date,
                        due_date=invoice.due_date,
                        subtotal=invoice.subtotal,
                        tax=invoice.tax,
                        total=invoice.total,
                        amount_paid=invoice.amount_paid,
                        amount_due=invoice.amount_due,
                        status=invoice.status.value,
                    )
                    for invoice in invoices
                ]
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="GET_UNPAID_INVOICES_FAILED",
                    message="Failed to get unpaid invoices",
                    reason=str(e),
                )
            )
