"""ListInvoicePayments Use Case

Payments recorded against one invoice, through their allocations.
"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.payment_repository import PaymentAllocationRepository
from .dtos import InvoicePaymentDTO


class ListInvoicePayments:

    def __init__(
        self,
        invoice_repo: InvoiceRepository,
        allocation_repo: PaymentAllocationRepository,
    ):
        self.invoice_repo = invoice_repo
        self.allocation_repo = allocation_repo

    async def execute(self, invoice_id: int) -> Result[List[InvoicePaymentDTO]]:
        invoice = await self.invoice_repo.get_by_id(invoice_id)
        if not invoice:
            return Return.err(
                Error(
                    code="INVOICE_NOT_FOUND",
                    message=f"Invoice with ID {invoice_id} not found",
                )
            )

        rows = await self.allocation_repo.get_by_invoice_id(invoice_id)
        return Return.ok(
            [
                InvoicePaymentDTO(
                    allocation_id=allocation.id,
                    payment_id=payment.id,
                    amount=allocation.amount,
                    payment_date=payment.payment_date,
                    payment_method=payment.payment_method,
                    transaction_id=payment.transaction_id,
                    notes=payment.notes,
                )
                for allocation, payment in rows
            ]
        )
