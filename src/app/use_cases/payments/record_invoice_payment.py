"""RecordInvoicePayment Use Case

Single-invoice payment entry point kept for older clients of the API.
The payment is routed through RegisterPayment so it follows the same
allocation and credit rules.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.invoice_repository import InvoiceRepository
from .dtos import InvoiceAllocationDTO, RegisterPaymentCommandDTO, RegisterPaymentResponseDTO
from .register_payment import RegisterPayment


class RecordInvoicePayment:
    """
    Use Case: Record a payment against one invoice

    The full amount is requested for the invoice; anything above the
    invoice's amount due becomes client credit.
    """

    def __init__(self, invoice_repo: InvoiceRepository, register_payment: RegisterPayment):
        self.invoice_repo = invoice_repo
        self.register_payment = register_payment

    async def execute(
        self,
        invoice_id: int,
        amount: Optional[Decimal],
        payment_date: Optional[date],
        payment_method: Optional[str],
        transaction_id: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Result[RegisterPaymentResponseDTO]:
        invoice = await self.invoice_repo.get_by_id(invoice_id)
        if not invoice:
            return Return.err(
                Error(
                    code="INVOICE_NOT_FOUND",
                    message=f"Invoice with ID {invoice_id} not found",
                )
            )

        allocations = []
        if amount is not None:
            allocations.append(InvoiceAllocationDTO(invoice_id=invoice.id, amount=amount))

        return await self.register_payment.execute(
            RegisterPaymentCommandDTO(
                client_id=invoice.client_id,
                amount=amount,
                payment_date=payment_date,
                payment_method=payment_method,
                transaction_id=transaction_id,
                notes=notes,
                invoice_allocations=allocations,
            )
        )
