"""RegisterPayment Use Case

Records a payment, spreads it over the invoices chosen by the caller and
banks the remainder as client credit, all in one transaction.
"""

import logging
from decimal import Decimal
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.app.repositories.invoice_repository import InvoiceRepository
from src.app.repositories.payment_repository import PaymentRepository, PaymentAllocationRepository
from src.domain.base import to_money
from src.domain.invoice import InvoiceStatus
from src.domain.payment import Payment, PaymentAllocation
from .dtos import PaymentDTO, RegisterPaymentCommandDTO, RegisterPaymentResponseDTO

logger = logging.getLogger(__name__)


class RegisterPayment:
    """
    Use Case: Register payment with invoice allocations

    Business Rules:
    1. client_id, amount, payment_date and payment_method are required; amount > 0
    2. Allocations are processed in the order given; non-positive requests are skipped
    3. Every allocated invoice must belong to the paying client
    4. An allocation is clamped to the invoice's amount due
    5. Allocations may not add up to more than the payment amount
    6. The unallocated remainder is added to the client's credit balance
    7. Invoice amount_paid, invoice status and client credit are updated on locked rows

    Flow:
    1. Validate command (no writes on failure)
    2. Lock client
    3. Create payment
    4. Allocate to each requested invoice
    5. Credit remainder
    6. Commit transaction
    7. Return response
    """

    def __init__(
        self,
        uow: UnitOfWork,
        client_repo: ClientRepository,
        invoice_repo: InvoiceRepository,
        payment_repo: PaymentRepository,
        allocation_repo: PaymentAllocationRepository,
    ):
        self.uow = uow
        self.client_repo = client_repo
        self.invoice_repo = invoice_repo
        self.payment_repo = payment_repo
        self.allocation_repo = allocation_repo

    async def execute(self, command: RegisterPaymentCommandDTO) -> Result[RegisterPaymentResponseDTO]:
        """
        Execute payment registration

        Args:
            command: RegisterPaymentCommandDTO with client, amount, date, method and allocations

        Returns:
            Result[RegisterPaymentResponseDTO]: Payment with allocation totals or error
        """
        # Step 1: Validate before touching the database
        validation_error = self._validate(command)
        if validation_error:
            return Return.err(validation_error)

        amount = to_money(command.amount)

        try:
            # Step 2: Lock the client row for the credit read-modify-write
            client = await self.client_repo.get_by_id(command.client_id, for_update=True)
            if not client:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="CLIENT_NOT_FOUND",
                        message=f"Client {command.client_id} not found",
                    )
                )

            # Step 3: Create payment
            payment = await self.payment_repo.create(
                Payment(
                    client_id=client.id,
                    amount=amount,
                    payment_date=command.payment_date,
                    payment_method=command.payment_method,
                    transaction_id=command.transaction_id,
                    notes=command.notes,
                )
            )

            # Step 4: Allocate in the order given
            total_allocated = Decimal("0.00")
            for requested in command.invoice_allocations:
                requested_amount = to_money(requested.amount)
                if requested_amount <= 0:
                    continue

                invoice = await self.invoice_repo.get_for_client(
                    requested.invoice_id, client.id, for_update=True
                )
                if not invoice:
                    await self.uow.rollback()
                    return Return.err(
                        Error(
                            code="INVOICE_NOT_FOUND",
                            message=f"Invoice {requested.invoice_id} not found or does not belong to client",
                        )
                    )

                allocation_amount = min(requested_amount, invoice.amount_due)
                if allocation_amount <= 0:
                    continue

                if total_allocated + allocation_amount > amount:
                    # Rollback expires loaded rows; build the error from plain values first
                    error = Error(
                        code="ALLOCATION_EXCEEDS_PAYMENT",
                        message=f"Invoice allocations exceed the payment amount of {amount}",
                        reason=f"Allocated {total_allocated} before invoice {requested.invoice_id} "
                               f"requested {allocation_amount}",
                    )
                    await self.uow.rollback()
                    return Return.err(error)

                await self.allocation_repo.create(
                    PaymentAllocation(
                        payment_id=payment.id,
                        invoice_id=invoice.id,
                        amount=allocation_amount,
                    )
                )

                invoice.amount_paid = to_money(Decimal(invoice.amount_paid or 0) + allocation_amount)
                if invoice.amount_paid >= Decimal(invoice.total):
                    invoice.status = InvoiceStatus.PAID
                await self.invoice_repo.update(invoice)

                total_allocated += allocation_amount

            # Step 5: Bank the remainder as credit
            credit_added = amount - total_allocated
            if credit_added > 0:
                client = await self.client_repo.add_credit(client, credit_added)

            current_credit = to_money(client.credit_balance)

            # Step 6: Commit transaction
            await self.uow.commit()

            logger.info(
                f"Registered payment {payment.id} for client {client.id}: "
                f"amount {amount}, allocated {total_allocated}, credit added {credit_added}"
            )

            # Step 7: Build response
            return Return.ok(
                RegisterPaymentResponseDTO(
                    payment=PaymentDTO.model_validate(payment),
                    total_allocated=total_allocated,
                    credit_added=credit_added,
                    current_credit=current_credit,
                )
            )

        except IntegrityError as e:
            await self.uow.rollback()
            logger.error(f"Payment registration rejected by constraint: {e}")
            return Return.err(
                Error(
                    code="PAYMENT_CONFLICT",
                    message="Payment conflicts with existing records",
                    reason=str(e.orig) if e.orig is not None else str(e),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.exception(f"Failed to register payment for client {command.client_id}")
            return Return.err(
                Error(
                    code="REGISTER_PAYMENT_FAILED",
                    message="Failed to register payment",
                    reason=str(e),
                )
            )

    def _validate(self, command: RegisterPaymentCommandDTO):
        if (
            not command.client_id
            or command.amount is None
            or command.payment_date is None
            or not command.payment_method
        ):
            return Error(
                code="VALIDATION_ERROR",
                message="Client ID, amount, payment date, and payment method are required",
            )

        if to_money(command.amount) <= 0:
            return Error(
                code="VALIDATION_ERROR",
                message="Payment amount must be greater than zero",
            )

        return None
