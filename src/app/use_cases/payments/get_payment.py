"""GetPayment Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.payment_repository import PaymentRepository, PaymentAllocationRepository
from .dtos import PaymentDetailDTO
from .list_client_payments import to_payment_detail


class GetPayment:
    """Single payment with its allocations"""

    def __init__(
        self,
        payment_repo: PaymentRepository,
        allocation_repo: PaymentAllocationRepository,
    ):
        self.payment_repo = payment_repo
        self.allocation_repo = allocation_repo

    async def execute(self, payment_id: int) -> Result[PaymentDetailDTO]:
        payment = await self.payment_repo.get_by_id(payment_id)
        if not payment:
            return Return.err(
                Error(
                    code="PAYMENT_NOT_FOUND",
                    message=f"Payment {payment_id} not found",
                )
            )

        allocations = await self.allocation_repo.get_by_payment_ids([payment.id])
        return Return.ok(to_payment_detail(payment, allocations.get(payment.id, [])))
