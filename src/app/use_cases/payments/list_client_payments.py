"""ListClientPayments Use Case

Paginated payment history of a client, each payment with its allocations.
"""

import math
from libs.result import Result, Return, Error
from src.app.repositories.payment_repository import PaymentRepository, PaymentAllocationRepository
from src.app.use_cases.dtos import PaginationDTO
from .dtos import PaymentAllocationDTO, PaymentDetailDTO, PaymentHistoryDTO, PaymentDTO

MAX_PAGE_SIZE = 100


def to_payment_detail(payment, allocations) -> PaymentDetailDTO:
    """Combine a payment with its (allocation, invoice_number) pairs"""
    return PaymentDetailDTO(
        **PaymentDTO.model_validate(payment).model_dump(),
        allocations=[
            PaymentAllocationDTO(
                invoice_id=allocation.invoice_id,
                invoice_number=invoice_number,
                amount=allocation.amount,
            )
            for allocation, invoice_number in allocations
        ],
    )


class ListClientPayments:
    """
    List Client Payments Use Case

    Payments are ordered by payment date, newest first.
    """

    def __init__(
        self,
        payment_repo: PaymentRepository,
        allocation_repo: PaymentAllocationRepository,
    ):
        self.payment_repo = payment_repo
        self.allocation_repo = allocation_repo

    async def execute(self, client_id: int, page: int = 1, limit: int = 20) -> Result[PaymentHistoryDTO]:
        """
        Execute list operation

        Args:
            client_id: Client identifier
            page: 1-based page number
            limit: Page size (capped at 100)

        Returns:
            Result[PaymentHistoryDTO]: Page of payments with pagination info
        """
        page = max(page, 1)
        limit = min(max(limit, 1), MAX_PAGE_SIZE)
        offset = (page - 1) * limit

        try:
            payments = await self.payment_repo.get_by_client_id(client_id, limit=limit, offset=offset)
            total_count = await self.payment_repo.count_by_client_id(client_id)
            allocations = await self.allocation_repo.get_by_payment_ids([p.id for p in payments])

            return Return.ok(
                PaymentHistoryDTO(
                    payments=[
                        to_payment_detail(payment, allocations.get(payment.id, []))
                        for payment in payments
                    ],
                    pagination=PaginationDTO(
                        page=page,
                        limit=limit,
                        total_count=total_count,
                        total_pages=math.ceil(total_count / limit),
                    ),
                )
            )
        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_PAYMENTS_FAILED",
                    message="Failed to get payment history",
                    reason=str(e),
                )
            )
