"""SQLAlchemy Payment Repository Implementations

Implements payment and payment allocation persistence using SQLAlchemy
async session.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.payment_repository import PaymentRepository, PaymentAllocationRepository
from src.domain.invoice import Invoice
from src.domain.payment import Payment, PaymentAllocation


class SqlAlchemyPaymentRepository(PaymentRepository):
    """
    SQLAlchemy implementation of PaymentRepository
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, payment: Payment) -> Payment:
        self.session.add(payment)
        await self.session.flush()
        await self.session.refresh(payment)
        return payment

    async def get_by_id(self, payment_id: int) -> Optional[Payment]:
        result = await self.session.execute(select(Payment).where(Payment.id == payment_id))
        return result.scalar_one_or_none()

    async def get_by_client_id(
        self, client_id: int, limit: int = 20, offset: int = 0
    ) -> List[Payment]:
        statement = (
            select(Payment)
            .where(Payment.client_id == client_id)
            .order_by(Payment.payment_date.desc(), Payment.created_at.desc(), Payment.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def count_by_client_id(self, client_id: int) -> int:
        statement = (
            select(func.count())
            .select_from(Payment)
            .where(Payment.client_id == client_id)
        )
        result = await self.session.execute(statement)
        return result.scalar_one()


class SqlAlchemyPaymentAllocationRepository(PaymentAllocationRepository):
    """
    SQLAlchemy implementation of PaymentAllocationRepository
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, allocation: PaymentAllocation) -> PaymentAllocation:
        self.session.add(allocation)
        await self.session.flush()
        await self.session.refresh(allocation)
        return allocation

    async def get_by_payment_ids(
        self, payment_ids: Iterable[int]
    ) -> Dict[int, List[Tuple[PaymentAllocation, str]]]:
        """
        Retrieve allocations of several payments with their invoice numbers

        Args:
            payment_ids: Payment IDs

        Returns:
            Mapping of payment ID to list of (allocation, invoice_number)
        """
        ids = list(payment_ids)
        grouped: Dict[int, List[Tuple[PaymentAllocation, str]]] = defaultdict(list)
        if not ids:
            return grouped

        statement = (
            select(PaymentAllocation, Invoice.invoice_number)
            .join(Invoice, Invoice.id == PaymentAllocation.invoice_id)
            .where(PaymentAllocation.payment_id.in_(ids))
            .order_by(PaymentAllocation.id)
        )
        result = await self.session.execute(statement)
        for allocation, invoice_number in result.all():
            grouped[allocation.payment_id].append((allocation, invoice_number))
        return grouped

    async def get_by_invoice_id(self, invoice_id: int) -> List[Tuple[PaymentAllocation, Payment]]:
        statement = (
            select(PaymentAllocation, Payment)
            .join(Payment, Payment.id == PaymentAllocation.payment_id)
            .where(PaymentAllocation.invoice_id == invoice_id)
            .order_by(Payment.payment_date.desc(), PaymentAllocation.id.desc())
        )
        result = await self.session.execute(statement)
        return [(row[0], row[1]) for row in result.all()]
