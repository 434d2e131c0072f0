"""SQLAlchemy Invoice Repository Implementation

Implements invoice persistence using SQLAlchemy async session.
"""

from typing import Optional, List
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.invoice_repository import InvoiceRepository
from src.domain.base import utc_now
from src.domain.invoice import Invoice, InvoiceStatus


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    """
    SQLAlchemy implementation of InvoiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        self.session.add(invoice)
        await self.session.flush()
        await self.session.refresh(invoice)
        return invoice

    async def get_by_id(self, invoice_id: int, for_update: bool = False) -> Optional[Invoice]:
        statement = select(Invoice).where(Invoice.id == invoice_id)

        if for_update:
            statement = statement.with_for_update().execution_options(populate_existing=True)

        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_for_client(
        self, invoice_id: int, client_id: int, for_update: bool = False
    ) -> Optional[Invoice]:
        """
        Retrieve an invoice only if it belongs to the given client

        Args:
            invoice_id: Invoice ID
            client_id: Expected owning client
            for_update: If True, locks the row and reloads its current values

        Returns:
            Invoice if found and owned by client_id, None otherwise
        """
        statement = (
            select(Invoice)
            .where(Invoice.id == invoice_id)
            .where(Invoice.client_id == client_id)
        )

        if for_update:
            statement = statement.with_for_update().execution_options(populate_existing=True)

        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_unpaid_by_client(self, client_id: int) -> List[Invoice]:
        statement = (
            select(Invoice)
            .where(Invoice.client_id == client_id)
            .where(Invoice.status.notin_([InvoiceStatus.PAID, InvoiceStatus.CANCELLED]))
            .where(Invoice.total - Invoice.amount_paid > 0)
            .order_by(Invoice.due_date.asc(), Invoice.id.asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        invoice.updated_at = utc_now()
        self.session.add(invoice)
        await self.session.flush()
        return invoice

    async def exists_for_period(self, client_service_id: int, billing_period: str) -> bool:
        """
        Check if a recurring invoice already exists for the service and month

        Args:
            client_service_id: Billed service
            billing_period: Billing month (YYYY-MM)

        Returns:
            True if invoice exists, False otherwise
        """
        statement = (
            select(func.count())
            .select_from(Invoice)
            .where(Invoice.client_service_id == client_service_id)
            .where(Invoice.billing_period == billing_period)
        )
        result = await self.session.execute(statement)
        count = result.scalar_one()
        return count > 0

    async def generate_invoice_number(self, year: int) -> str:
        """
        Generate the next invoice number for the year

        Format: INV-YYYY-NNNNNN (e.g., INV-2024-000001). Zero padding keeps
        numbers sortable in creation order.

        Returns:
            Unique invoice number string
        """
        prefix = f"INV-{year}-"

        # Get the highest invoice number for this year
        statement = (
            select(func.max(Invoice.invoice_number))
            .where(Invoice.invoice_number.like(f"{prefix}%"))
        )
        result = await self.session.execute(statement)
        max_number = result.scalar_one_or_none()

        if max_number:
            sequence = int(max_number.split("-")[-1]) + 1
        else:
            sequence = 1

        return f"{prefix}{sequence:06d}"
