"""SQLAlchemy Client Service Repository Implementation

Implements client service persistence and the recurring billing candidate
query using SQLAlchemy async session.
"""

from datetime import date, timedelta
from typing import List, Optional, Tuple
from sqlalchemy import func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_service_repository import ClientServiceRepository
from src.domain.base import utc_now
from src.domain.client import Client
from src.domain.client_service import ClientService, ServiceStatus
from src.domain.service_plan import ServicePlan


def month_bounds(day: date) -> Tuple[date, date]:
    """First day of the month of `day` and first day of the following month"""
    start = day.replace(day=1)
    next_start = (start + timedelta(days=32)).replace(day=1)
    return start, next_start


class SqlAlchemyClientServiceRepository(ClientServiceRepository):
    """
    SQLAlchemy implementation of ClientServiceRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, service: ClientService) -> ClientService:
        self.session.add(service)
        await self.session.flush()
        await self.session.refresh(service)
        return service

    async def get_by_id(self, service_id: int, for_update: bool = False) -> Optional[ClientService]:
        """
        Retrieve service by ID

        With for_update the row is locked and any instance already loaded in
        this session is overwritten with the database values.
        """
        stmt = select(ClientService).where(ClientService.id == service_id)

        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_billing_candidates(
        self, today: date, default_billing_day: int
    ) -> List[Tuple[ClientService, ServicePlan, Client]]:
        """
        Retrieve services that may need a recurring invoice today

        Args:
            today: Run date
            default_billing_day: System billing day for services without an override

        Returns:
            List of (service, plan, client) tuples ordered by service ID
        """
        month_start, next_month_start = month_bounds(today)
        effective_billing_day = func.coalesce(
            ClientService.billing_day_of_month, default_billing_day
        )

        statement = (
            select(ClientService, ServicePlan, Client)
            .join(ServicePlan, ServicePlan.id == ClientService.service_plan_id)
            .join(Client, Client.id == ClientService.client_id)
            .where(ClientService.status == ServiceStatus.ACTIVE)
            .where(ClientService.recurring_billing_enabled.is_(True))
            .where(
                or_(
                    effective_billing_day == today.day,
                    ClientService.last_invoice_date.is_(None),
                    ClientService.last_invoice_date < month_start,
                    ClientService.last_invoice_date >= next_month_start,
                )
            )
            .order_by(ClientService.id)
        )

        result = await self.session.execute(statement)
        return [(row[0], row[1], row[2]) for row in result.all()]

    async def update(self, service: ClientService) -> ClientService:
        service.updated_at = utc_now()
        self.session.add(service)
        await self.session.flush()
        return service
