"""SQLAlchemy Unit of Work

Wraps one AsyncSession; each request, payment registration or invoice run
owns its session (and pooled connection) for the whole transaction.
"""

from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
