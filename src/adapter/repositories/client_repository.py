"""SQLAlchemy implementation of ClientRepository

Provides persistence for Client entities with pessimistic locking support
so concurrent payments for one client cannot lose credit updates.
"""

from decimal import Decimal
from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.client_repository import ClientRepository
from src.domain.base import to_money, utc_now
from src.domain.client import Client


class SqlAlchemyClientRepository(ClientRepository):
    """
    SQLAlchemy implementation of ClientRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Credit updates applied relative to the locked row's current balance
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, client: Client) -> Client:
        self.session.add(client)
        await self.session.flush()
        await self.session.refresh(client)
        return client

    async def get_by_id(self, client_id: int, for_update: bool = False) -> Optional[Client]:
        """
        Retrieve client by ID with optional row-level locking

        Args:
            client_id: Client ID
            for_update: If True, locks the row and reloads its current values

        Returns:
            Client if found, None otherwise
        """
        stmt = select(Client).where(Client.id == client_id)

        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def add_credit(self, client: Client, amount: Decimal) -> Client:
        """
        Add amount to the client's credit balance

        Note:
            Should be called within a transaction with the client already locked
        """
        client.credit_balance = to_money(Decimal(client.credit_balance or 0) + amount)
        client.updated_at = utc_now()
        self.session.add(client)
        await self.session.flush()
        return client
