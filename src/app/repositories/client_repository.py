"""Client Repository Interface

Defines the contract for client persistence operations.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional
from src.domain.client import Client


class ClientRepository(ABC):
    """
    Repository interface for Client persistence

    Credit balance changes go through add_credit so they are always applied
    as read-modify-write on a row the caller has locked.
    """

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """
        Create a new client

        Args:
            client: Client entity to persist

        Returns:
            Created Client with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, client_id: int, for_update: bool = False) -> Optional[Client]:
        """
        Retrieve client by ID with optional row-level locking

        Args:
            client_id: Client ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Client if found, None otherwise
        """
        pass

    @abstractmethod
    async def add_credit(self, client: Client, amount: Decimal) -> Client:
        """
        Increase the client's credit balance by amount

        Args:
            client: Client previously loaded with for_update=True
            amount: Positive amount to add

        Returns:
            Client with the new balance
        """
        pass
