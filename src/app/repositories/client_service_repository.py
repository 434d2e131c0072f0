"""Client Service Repository Interface

Defines the contract for client service persistence, including the
candidate query used by recurring invoice generation.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional, Tuple
from src.domain.client import Client
from src.domain.client_service import ClientService
from src.domain.service_plan import ServicePlan


class ClientServiceRepository(ABC):
    """
    Repository interface for ClientService persistence
    """

    @abstractmethod
    async def create(self, service: ClientService) -> ClientService:
        """
        Create a new client service

        Args:
            service: ClientService entity to persist

        Returns:
            Created ClientService with generated ID

        Raises:
            IntegrityError: if the username is already taken
        """
        pass

    @abstractmethod
    async def get_by_id(self, service_id: int, for_update: bool = False) -> Optional[ClientService]:
        """
        Retrieve service by ID

        Args:
            service_id: ClientService ID
            for_update: If True, locks the row and refreshes any cached instance

        Returns:
            ClientService if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_billing_candidates(
        self, today: date, default_billing_day: int
    ) -> List[Tuple[ClientService, ServicePlan, Client]]:
        """
        Retrieve services that may need a recurring invoice today

        Selects active, recurring-enabled services where any of:
        - the effective billing day equals today's day of month
        - the service has never been invoiced
        - the last invoice falls outside today's calendar month

        This over-selects on purpose; callers must still skip services
        already invoiced this month.

        Args:
            today: Run date
            default_billing_day: System billing day for services without an override

        Returns:
            List of (service, plan, client) tuples ordered by service ID
        """
        pass

    @abstractmethod
    async def update(self, service: ClientService) -> ClientService:
        """
        Update an existing client service

        Args:
            service: ClientService entity with updated values

        Returns:
            Updated ClientService
        """
        pass
