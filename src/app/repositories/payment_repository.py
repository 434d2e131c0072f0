"""Payment Repository Interfaces

Defines the contracts for payment and payment allocation persistence.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple
from src.domain.payment import Payment, PaymentAllocation


class PaymentRepository(ABC):
    """
    Repository interface for Payment persistence

    Payments are append-only: there is no update operation.
    """

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        """
        Create a new payment

        Args:
            payment: Payment entity to persist

        Returns:
            Created Payment with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, payment_id: int) -> Optional[Payment]:
        pass

    @abstractmethod
    async def get_by_client_id(
        self, client_id: int, limit: int = 20, offset: int = 0
    ) -> List[Payment]:
        """
        Retrieve payments of a client, newest payment date first

        Args:
            client_id: Client identifier
            limit: Maximum number of payments to return
            offset: Offset for pagination

        Returns:
            List of payments
        """
        pass

    @abstractmethod
    async def count_by_client_id(self, client_id: int) -> int:
        pass


class PaymentAllocationRepository(ABC):
    """
    Repository interface for PaymentAllocation persistence
    """

    @abstractmethod
    async def create(self, allocation: PaymentAllocation) -> PaymentAllocation:
        """
        Create a new allocation

        Args:
            allocation: PaymentAllocation entity to persist

        Returns:
            Created PaymentAllocation with generated ID
        """
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[Tuple[PaymentAllocation, Payment]]:
        """
        Retrieve allocations recorded against an invoice with their payments

        Args:
            invoice_id: Invoice ID

        Returns:
            List of (allocation, payment), newest payment date first
        """
        pass
