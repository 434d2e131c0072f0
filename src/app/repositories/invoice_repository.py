"""Invoice Repository Interface

Defines the contract for invoice persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.invoice import Invoice


class InvoiceRepository(ABC):
    """
    Repository interface for Invoice persistence

    Provides access to invoice data for billing and payment operations.
    """

    @abstractmethod
    async def create(self, invoice: Invoice) -> Invoice:
        """
        Create a new invoice

        Args:
            invoice: Invoice entity to persist

        Returns:
            Created Invoice with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, invoice_id: int, for_update: bool = False) -> Optional[Invoice]:
        """
        Retrieve invoice by ID

        Args:
            invoice_id: Invoice ID
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Invoice if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_for_client(
        self, invoice_id: int, client_id: int, for_update: bool = False
    ) -> Optional[Invoice]:
        """
        Retrieve an invoice only if it belongs to the given client

        Args:
            invoice_id: Invoice ID
            client_id: Expected owning client
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Invoice if found and owned by client_id, None otherwise
        """
        pass

    @abstractmethod
    async def get_unpaid_by_client(self, client_id: int) -> List[Invoice]:
        """
        Retrieve invoices with an outstanding balance

        Excludes paid and cancelled invoices and those with nothing left to pay.

        Args:
            client_id: Client identifier

        Returns:
            List of invoices ordered by due date ascending
        """
        pass

    @abstractmethod
    async def update(self, invoice: Invoice) -> Invoice:
        """
        Update an existing invoice

        Args:
            invoice: Invoice entity with updated values

        Returns:
            Updated Invoice
        """
        pass

    @abstractmethod
    async def exists_for_period(self, client_service_id: int, billing_period: str) -> bool:
        """
        Check if a recurring invoice already exists for the service and month

        Used to prevent duplicate invoice generation.

        Args:
            client_service_id: Billed service
            billing_period: Billing month (YYYY-MM)

        Returns:
            True if invoice exists, False otherwise
        """
        pass

    @abstractmethod
    async def generate_invoice_number(self, year: int) -> str:
        """
        Generate the next invoice number for the year

        Format: INV-YYYY-NNNNNN (e.g., INV-2024-000001)

        Args:
            year: Issue year

        Returns:
            Unique invoice number string
        """
        pass
