"""Invoice Item Repository Interface"""

from abc import ABC, abstractmethod
from typing import List
from src.domain.invoice_item import InvoiceItem


class InvoiceItemRepository(ABC):
    """
    Repository interface for InvoiceItem persistence
    """

    @abstractmethod
    async def create(self, item: InvoiceItem) -> InvoiceItem:
        """
        Create a new invoice item

        Args:
            item: InvoiceItem entity to persist

        Returns:
            Created InvoiceItem with generated ID
        """
        pass

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: int) -> List[InvoiceItem]:
        """
        Retrieve all items of an invoice ordered by ID

        Args:
            invoice_id: Invoice ID

        Returns:
            List of invoice items
        """
        pass
