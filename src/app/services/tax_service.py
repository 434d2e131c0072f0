"""Tax Service Interface

Computes the tax charged on an invoice subtotal.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from src.domain.client import Client


class TaxService(ABC):
    """
    Service interface for invoice tax calculation
    """

    @abstractmethod
    def calculate(self, client: Client, subtotal: Decimal) -> Decimal:
        """
        Calculate tax for a subtotal billed to a client

        Args:
            client: Billed client (jurisdiction lookups key off it)
            subtotal: Amount before tax

        Returns:
            Tax amount
        """
        pass
