"""Zero-rate Tax Service"""

from decimal import Decimal
from src.app.services.tax_service import TaxService
from src.domain.client import Client


class ZeroRateTaxService(TaxService):
    """Charges no tax. Default until jurisdiction rates are configured."""

    def calculate(self, client: Client, subtotal: Decimal) -> Decimal:
        return Decimal("0.00")
