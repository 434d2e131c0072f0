from .unit_of_work import UnitOfWork
from .tax_service import TaxService
from .pdf_service import PdfService
from .billing_settings import BillingSettings, BillingSettingsResolver, parse_setting_int
from .credentials_generator import generate_random_string, generate_username, generate_password

__all__ = [
    "UnitOfWork",
    "TaxService",
    "PdfService",
    "BillingSettings",
    "BillingSettingsResolver",
    "parse_setting_int",
    "generate_random_string",
    "generate_username",
    "generate_password",
]
