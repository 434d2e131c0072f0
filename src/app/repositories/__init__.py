from .client_repository import ClientRepository
from .service_plan_repository import ServicePlanRepository
from .client_service_repository import ClientServiceRepository
from .system_setting_repository import SystemSettingRepository
from .invoice_repository import InvoiceRepository
from .invoice_item_repository import InvoiceItemRepository
from .payment_repository import PaymentRepository, PaymentAllocationRepository
from .radius_repository import RadiusRepository

__all__ = [
    "ClientRepository",
    "ServicePlanRepository",
    "ClientServiceRepository",
    "SystemSettingRepository",
    "InvoiceRepository",
    "InvoiceItemRepository",
    "PaymentRepository",
    "PaymentAllocationRepository",
    "RadiusRepository",
]
