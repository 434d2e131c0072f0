from .base import BaseModel, to_money
from .client import Client, ClientStatus
from .service_plan import ServicePlan
from .client_service import ClientService, ServiceStatus
from .system_setting import SystemSetting
from .invoice import Invoice, InvoiceStatus
from .invoice_item import InvoiceItem
from .payment import Payment, PaymentAllocation
from .radius import RadCheck

__all__ = [
    "BaseModel",
    "to_money",
    "Client",
    "ClientStatus",
    "ServicePlan",
    "ClientService",
    "ServiceStatus",
    "SystemSetting",
    "Invoice",
    "InvoiceStatus",
    "InvoiceItem",
    "Payment",
    "PaymentAllocation",
    "RadCheck",
]
