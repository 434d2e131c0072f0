from .client_repository import SqlAlchemyClientRepository
from .service_plan_repository import SqlAlchemyServicePlanRepository
from .client_service_repository import SqlAlchemyClientServiceRepository
from .system_setting_repository import SqlAlchemySystemSettingRepository
from .invoice_repository import SqlAlchemyInvoiceRepository
from .invoice_item_repository import SqlAlchemyInvoiceItemRepository
from .payment_repository import SqlAlchemyPaymentRepository, SqlAlchemyPaymentAllocationRepository
from .radius_repository import SqlAlchemyRadiusRepository

__all__ = [
    "SqlAlchemyClientRepository",
    "SqlAlchemyServicePlanRepository",
    "SqlAlchemyClientServiceRepository",
    "SqlAlchemySystemSettingRepository",
    "SqlAlchemyInvoiceRepository",
    "SqlAlchemyInvoiceItemRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyPaymentAllocationRepository",
    "SqlAlchemyRadiusRepository",
]
