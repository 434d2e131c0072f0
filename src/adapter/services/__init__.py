from .unit_of_work import SqlAlchemyUnitOfWork
from .tax_service import ZeroRateTaxService
from .pdf_service import ReportLabPdfService

__all__ = [
    "SqlAlchemyUnitOfWork",
    "ZeroRateTaxService",
    "ReportLabPdfService",
]
