"""Billing domain use cases"""
from .generate_recurring_invoices import GenerateRecurringInvoices
from .generate_invoice_pdf import GenerateInvoicePdf
from .dtos import (
    GeneratedInvoiceDTO,
    RecurringInvoiceRunDTO,
    GenerateRecurringInvoicesResponseDTO,
    InvoiceDocumentDTO,
)

__all__ = [
    "GenerateRecurringInvoices",
    "GenerateInvoicePdf",
    "GeneratedInvoiceDTO",
    "RecurringInvoiceRunDTO",
    "GenerateRecurringInvoicesResponseDTO",
    "InvoiceDocumentDTO",
]
