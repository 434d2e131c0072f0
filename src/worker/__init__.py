"""Background workers for billing service"""
from .recurring_invoices import RecurringInvoiceWorker, RecurringInvoiceRunError

__all__ = ["RecurringInvoiceWorker", "RecurringInvoiceRunError"]
