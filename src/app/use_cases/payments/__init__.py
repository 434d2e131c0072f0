from .register_payment import RegisterPayment
from .record_invoice_payment import RecordInvoicePayment
from .get_unpaid_invoices import GetUnpaidInvoices
from .get_client_credit import GetClientCredit
from .list_client_payments import ListClientPayments
from .get_payment import GetPayment
from .list_invoice_payments import ListInvoicePayments
from .dtos import (
    InvoiceAllocationDTO,
    RegisterPaymentCommandDTO,
    RegisterPaymentResponseDTO,
    PaymentDTO,
    UnpaidInvoiceDTO,
    ClientCreditDTO,
    PaymentAllocationDTO,
    PaymentDetailDTO,
    PaymentHistoryDTO,
    InvoicePaymentDTO,
)

__all__ = [
    "RegisterPayment",
    "RecordInvoicePayment",
    "GetUnpaidInvoices",
    "GetClientCredit",
    "ListClientPayments",
    "GetPayment",
    "ListInvoicePayments",
    "InvoiceAllocationDTO",
    "RegisterPaymentCommandDTO",
    "RegisterPaymentResponseDTO",
    "PaymentDTO",
    "UnpaidInvoiceDTO",
    "ClientCreditDTO",
    "PaymentAllocationDTO",
    "PaymentDetailDTO",
    "PaymentHistoryDTO",
    "InvoicePaymentDTO",
]
