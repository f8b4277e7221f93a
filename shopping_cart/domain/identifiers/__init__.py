"""識別子モジュール."""
from .invoice_id import InvoiceId

__all__ = [
    "InvoiceId",
]
