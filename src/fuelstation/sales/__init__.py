"""Sales package: sale records, processing and reporting."""

from fuelstation.sales.base import ISalesProcessor, ISalesReporter, PaymentMethod, Sale
from fuelstation.sales.service import SalesService

__all__ = [
    "ISalesProcessor",
    "ISalesReporter",
    "PaymentMethod",
    "Sale",
    "SalesService",
]
