"""Sale record and the processing / reporting interfaces.

Cashier code depends on ``ISalesProcessor``; end-of-day reporting depends
on ``ISalesReporter``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum

from fuelstation.models import FuelType


class PaymentMethod(Enum):
    """Ways a customer can pay."""

    CASH = "cash"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    MOBILE_PAYMENT = "mobile_payment"
    FLEET_CARD = "fleet_card"


@dataclass
class Sale:
    """A completed fuel sale.

    Attributes:
        id: Sequential sale number
        fuel_type: Fuel sold
        quantity: Litres (kWh for electric) sold
        price_per_liter: Unit price applied
        payment_method: How the customer paid
        customer_name: Customer reference
        pump_number: Pump that served the sale
        timestamp: When the sale was recorded
        refunded: Set once the sale has been refunded
        total_amount: quantity * price_per_liter
    """

    id: int
    fuel_type: FuelType
    quantity: float
    price_per_liter: float
    payment_method: PaymentMethod
    customer_name: str = ""
    pump_number: int = 0
    timestamp: datetime = field(default_factory=datetime.now)
    refunded: bool = False
    total_amount: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.calculate_total()

    def calculate_total(self) -> float:
        self.total_amount = self.quantity * self.price_per_liter
        return self.total_amount


class ISalesProcessor(ABC):
    """Recording and reversing sales."""

    @abstractmethod
    def process_sale(
        self,
        fuel_type: FuelType,
        quantity: float,
        price_per_liter: float,
        payment_method: PaymentMethod,
        customer_name: str,
        pump_number: int,
    ) -> Sale:
        """Record a sale and return it with its total computed."""

    @abstractmethod
    def cancel_sale(self, sale_id: int) -> bool:
        """Remove a sale entirely. False if no such sale."""

    @abstractmethod
    def refund_sale(self, sale_id: int) -> bool:
        """Mark a sale refunded. False if no such sale or already refunded."""


class ISalesReporter(ABC):
    """Read-only sales queries.

    Date arguments are compared by calendar day; ranges are inclusive.
    """

    @abstractmethod
    def get_sales_by_date(self, day: date) -> list[Sale]:
        pass

    @abstractmethod
    def get_sales_by_fuel_type(self, fuel_type: FuelType) -> list[Sale]:
        pass

    @abstractmethod
    def get_sales_by_payment_method(self, payment_method: PaymentMethod) -> list[Sale]:
        pass

    @abstractmethod
    def get_total_sales_amount(self, start: date, end: date) -> float:
        """Revenue between ``start`` and ``end``, excluding refunded sales."""

    @abstractmethod
    def get_total_fuel_sold(self, fuel_type: FuelType, start: date, end: date) -> float:
        """Quantity of ``fuel_type`` sold in the range, excluding refunds."""

    @abstractmethod
    def get_sales_summary_by_fuel_type(self, day: date) -> dict[FuelType, float]:
        """Revenue per fuel type on ``day``, excluding refunds."""
