"""In-memory sales ledger implementing both processing and reporting."""

from collections import defaultdict
from datetime import date, datetime

from fuelstation.core.logging_system import get_logger
from fuelstation.models import FuelType
from fuelstation.sales.base import ISalesProcessor, ISalesReporter, PaymentMethod, Sale

logger = get_logger(__name__)


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


class SalesService(ISalesProcessor, ISalesReporter):
    """Keeps every sale of the current run in memory."""

    def __init__(self) -> None:
        self._sales: list[Sale] = []
        self._next_sale_id = 1

    def process_sale(
        self,
        fuel_type: FuelType,
        quantity: float,
        price_per_liter: float,
        payment_method: PaymentMethod,
        customer_name: str,
        pump_number: int,
    ) -> Sale:
        sale = Sale(
            id=self._next_sale_id,
            fuel_type=fuel_type,
            quantity=quantity,
            price_per_liter=price_per_liter,
            payment_method=payment_method,
            customer_name=customer_name,
            pump_number=pump_number,
        )
        self._next_sale_id += 1
        self._sales.append(sale)

        logger.info(
            "Processed sale #%d: %.2f of %s for %.2f",
            sale.id,
            quantity,
            fuel_type.value,
            sale.total_amount,
        )
        return sale

    def cancel_sale(self, sale_id: int) -> bool:
        sale = self.get_sale_by_id(sale_id)
        if sale is None:
            return False

        self._sales.remove(sale)
        logger.info("Cancelled sale #%d", sale_id)
        return True

    def refund_sale(self, sale_id: int) -> bool:
        sale = self.get_sale_by_id(sale_id)
        if sale is None or sale.refunded:
            return False

        sale.refunded = True
        logger.info("Refunded sale #%d - Amount: %.2f", sale_id, sale.total_amount)
        return True

    def get_sale_by_id(self, sale_id: int) -> Sale | None:
        return next((s for s in self._sales if s.id == sale_id), None)

    def get_all_sales(self) -> list[Sale]:
        return list(self._sales)

    def get_sales_by_date(self, day: date) -> list[Sale]:
        target = _as_date(day)
        return [s for s in self._sales if s.timestamp.date() == target]

    def get_sales_by_fuel_type(self, fuel_type: FuelType) -> list[Sale]:
        return [s for s in self._sales if s.fuel_type == fuel_type]

    def get_sales_by_payment_method(self, payment_method: PaymentMethod) -> list[Sale]:
        return [s for s in self._sales if s.payment_method == payment_method]

    def get_total_sales_amount(self, start: date, end: date) -> float:
        return sum((s.total_amount for s in self._settled_between(start, end)), 0.0)

    def get_total_fuel_sold(self, fuel_type: FuelType, start: date, end: date) -> float:
        return sum(
            (s.quantity for s in self._settled_between(start, end) if s.fuel_type == fuel_type), 0.0
        )

    def get_sales_summary_by_fuel_type(self, day: date) -> dict[FuelType, float]:
        summary: dict[FuelType, float] = defaultdict(float)
        for sale in self._settled_between(day, day):
            summary[sale.fuel_type] += sale.total_amount
        return dict(summary)

    def _settled_between(self, start: date, end: date) -> list[Sale]:
        first, last = _as_date(start), _as_date(end)
        return [
            s for s in self._sales if not s.refunded and first <= s.timestamp.date() <= last
        ]
