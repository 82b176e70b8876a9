"""Fuel price management with a full change history.

Typical usage:
    prices = PriceManager()
    update = prices.update_price(FuelType.PREMIUM, 1.50, "Manager", "Market adjustment")
    print(f"{update.percentage_change:.1f}% change")
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from fuelstation.core.logging_system import get_logger
from fuelstation.models import FuelType

logger = get_logger(__name__)


@dataclass
class PriceUpdate:
    """One recorded price change.

    Attributes:
        id: Sequential identifier, starting at 1
        fuel_type: Fuel whose price changed
        old_price: Previous price (0.0 for the first recorded price)
        new_price: Price after the change
        updated_by: Who made the change
        reason: Free-text justification
        updated_at: When the change was recorded
    """

    id: int
    fuel_type: FuelType
    old_price: float
    new_price: float
    updated_by: str = ""
    reason: str = ""
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def price_change(self) -> float:
        return self.new_price - self.old_price

    @property
    def percentage_change(self) -> float:
        """Relative change in percent; 0.0 when there was no previous price."""
        if self.old_price <= 0:
            return 0.0
        return self.price_change / self.old_price * 100.0


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


class PriceManager:
    """Records price changes per fuel type and answers current-price queries."""

    def __init__(self) -> None:
        self._price_history: list[PriceUpdate] = []
        self._next_update_id = 1

    def update_price(
        self, fuel_type: FuelType, new_price: float, updated_by: str, reason: str
    ) -> PriceUpdate:
        """Record a new price for ``fuel_type``.

        The old price is taken from the latest recorded update for that
        fuel type, or 0.0 if there is none.
        """
        latest = self.get_latest_price_update(fuel_type)
        update = PriceUpdate(
            id=self._next_update_id,
            fuel_type=fuel_type,
            old_price=latest.new_price if latest else 0.0,
            new_price=new_price,
            updated_by=updated_by,
            reason=reason,
        )
        self._next_update_id += 1
        self._price_history.append(update)

        logger.info(
            "Price of %s set to %.2f by %s (%s)", fuel_type.value, new_price, updated_by, reason
        )
        return update

    def get_current_price(self, fuel_type: FuelType) -> float:
        """Latest recorded price, or 0.0 if none was ever set."""
        latest = self.get_latest_price_update(fuel_type)
        return latest.new_price if latest else 0.0

    def get_latest_price_update(self, fuel_type: FuelType) -> PriceUpdate | None:
        history = self.get_price_history(fuel_type)
        return history[0] if history else None

    def get_price_history(self, fuel_type: FuelType) -> list[PriceUpdate]:
        """All updates for ``fuel_type``, newest first."""
        return self._newest_first(u for u in self._price_history if u.fuel_type == fuel_type)

    def get_price_history_by_date(self, day: date) -> list[PriceUpdate]:
        """All updates recorded on the calendar day of ``day``, newest first."""
        target = _as_date(day)
        return self._newest_first(u for u in self._price_history if u.updated_at.date() == target)

    @staticmethod
    def _newest_first(updates) -> list[PriceUpdate]:
        # Sequential ids break ties between updates made in the same instant
        return sorted(updates, key=lambda u: (u.updated_at, u.id), reverse=True)
