"""Inventory record and the read / write interfaces over it.

Reporting code only needs ``IInventoryReader``; deliveries and price
changes go through ``IInventoryWriter``. One service may implement both.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from fuelstation.models import FuelType


@dataclass
class Fuel:
    """Stock record for one fuel type.

    Attributes:
        id: Record identifier
        fuel_type: Fuel this record tracks
        name: Display name (e.g. "Premium Gasoline")
        price_per_liter: Current selling price
        available_quantity: Litres in the tanks
        minimum_stock_level: Threshold at or below which stock is low
        last_updated: Time of the last stock or price change
    """

    id: int
    fuel_type: FuelType
    name: str
    price_per_liter: float
    available_quantity: float
    minimum_stock_level: float
    last_updated: datetime = field(default_factory=datetime.now)

    @property
    def is_low_stock(self) -> bool:
        return self.available_quantity <= self.minimum_stock_level


class IInventoryReader(ABC):
    """Read-only view of station stock."""

    @abstractmethod
    def get_fuel(self, fuel_type: FuelType) -> Fuel | None:
        """Stock record for ``fuel_type``, or None if not stocked."""

    @abstractmethod
    def get_available_quantity(self, fuel_type: FuelType) -> float:
        """Litres available; 0.0 for fuel types not stocked."""

    @abstractmethod
    def is_low_stock(self, fuel_type: FuelType) -> bool:
        """True if stocked and at or below its minimum level."""

    @abstractmethod
    def get_low_stock_fuels(self) -> list[Fuel]:
        pass

    @abstractmethod
    def get_all_fuels(self) -> list[Fuel]:
        pass


class IInventoryWriter(ABC):
    """Mutating operations on station stock."""

    @abstractmethod
    def add_fuel(self, fuel_type: FuelType, quantity: float) -> None:
        """Record a delivery. Unknown fuel types are ignored."""

    @abstractmethod
    def remove_fuel(self, fuel_type: FuelType, quantity: float) -> bool:
        """Take ``quantity`` out of stock.

        Returns:
            False if the fuel type is not stocked or stock is insufficient.
        """

    @abstractmethod
    def update_fuel_price(self, fuel_type: FuelType, new_price: float) -> bool:
        """Set the selling price. False if the fuel type is not stocked."""

    @abstractmethod
    def set_minimum_stock_level(self, fuel_type: FuelType, minimum_level: float) -> None:
        """Change the low-stock threshold. Unknown fuel types are ignored."""
