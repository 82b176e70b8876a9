"""Tests for the Station pump-to-receipt flow."""

import pytest

from fuelstation.dispensers import (
    DispenserManager,
    DispenserState,
    ElectricChargingStation,
    StandardFuelDispenser,
)
from fuelstation.models import FuelType
from fuelstation.sales import PaymentMethod
from fuelstation.station import Station


@pytest.fixture
def station() -> Station:
    manager = DispenserManager()
    manager.add_dispenser(StandardFuelDispenser(1, FuelType.REGULAR, 50.0))
    manager.add_dispenser(ElectricChargingStation(3, 120.0))
    station = Station("Test", manager)
    station.prices.update_price(FuelType.ELECTRIC, 0.35, "system", "Opening price")
    return station


class TestSellFuel:
    """Test selling fuel end to end."""

    def test_sale_updates_everything(self, station):
        """Test a sale dispenses, draws stock and records the receipt."""
        sale = station.sell_fuel(FuelType.REGULAR, 40.0, PaymentMethod.CREDIT_CARD, "Alice")

        assert sale is not None
        assert sale.pump_number == 1
        assert sale.price_per_liter == 1.25
        assert sale.total_amount == pytest.approx(50.0)
        assert station.inventory.get_available_quantity(FuelType.REGULAR) == 4960.0
        pump = station.dispensers.dispensers[0]
        assert pump.get_total_dispensed() == 40.0
        assert pump.state == DispenserState.IDLE
        assert station.sales.get_all_sales() == [sale]

    def test_electric_sale_uses_price_history(self, station):
        """Test unstocked commodities are priced from the price history."""
        sale = station.sell_fuel(FuelType.ELECTRIC, 50.0, PaymentMethod.MOBILE_PAYMENT, "Bob")

        assert sale.pump_number == 3
        assert sale.total_amount == pytest.approx(17.5)

    def test_insufficient_stock(self, station):
        """Test a sale is refused before dispensing when stock is short."""
        station.inventory.remove_fuel(FuelType.REGULAR, 4990.0)

        assert station.sell_fuel(FuelType.REGULAR, 20.0, PaymentMethod.CASH, "Carol") is None
        assert station.dispensers.dispensers[0].get_total_dispensed() == 0.0
        assert station.sales.get_all_sales() == []

    def test_no_pump(self, station):
        """Test a sale is refused when no pump serves the fuel."""
        assert station.sell_fuel(FuelType.DIESEL, 20.0, PaymentMethod.CASH, "Dan") is None
        assert station.inventory.get_available_quantity(FuelType.DIESEL) == 4000.0

    def test_rejected_quantity(self, station):
        """Test a quantity above the pump rate leaves stock untouched."""
        assert station.sell_fuel(FuelType.REGULAR, 60.0, PaymentMethod.CASH, "Eve") is None
        assert station.inventory.get_available_quantity(FuelType.REGULAR) == 5000.0


class TestPricing:
    """Test price changes through the station."""

    def test_update_fuel_price(self, station):
        """Test a price change reaches inventory and history."""
        update = station.update_fuel_price(FuelType.DIESEL, 1.40, "Admin", "Weekly adjustment")

        assert update.new_price == 1.40
        assert station.unit_price(FuelType.DIESEL) == 1.40
        assert station.prices.get_current_price(FuelType.DIESEL) == 1.40
