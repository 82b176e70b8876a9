"""Pytest configuration and fixtures for all tests."""

import pytest

from fuelstation.core.logging_system import shutdown_logging
from fuelstation.dispensers import (
    DispenserManager,
    ElectricChargingStation,
    HighVolumeDispenser,
    StandardFuelDispenser,
)
from fuelstation.models import FuelType


@pytest.fixture(autouse=True)
def reset_logging():
    """Tear down any logging configuration a test installed."""
    yield
    shutdown_logging()


@pytest.fixture
def standard_pump() -> StandardFuelDispenser:
    """Pump 1, Regular, 50 L per operation."""
    return StandardFuelDispenser(1, FuelType.REGULAR, 50.0)


@pytest.fixture
def high_volume_pump() -> HighVolumeDispenser:
    """Pump 2, Diesel, 80 L per operation, 15 L minimum."""
    return HighVolumeDispenser(2, FuelType.DIESEL, 80.0, 15.0)


@pytest.fixture
def charger() -> ElectricChargingStation:
    """Charger 3, 120 kWh per operation."""
    return ElectricChargingStation(3, 120.0)


@pytest.fixture
def manager(standard_pump, high_volume_pump, charger) -> DispenserManager:
    """Manager holding one of each dispenser kind."""
    manager = DispenserManager()
    manager.add_dispenser(standard_pump)
    manager.add_dispenser(high_volume_pump)
    manager.add_dispenser(charger)
    return manager
