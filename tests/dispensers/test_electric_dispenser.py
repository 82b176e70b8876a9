"""Tests for the EV charging station."""

from unittest.mock import patch

import pytest

from fuelstation.dispensers.base import DispenserState
from fuelstation.dispensers.electric import ElectricChargingStation
from fuelstation.models import FuelType


class TestElectricChargingStation:
    """Test charging station behaviour."""

    def test_defaults(self):
        """Test default limits and fixed fuel type."""
        station = ElectricChargingStation(3)

        assert station.supported_fuel_type == FuelType.ELECTRIC
        assert station.max_dispense_rate == 150.0
        assert station.last_session_seconds is None

    def test_charge_counts_energy(self, charger):
        """Test delivered energy accumulates in kWh."""
        assert charger.dispense_fuel(50.0) is True
        assert charger.dispense_fuel(25.5) is True
        assert charger.get_total_dispensed() == pytest.approx(75.5)

    def test_session_duration_measured(self, charger):
        """Test stop records the elapsed charging time."""
        with patch("fuelstation.dispensers.electric.time.monotonic", side_effect=[100.0, 460.0]):
            charger.start_dispensing()
            assert charger.stop_dispensing() is True

        assert charger.last_session_seconds == pytest.approx(360.0)
        assert charger.state == DispenserState.IDLE

    def test_failed_stop_keeps_last_duration(self, charger):
        """Test a redundant stop does not touch the recorded duration."""
        with patch("fuelstation.dispensers.electric.time.monotonic", side_effect=[0.0, 60.0]):
            charger.start_dispensing()
            charger.stop_dispensing()

        assert charger.stop_dispensing() is False
        assert charger.last_session_seconds == pytest.approx(60.0)

    def test_from_config(self):
        """Test building a charger from a config entry."""
        station = ElectricChargingStation.from_config(
            {"pump_number": 3, "fuel_type": "electric", "max_dispense_rate": 120}
        )

        assert station.pump_number == 3
        assert station.max_dispense_rate == 120.0

    def test_from_config_rejects_liquid_fuel(self):
        """Test a charger cannot be configured for a liquid fuel."""
        with pytest.raises(ValueError):
            ElectricChargingStation.from_config({"pump_number": 3, "fuel_type": "diesel"})
