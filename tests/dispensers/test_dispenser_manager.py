"""Tests for the dispenser manager."""

import pytest

from fuelstation.dispensers.base import DispenserState
from fuelstation.dispensers.manager import DispenserManager, format_report
from fuelstation.dispensers.standard import HighVolumeDispenser, StandardFuelDispenser
from fuelstation.models import FuelType


class TestRequestRouting:
    """Test first-match request routing."""

    def test_end_to_end_standard_request(self):
        """Test a request is served and the pump is left idle."""
        manager = DispenserManager()
        pump = StandardFuelDispenser(1, FuelType.REGULAR, 50.0)
        manager.add_dispenser(pump)

        assert manager.process_fuel_request(FuelType.REGULAR, 40.0) is True
        assert pump.get_total_dispensed() == 40.0
        assert pump.state == DispenserState.IDLE

    def test_skips_non_operational_unit(self):
        """Test a request goes to the operational unit of the right type."""
        manager = DispenserManager()
        a = StandardFuelDispenser(1, FuelType.REGULAR)
        b = StandardFuelDispenser(2, FuelType.REGULAR, operational=False)
        manager.add_dispenser(b)
        manager.add_dispenser(a)

        assert manager.find_available_dispenser(FuelType.REGULAR) is a
        assert manager.process_fuel_request(FuelType.REGULAR, 10.0) is True
        assert a.get_total_dispensed() == 10.0
        assert b.get_total_dispensed() == 0.0

    def test_first_match_wins(self):
        """Test the earliest registered operational unit is always chosen."""
        manager = DispenserManager()
        first = StandardFuelDispenser(1, FuelType.REGULAR)
        second = StandardFuelDispenser(2, FuelType.REGULAR)
        manager.add_dispenser(first)
        manager.add_dispenser(second)

        manager.process_fuel_request(FuelType.REGULAR, 10.0)
        manager.process_fuel_request(FuelType.REGULAR, 10.0)

        assert first.get_total_dispensed() == 20.0
        assert second.get_total_dispensed() == 0.0

    def test_no_fallback_when_first_match_rejects(self):
        """Test a rejection by the selected unit is not retried elsewhere."""
        manager = DispenserManager()
        small = HighVolumeDispenser(1, FuelType.DIESEL, 80.0, 15.0)
        other = StandardFuelDispenser(2, FuelType.DIESEL)
        manager.add_dispenser(small)
        manager.add_dispenser(other)

        assert manager.process_fuel_request(FuelType.DIESEL, 5.0) is False
        assert other.get_total_dispensed() == 0.0

    def test_unknown_fuel_type(self, manager):
        """Test a request with no registered unit fails."""
        assert manager.process_fuel_request(FuelType.PREMIUM, 10.0) is False

    def test_all_units_out_of_service(self, manager, standard_pump):
        """Test a request fails when every matching unit is out of service."""
        standard_pump.set_operational(False)

        assert manager.process_fuel_request(FuelType.REGULAR, 10.0) is False

    def test_rejected_quantity(self, manager, standard_pump):
        """Test a rejected quantity leaves the unit untouched."""
        assert manager.process_fuel_request(FuelType.REGULAR, 75.0) is False
        assert standard_pump.get_total_dispensed() == 0.0
        assert standard_pump.state == DispenserState.IDLE

    def test_each_kind_is_served(self, manager, standard_pump, high_volume_pump, charger):
        """Test every dispenser kind is handled through the same contract."""
        assert manager.process_fuel_request(FuelType.REGULAR, 40.0) is True
        assert manager.process_fuel_request(FuelType.DIESEL, 20.0) is True
        assert manager.process_fuel_request(FuelType.ELECTRIC, 50.0) is True

        for unit in (standard_pump, high_volume_pump, charger):
            assert unit.state == DispenserState.IDLE

    def test_duplicate_pump_numbers_accepted(self):
        """Test registering the same pump number twice is allowed."""
        manager = DispenserManager()
        manager.add_dispenser(StandardFuelDispenser(1, FuelType.REGULAR))
        manager.add_dispenser(StandardFuelDispenser(1, FuelType.DIESEL))

        assert [d.pump_number for d in manager.dispensers] == [1, 1]

    def test_invalid_fuel_type_raises(self, manager):
        """Test a fuel type that is not a FuelType raises TypeError."""
        with pytest.raises(TypeError):
            manager.process_fuel_request("regular", 10.0)  # type: ignore


class TestReporting:
    """Test status reporting and aggregates."""

    def test_report_in_registration_order(self, manager):
        """Test the report has one row per unit in registration order."""
        report = manager.generate_report()

        assert [row.pump_number for row in report] == [1, 2, 3]
        assert [row.kind for row in report] == [
            "StandardFuelDispenser",
            "HighVolumeDispenser",
            "ElectricChargingStation",
        ]

    def test_report_reflects_current_state(self, manager, charger):
        """Test the report is recomputed on every call."""
        before = manager.generate_report()
        manager.process_fuel_request(FuelType.ELECTRIC, 30.0)
        charger.set_operational(False)
        after = manager.generate_report()

        assert before[2].total_dispensed == 0.0
        assert after[2].total_dispensed == 30.0
        assert after[2].is_operational is False
        assert after[2].max_dispense_rate == 120.0

    def test_get_dispensers_by_fuel_type(self, manager, standard_pump):
        """Test filtering includes out-of-service units."""
        standard_pump.set_operational(False)

        assert manager.get_dispensers_by_fuel_type(FuelType.REGULAR) == [standard_pump]
        assert manager.get_dispensers_by_fuel_type(FuelType.PREMIUM) == []

    def test_total_dispensed_by_fuel_type(self):
        """Test counters are summed per fuel type."""
        manager = DispenserManager()
        manager.add_dispenser(StandardFuelDispenser(1, FuelType.REGULAR))
        manager.add_dispenser(StandardFuelDispenser(2, FuelType.REGULAR))
        manager.add_dispenser(StandardFuelDispenser(3, FuelType.DIESEL))
        for pump in manager.dispensers:
            pump.dispense_fuel(10.0)

        assert manager.get_total_dispensed_by_fuel_type() == {
            FuelType.REGULAR: 20.0,
            FuelType.DIESEL: 10.0,
        }

    def test_format_report(self, manager, standard_pump):
        """Test the console rendering of the report."""
        manager.process_fuel_request(FuelType.REGULAR, 40.0)
        standard_pump.set_operational(False)

        text = format_report(manager.generate_report())

        assert text.startswith("=== Dispenser Status Report ===")
        assert "Pump 1 (regular, StandardFuelDispenser):" in text
        assert "Status: Out of Service" in text
        assert "Total Dispensed: 40.00" in text
        assert "Max Rate: 120.00" in text
