"""Tests for the command-line entry point."""

import argparse
import tempfile
from pathlib import Path

import pytest
import yaml

from fuelstation.main import main, parse_args, parse_request
from fuelstation.models import FuelType


def _write_logging_config(tmpdir: str) -> Path:
    path = Path(tmpdir) / "logging.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "level": "DEBUG",
                "log_dir": str(Path(tmpdir) / "logs"),
                "console": {"enabled": False},
            }
        ),
        encoding="utf-8",
    )
    return path


class TestParseRequest:
    """Tests for TYPE:QUANTITY parsing."""

    def test_valid(self) -> None:
        """Test a well-formed request."""
        assert parse_request("premium:20") == (FuelType.PREMIUM, 20.0)
        assert parse_request("Electric:12.5") == (FuelType.ELECTRIC, 12.5)

    @pytest.mark.parametrize("value", ["regular", "kerosene:10", "diesel:lots"])
    def test_invalid(self, value) -> None:
        """Test malformed requests are rejected."""
        with pytest.raises(argparse.ArgumentTypeError):
            parse_request(value)

    def test_parse_args_defaults(self) -> None:
        """Test the bundled station config is the default."""
        args = parse_args([])

        assert args.station.endswith("station.yaml")
        assert args.request == []
        assert args.local_logs is False


class TestMain:
    """Tests for running the simulator end to end."""

    def test_serves_requests_and_reports(self, capsys) -> None:
        """Test requests are served and the report printed."""
        with tempfile.TemporaryDirectory() as tmpdir:
            exit_code = main(
                [
                    "--logging-config",
                    str(_write_logging_config(tmpdir)),
                    "--local-logs",
                    "--request",
                    "regular:40",
                    "--request",
                    "regular:60",
                    "--request",
                    "electric:50",
                ]
            )

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "regular 40.00: served" in out
        assert "regular 60.00: rejected" in out
        assert "electric 50.00: served" in out
        assert "=== Dispenser Status Report ===" in out
        assert "Pump 1 (regular, StandardFuelDispenser):" in out
        assert "  Total Dispensed: 40.00" in out

    @pytest.mark.parametrize(
        "station_section",
        [
            {"inventory": {"kerosene": {"available_quantity": 100.0}}},
            {"inventory": ["regular", "diesel"]},
            {"prices": {"regular": "cheap"}},
            {
                "dispensers": [
                    {
                        "kind": "standard",
                        "pump_number": 1,
                        "fuel_type": "regular",
                        "operational": "false",
                    }
                ]
            },
        ],
    )
    def test_malformed_station_exits_1(self, station_section, capsys) -> None:
        """Test malformed station YAML is reported instead of crashing."""
        with tempfile.TemporaryDirectory() as tmpdir:
            station_path = Path(tmpdir) / "station.yaml"
            station_path.write_text(
                yaml.safe_dump({"station": {"name": "Broken", **station_section}}),
                encoding="utf-8",
            )
            exit_code = main(
                [
                    "--logging-config",
                    str(_write_logging_config(tmpdir)),
                    "--local-logs",
                    "--station",
                    str(station_path),
                ]
            )

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_logging_config(self, capsys) -> None:
        """Test a missing logging config exits with status 1."""
        with tempfile.TemporaryDirectory() as tmpdir:
            exit_code = main(["--logging-config", str(Path(tmpdir) / "nope.yaml"), "--local-logs"])

        assert exit_code == 1
        assert "Logging config file not found" in capsys.readouterr().err

    def test_bad_station_config(self, capsys) -> None:
        """Test a missing station file exits with status 1."""
        with tempfile.TemporaryDirectory() as tmpdir:
            exit_code = main(
                [
                    "--logging-config",
                    str(_write_logging_config(tmpdir)),
                    "--local-logs",
                    "--station",
                    str(Path(tmpdir) / "missing.yaml"),
                ]
            )

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err
