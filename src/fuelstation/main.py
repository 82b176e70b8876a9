"""Fuel station command-line entry point.

Builds a station from YAML, serves the requested fuel, and prints the
dispenser status report.

Typical usage:
    fuelstation --request regular:40 --request electric:50
    fuelstation --station my_station.yaml --request diesel:25
"""

import argparse
import sys

from fuelstation.core.config import ConfigError
from fuelstation.core.logging_system import (
    LoggingError,
    get_logger,
    initialize_logging,
    shutdown_logging,
)
from fuelstation.core.registry import RegistryError
from fuelstation.core.resource_path import get_config_path
from fuelstation.dispensers.manager import format_report
from fuelstation.models import FuelType
from fuelstation.station.builder import StationBuilder

logger = get_logger(__name__)


def parse_request(value: str) -> tuple[FuelType, float]:
    """Parse a ``TYPE:QUANTITY`` request such as ``premium:20``.

    Raises:
        argparse.ArgumentTypeError: If the value is malformed.
    """
    type_name, sep, quantity = value.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"Expected TYPE:QUANTITY, got {value!r}")

    try:
        return FuelType.parse(type_name), float(quantity)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fuel station dispenser simulator")

    parser.add_argument(
        "--station",
        type=str,
        default=str(get_config_path("station.yaml")),
        help="Station layout YAML (default: bundled station.yaml)",
    )
    parser.add_argument(
        "--request",
        type=parse_request,
        action="append",
        default=[],
        metavar="TYPE:QUANTITY",
        help="Fuel request to serve, e.g. regular:40 (repeatable)",
    )
    parser.add_argument(
        "--logging-config",
        type=str,
        default=str(get_config_path("logging.yaml")),
        help="Logging configuration YAML",
    )
    parser.add_argument(
        "--local-logs",
        action="store_true",
        help="Write logs to the log_dir from the logging config instead of the platform directory",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        0 on success, 1 if logging could not be set up or the station could
        not be built.
    """
    args = parse_args(argv)

    try:
        initialize_logging(args.logging_config, use_platform_dir=not args.local_logs)
    except LoggingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        station = StationBuilder().build(args.station)
    except (ConfigError, RegistryError) as e:
        logger.error("Could not build station: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        shutdown_logging()
        return 1

    for fuel_type, quantity in args.request:
        served = station.dispensers.process_fuel_request(fuel_type, quantity)
        print(f"{fuel_type.value} {quantity:.2f}: {'served' if served else 'rejected'}")

    print(format_report(station.dispensers.generate_report()))
    shutdown_logging()
    return 0


if __name__ == "__main__":
    sys.exit(main())
