"""Resource path resolution for bundled configuration files.

The default station layout and logging configuration ship inside the
package under ``fuelstation/config``.

Typical usage:
    from fuelstation.core.resource_path import get_config_path

    station_config = get_config_path("station.yaml")
"""

from pathlib import Path


def get_package_root() -> Path:
    """Get the installed ``fuelstation`` package directory.

    Returns:
        Path to ``src/fuelstation`` when running from source, or the
        package directory inside site-packages when installed.
    """
    # src/fuelstation/core/resource_path.py -> src/fuelstation
    return Path(__file__).resolve().parent.parent


def get_resource_path(relative_path: str) -> Path:
    """Get absolute path to a resource shipped with the package.

    Args:
        relative_path: Path relative to the package root
            (e.g. ``"config/logging.yaml"``).
    """
    return get_package_root() / relative_path


def get_config_path(config_file: str) -> Path:
    """Get path to a bundled configuration file.

    Examples:
        >>> get_config_path("station.yaml").name
        'station.yaml'
    """
    return get_resource_path(f"config/{config_file}")
