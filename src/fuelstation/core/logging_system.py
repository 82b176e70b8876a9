"""Logging setup for the fuel station components.

This module configures the standard ``logging`` package from a YAML file,
hands out per-component loggers, and rotates the combined log file each
time the station is started.

Platform-specific log locations:
    - macOS: ~/Library/Logs/FuelStation/fuelstation.log
    - Linux: ~/.fuelstation/logs/fuelstation.log
    - Windows: %AppData%/FuelStation/Logs/fuelstation.log

Typical usage example:
    from fuelstation.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    logger = get_logger(__name__)
    logger.info("Pump %d ready", pump_number)

Library modules only call ``get_logger``. Handlers are attached when the
application calls ``initialize_logging``; until then records propagate to
whatever the host program has configured.
"""

import logging
import logging.handlers
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_configured_names: set[str] = set()
_initialized = False

DEFAULT_LOG_FILENAME = "fuelstation.log"


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/FuelStation
        - Linux: ~/.fuelstation/logs
        - Windows: %AppData%/FuelStation/Logs
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "FuelStation"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "FuelStation" / "Logs"
    else:
        return Path.home() / ".fuelstation" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = DEFAULT_LOG_FILENAME, keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    The current log becomes ``<name>.1``, older logs shift up by one and
    anything past ``keep_count`` is deleted.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(config_path: str | Path | None = None, use_platform_dir: bool = True) -> None:
    """Initialize the logging system from YAML configuration.

    Call once at application startup, before the first dispense request.

    Args:
        config_path: Path to a logging configuration YAML file.
            If None, the built-in defaults are used.
        use_platform_dir: If True, write logs to the platform log directory.
            If False, use ``log_dir`` from the config (development/testing).

    Raises:
        LoggingError: If the configuration cannot be loaded.

    Examples:
        >>> initialize_logging("config/logging.yaml", use_platform_dir=False)
        >>> get_logger("fuelstation.dispensers").info("Logging ready")
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                _logging_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", True):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        rotate_logs(
            log_dir,
            combined.get("filename", DEFAULT_LOG_FILENAME),
            combined.get("backup_count", 5),
        )

    _configure_root_logger()

    # Covers loggers handed out before initialization and plain getLogger users
    _configured_names.clear()
    for name in set(_loggers_cache) | set(_logging_config.get("components", {})):
        _apply_component_config(name, logging.getLogger(name))

    _initialized = True


def is_initialized() -> bool:
    """Return True once ``initialize_logging`` has completed."""
    return _initialized


def _get_default_config() -> dict[str, Any]:
    return {
        "version": 1,
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": DEFAULT_LOG_FILENAME,
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "INFO",
        },
        "components": {},
    }


def _configure_root_logger() -> None:
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # filtered per handler
    root_logger.handlers.clear()

    console = _logging_config.get("console", {})
    if console.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console.get("level", "INFO")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", True):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / combined.get("filename", DEFAULT_LOG_FILENAME)

        # Rotation already happened on startup
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(getattr(logging, _logging_config.get("level", "DEBUG")))
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def _apply_component_config(name: str, logger: logging.Logger) -> None:
    if name in _configured_names:
        return
    _configured_names.add(name)

    component_config = _logging_config.get("components", {}).get(name, {})

    if not component_config.get("enabled", True):
        logger.disabled = True
        return

    logger.disabled = False
    if "level" in component_config:
        logger.setLevel(getattr(logging, component_config["level"]))

    if component_config.get("dedicated_file", False):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / f"{name}.log",
            maxBytes=component_config.get("max_bytes", 10485760),
            backupCount=component_config.get("backup_count", 5),
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a station component.

    Loggers are cached. Each one can be tuned in the logging YAML under the
    ``components`` section (level, enabled, dedicated_file).

    Args:
        name: Logger name, typically the module ``__name__``.

    Returns:
        Logger instance.

    Note:
        Use lazy %-formatting instead of f-strings.
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    if _initialized:
        _apply_component_config(name, logger)

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close all handlers and forget the current configuration."""
    global _initialized

    logging.shutdown()
    for name in [""] + sorted(_configured_names):
        logger = logging.getLogger(name or None)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
    _loggers_cache.clear()
    _configured_names.clear()
    _initialized = False


class LoggerMixin:
    """Mixin that gives a class a ``self._log`` logger.

    Examples:
        >>> class Pump(LoggerMixin):
        ...     def __init__(self):
        ...         self.attach_logger("fuelstation.pump")
    """

    def attach_logger(self, name: str) -> None:
        self._log = get_logger(name)

    def log_debug(self, message: str, *args: Any) -> None:
        if hasattr(self, "_log"):
            self._log.debug(message, *args)

    def log_info(self, message: str, *args: Any) -> None:
        if hasattr(self, "_log"):
            self._log.info(message, *args)

    def log_warning(self, message: str, *args: Any) -> None:
        if hasattr(self, "_log"):
            self._log.warning(message, *args)
