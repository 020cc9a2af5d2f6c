"""Logging setup for the airport query engine.

This module configures the standard logging package from a YAML file:
console output, an optional combined log file in a platform-aware
directory with startup rotation, and per-component log levels.

Platform-specific log locations:
    - macOS: ~/Library/Logs/AirportData/airport_data.log
    - Linux: ~/.airport_data/logs/airport_data.log
    - Windows: %AppData%/AirportData/Logs/airport_data.log

Typical usage example:
    from airport_data.core.logging_system import get_logger, initialize_logging

    initialize_logging("config/logging.yaml")
    log = get_logger("airport_data.airports.dataset")
    log.info("Loaded %d airports", count)
"""

import logging
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

DEFAULT_LOG_FILENAME = "airport_data.log"

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_initialized = False


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/AirportData
        - Linux: ~/.airport_data/logs
        - Windows: %AppData%/AirportData/Logs
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "AirportData"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "AirportData" / "Logs"
    else:
        return Path.home() / ".airport_data" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = DEFAULT_LOG_FILENAME, keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames the current log to <name>.1, shifts older logs up by one and
    deletes the log beyond keep_count.

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
    """Initialize logging from a YAML configuration.

    Args:
        config_path: Path to a logging configuration YAML file. If None,
            the default configuration is used.
        use_platform_dir: If True, write the combined log to the platform
            log directory instead of the configured log_dir.

    Raises:
        LoggingError: If the configuration file cannot be loaded.

    Examples:
        >>> initialize_logging("config/logging.yaml")
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")
        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
        if not isinstance(loaded, dict):
            raise LoggingError(f"Logging config root must be a mapping: {config_path}")
        _logging_config = _merge_defaults(loaded)
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    combined = _logging_config["combined_log"]
    if combined.get("enabled", False):
        log_dir = Path(_logging_config["log_dir"])
        log_dir.mkdir(parents=True, exist_ok=True)
        rotate_logs(log_dir, combined.get("filename", DEFAULT_LOG_FILENAME), combined.get("backup_count", 5))

    _configure_package_logger()
    _loggers_cache.clear()
    _initialized = True

    # Apply per-component levels to loggers created with logging.getLogger
    for name in (_logging_config.get("components") or {}):
        get_logger(name)


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration.

    The combined log file is off by default; embedding applications turn
    it on through their logging YAML.
    """
    return {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": False,
            "filename": DEFAULT_LOG_FILENAME,
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "components": {},
    }


def _merge_defaults(loaded: dict[str, Any]) -> dict[str, Any]:
    config = _get_default_config()
    for key, value in loaded.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key] = {**config[key], **value}
        else:
            config[key] = value
    return config


def _configure_package_logger() -> None:
    """Attach the configured handlers to the package logger."""
    package_logger = logging.getLogger("airport_data")
    package_logger.setLevel(getattr(logging, _logging_config.get("level", "INFO")))

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console = _logging_config.get("console", {})
    if console.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console.get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter())
        package_logger.addHandler(console_handler)

    combined = _logging_config.get("combined_log", {})
    if combined.get("enabled", False):
        log_file = Path(_logging_config.get("log_dir", "logs")) / combined.get("filename", DEFAULT_LOG_FILENAME)
        # Plain FileHandler: rotation already happened at startup
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_get_formatter())
        package_logger.addHandler(file_handler)


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


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached. A component can be given its own level, or be
    disabled, under the 'components' section of the logging YAML.

    Args:
        name: Logger name (typically the module's __name__).

    Returns:
        Configured logger instance.

    Examples:
        >>> log = get_logger("airport_data.airports.engine")
        >>> log.debug("Engine ready: %d airports", count)
    """
    if not _initialized:
        initialize_logging(use_platform_dir=False)

    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    component_config = (_logging_config.get("components") or {}).get(name, {})

    if component_config.get("enabled", True):
        if "level" in component_config:
            logger.setLevel(getattr(logging, component_config["level"]))
    else:
        logger.disabled = True

    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close the package handlers and forget the configuration.

    Should be called at application shutdown, or before initialize_logging
    is called again with a different configuration.
    """
    global _initialized

    package_logger = logging.getLogger("airport_data")
    for handler in list(package_logger.handlers):
        handler.flush()
        handler.close()
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)

    for logger in _loggers_cache.values():
        logger.disabled = False
        logger.setLevel(logging.NOTSET)
    _loggers_cache.clear()
    _initialized = False
