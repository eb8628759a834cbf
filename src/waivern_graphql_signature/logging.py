"""Python-standard logging configuration for the wgs CLI.

The library itself only emits records through ``logging.getLogger(__name__)``;
handlers are configured here with logging.config.dictConfig() from a YAML file
packaged under waivern_graphql_signature/data/.
"""

from __future__ import annotations

import logging
import logging.config
import os
import sys
from importlib.resources import files
from pathlib import Path
from typing import Any, cast

import yaml
from rich.console import Console
from rich.logging import RichHandler

_CONFIG_ENV_VAR = "WGS_LOG_CONFIG"


class LoggingError(Exception):
    """Exception raised for logging configuration errors."""

    pass


def stderr_rich_handler(**kwargs: Any) -> RichHandler:  # noqa: ANN401
    """Build a RichHandler that writes to stderr, leaving stdout for output."""
    return RichHandler(console=Console(stderr=True), **kwargs)


def get_config_path() -> Path:
    """Get the path to the logging configuration file.

    The ``WGS_LOG_CONFIG`` environment variable takes priority over the
    packaged ``logging.yaml``.

    Returns:
        Path to the logging configuration file

    Raises:
        LoggingError: If the configured file does not exist

    """
    override = os.getenv(_CONFIG_ENV_VAR)
    if override:
        config_path = Path(override)
    else:
        config_path = Path(str(files(__package__) / "data" / "logging.yaml"))

    if not config_path.exists():
        raise LoggingError(
            f"No logging configuration found. Expected at: {config_path}"
        )

    return config_path


def load_config(config_path: Path) -> dict[str, Any]:
    """Load logging configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Logging configuration dictionary

    Raises:
        LoggingError: If configuration cannot be loaded or parsed

    """
    try:
        with open(config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f)

        if not isinstance(config, dict):
            raise LoggingError(f"Invalid configuration format in {config_path}")

        return cast(dict[str, Any], config)

    except yaml.YAMLError as e:
        raise LoggingError(f"Failed to parse YAML config {config_path}: {e}") from e
    except OSError as e:
        raise LoggingError(f"Failed to read config file {config_path}: {e}") from e


def setup_logging(
    config_path: Path | str | None = None,
    level: str | None = None,
    force_basic: bool = False,
) -> None:
    """Configure logging using Python standard dictConfig.

    Args:
        config_path: Path to logging configuration file
        level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        force_basic: Force basic console logging (fallback mode)

    """
    if force_basic:
        _setup_basic_logging(level or "INFO")
        return

    try:
        if isinstance(config_path, str):
            config_path = Path(config_path)
        elif config_path is None:
            config_path = get_config_path()

        config = load_config(config_path)

        if level:
            _apply_level_override(config, level)

        logging.config.dictConfig(config)
        logging.getLogger(__name__).debug("Logging configured from: %s", config_path)

    except (LoggingError, ImportError, KeyError, ValueError, TypeError) as e:
        fallback_level = level or "INFO"
        _setup_basic_logging(fallback_level)

        logging.getLogger(__name__).warning(
            "Failed to configure logging from file (%s), using basic console logging at %s level",
            e,
            fallback_level,
        )


def _apply_level_override(config: dict[str, Any], level: str) -> None:
    """Set every configured logger to the given level.

    Handler levels are only ever lowered, so a verbose override is not
    filtered out by a stricter handler.

    Raises:
        LoggingError: If the level name is unknown

    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise LoggingError(f"Invalid log level: {level}")

    level = level.upper()
    for logger_name in config.get("loggers", {}):
        config["loggers"][logger_name]["level"] = level

    if "root" in config:
        config["root"]["level"] = level

    for handler_name, handler_config in config.get("handlers", {}).items():
        if isinstance(handler_config, dict) and "level" in handler_config:
            handler_level_str = cast(str, handler_config["level"])
            current_handler_level = getattr(logging, handler_level_str, logging.INFO)
            if numeric_level < current_handler_level:
                config["handlers"][handler_name]["level"] = level


def _setup_basic_logging(level: str) -> None:
    """Set up basic console logging as fallback.

    Args:
        level: Logging level string

    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )
