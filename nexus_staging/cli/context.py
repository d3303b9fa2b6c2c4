"""Helpers turning CLI context and config file values into PublishSettings."""

import logging
import sys
from typing import Any, Dict

import click
from pydantic import ValidationError

from ..models.context import PublishSettings
from ..utils.config_manager import ConfigManager


def load_config_section(config_path: Any) -> Dict[str, Any]:
    """
    Read the ``[nexus]`` config section.

    An explicitly given file must exist; the default file is optional.
    """
    manager = ConfigManager(config_path)
    if config_path is None and not manager.exists():
        logging.debug("No configuration file at %s, using defaults", manager.config_path)
        return {}
    return manager.get_section()


def publish_settings_from_context(ctx: click.Context, **overrides: Any) -> PublishSettings:
    """
    Merge config file values with group and command options.

    Options that were not given (None) leave the config value in place.

    Raises:
        pydantic.ValidationError: If the merged values are invalid
    """
    values = dict(load_config_section(ctx.obj["config"]))
    shared = {key: ctx.obj[key] for key in ("server_url", "username", "password")}
    for key, value in {**shared, **overrides}.items():
        if value is not None:
            values[key] = value
    return PublishSettings(**values)


def log_validation_error(error: ValidationError) -> None:
    """Log each problem found while validating settings."""
    logging.error("Unable to validate settings:")
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "settings"
        logging.error("%s: %s", location, detail["msg"])


def settings_or_exit(ctx: click.Context, **overrides: Any) -> PublishSettings:
    """Build PublishSettings, logging the problem and exiting with status 1 on failure."""
    try:
        return publish_settings_from_context(ctx, **overrides)
    except ValidationError as e:
        log_validation_error(e)
    except (FileNotFoundError, ValueError) as e:
        logging.error("%s", e)
    sys.exit(1)


__all__ = ["load_config_section", "publish_settings_from_context", "log_validation_error", "settings_or_exit"]
