"""Configuration file loading and validation helpers."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from gam.common import create_logger
from gam.flavors import BuiltinFlavor, CustomFlavor, Flavor, flavor_label

from .models import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    ProjectConfig,
)

logger = create_logger("config")


def config_filename(flavor: Flavor) -> str | None:
    """Name of the configuration document for a flavor, if it has one."""
    match flavor:
        case BuiltinFlavor.GIN:
            return "config-gin.yaml"
        case BuiltinFlavor.GRPC:
            return "config-grpc.yaml"
        case BuiltinFlavor.HTTP:
            return "config-http.yaml"
        case CustomFlavor():
            return None


def load_project_config(flavor: Flavor, configs_dir: Path) -> Result[ProjectConfig, ConfigError]:
    """Load and validate the folder layout for a flavor from ``configs_dir``."""
    label = flavor_label(flavor)
    filename = config_filename(flavor)
    if filename is None:
        logger.warning("No config document for flavor", flavor=label)
        return Err(
            ConfigNotFoundError(
                flavor=label,
                message=f"No configuration document is defined for flavor '{label}'.",
            )
        )

    path = configs_dir / filename
    logger.debug("Loading config file", flavor=label, path=str(path))

    if not path.exists() or not path.is_file():
        logger.warning("Config file not found", flavor=label, path=str(path))
        return Err(
            ConfigNotFoundError(
                flavor=label,
                expected_path=path,
                message=f"Configuration file not found for flavor '{label}'.",
            ),
        )

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Config file read error", flavor=label, path=str(path), error=str(exc))
        return Err(
            ConfigIOError(
                flavor=label,
                path=path,
                message=str(exc),
            ),
        )

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        logger.error(
            "Config YAML parse error",
            flavor=label,
            path=str(path),
            line=line,
            column=column,
            error=str(exc),
        )
        return Err(
            ConfigYamlError(
                flavor=label,
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            ),
        )

    if data is None:
        data = {}

    if not isinstance(data, dict):
        logger.error("Config must be a mapping", flavor=label, path=str(path))
        return Err(
            ConfigValidationError(
                flavor=label,
                path=path,
                field=None,
                message="Configuration root must be a mapping of keys to values.",
            ),
        )

    try:
        config = ProjectConfig.model_validate(data)
    except ValidationError as exc:
        error_details = exc.errors()
        field = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
            message = first.get("msg", message)
        logger.error("Config validation error", flavor=label, path=str(path), field=field, error=message)
        return Err(
            ConfigValidationError(
                flavor=label,
                path=path,
                field=field,
                message=message,
            ),
        )

    logger.info("Config file found", flavor=label, service_name=config.service_name)
    return Ok(config)
