"""Logging utilities for gam using Loguru.

This module provides logging configuration for both CLI and library usage:
- CLI usage: stderr output, plus an optional file with rotation and retention
- Library usage: Logging disabled by default, can be enabled by library users
"""

import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from gam.constants import APP_NAME

from .models import AppInfo


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool = Field(default=True)
    log_level: Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_file: str | None = Field(default=None)
    rotation: str = Field(default="1 MB")
    retention: str = Field(default="7 days")
    format: Literal["json", "text"] = Field(default="text")


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig) -> list[int]:
    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    handler_ids = [
        logger.add(
            sys.stderr,
            level=config.log_level,
            format=_get_console_format,
            colorize=True,
            diagnose=(app_info.environment == "dev"),
        )
    ]

    if config.log_file:
        log_file = Path(config.log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)

        if config.format == "json":
            handler_ids.append(
                logger.add(
                    log_file,
                    level=config.log_level,
                    rotation=config.rotation,
                    retention=config.retention,
                    serialize=True,
                    diagnose=(app_info.environment == "dev"),
                )
            )
        else:
            handler_ids.append(
                logger.add(
                    log_file,
                    level=config.log_level,
                    rotation=config.rotation,
                    retention=config.retention,
                    format=_get_text_format(),
                    diagnose=(app_info.environment == "dev"),
                )
            )

    logger.debug(
        "CLI logging initialized",
        log_file=config.log_file,
        level=config.log_level,
        format=config.format,
    )

    return handler_ids


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: str = "INFO") -> int:
    logger.enable(APP_NAME)
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )

    return handler_id


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


@lru_cache
def _get_color_from_name(name: str | None) -> str:
    """Map a scope name to a predefined color in a deterministic way."""
    colors = [
        "blue",
        "magenta",
        "yellow",
        "white",
        "light-blue",
        "light-green",
        "light-magenta",
        "light-yellow",
    ]

    if not name:
        return colors[0]

    return colors[sum(ord(c) for c in name) % len(colors)]


def _get_console_format(record: "loguru.Record") -> str:
    color_name = _get_color_from_name(record["extra"].get("scope"))

    extra_fields = {k: v for k, v in record["extra"].items() if k not in ["scope", "env"]}
    extra_str = ""
    if extra_fields:
        extra_str = " | " + " ".join(f"{k}={v}" for k, v in extra_fields.items())

    # Extra values must not be read as format fields or color markup.
    extra_str = extra_str.replace("{", "{{").replace("}", "}}").replace("<", r"\<")

    return (
        f"<{color_name}>[{{extra[scope]}}]</> | "
        "<level>{level: <8}</level> | "
        "<level>{message}</level>"
        f"{extra_str}\n{{exception}}"
    )


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
