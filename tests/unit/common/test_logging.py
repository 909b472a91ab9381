from __future__ import annotations

from loguru import logger

from gam.common import create_logger
from gam.common import logging as gam_logging
from gam.constants import APP_NAME


def test_create_logger_binds_scope() -> None:
    records: list[dict[str, object]] = []
    logger.enable(APP_NAME)
    handler_id = logger.add(lambda message: records.append(message.record["extra"]), level="DEBUG")
    try:
        create_logger("scaffold").info("hello", name="demo")
    finally:
        logger.remove(handler_id)
        logger.disable(APP_NAME)

    assert len(records) == 1
    assert records[0]["scope"] == "scaffold"
    assert records[0]["name"] == "demo"


def test_create_logger_returns_loguru_logger_annotation() -> None:
    assert create_logger.__annotations__["return"] == "loguru.Logger"
    assert not hasattr(gam_logging, "Logger")
