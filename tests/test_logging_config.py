"""로깅 설정 테스트."""

import logging

from app.core.logger import FALLBACK_HANDLER_NAME, get_logger
from app.core.logging_config import build_logging_config, configure_logging


def test_build_logging_config_applies_level() -> None:
    config = build_logging_config("debug")

    assert config["root"]["level"] == "DEBUG"
    assert config["loggers"]["app"]["level"] == "DEBUG"
    assert config["loggers"]["uvicorn.access"]["level"] == "DEBUG"


def test_configure_logging_detaches_fallback_handler(monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger(), "handlers", [])
    logger = get_logger("app.tests.fallback")

    assert [handler.get_name() for handler in logger.handlers] == [FALLBACK_HANDLER_NAME]
    assert logger.propagate is False

    configure_logging("INFO")

    assert logger.handlers == []
    assert logger.propagate is True
