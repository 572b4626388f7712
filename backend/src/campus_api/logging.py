"""Structured logging configuration.

structlog events and stdlib records (uvicorn, sqlalchemy) share one
processor chain and one stdout handler. LOG_FORMAT picks the renderer:
"json" for deployed environments, "console" for a readable local terminal.
Anything bound with structlog.contextvars (request_id, method, path) is
merged into every event logged while handling that request.
"""

import logging
import logging.config
import sys
from typing import Any, Literal

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger
from structlog.types import Processor

# Chatty third-party loggers and the level they are capped at.
QUIET_LOGGERS: dict[str, str] = {
    "sqlalchemy.engine": "WARNING",
    "asyncpg": "WARNING",
    "uvicorn.access": "WARNING",
    "httpx": "WARNING",
}

LogFormat = Literal["json", "console"]


class LoggingSettings(BaseSettings):
    """Logging settings from environment variables."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: LogFormat = Field(default="json", alias="LOG_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def build_renderer(log_format: LogFormat) -> Processor:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure_logging(settings: LoggingSettings) -> None:
    """Configure structlog and stdlib logging. The last call wins."""
    level = settings.log_level.upper()
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    loggers: dict[str, Any] = {name: {"level": cap} for name, cap in QUIET_LOGGERS.items()}
    loggers["campus_api"] = {"level": level}

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "structlog": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": shared_processors,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        build_renderer(settings.log_format),
                    ],
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "structlog",
                    "stream": sys.stdout,
                },
            },
            "root": {"handlers": ["default"], "level": level},
            "loggers": loggers,
        }
    )


configure_logging(LoggingSettings())


def get_logger(name: str) -> BoundLogger:
    """Get a structured logger, typically with ``get_logger(__name__)``.

    Example:
        logger = get_logger(__name__)
        logger.info("building_saved", building_id=7)
        # {"event": "building_saved", "building_id": 7, "level": "info", ...}
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
