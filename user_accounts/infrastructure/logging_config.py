import logging
import structlog

from ..config import settings


def configure_logging(level: str | None = None, json: bool | None = None) -> None:
    """Настройка структурированного логирования (по умолчанию из settings)"""
    level = level or settings.LOG_LEVEL
    json = settings.LOG_JSON if json is None else json
    log_level = getattr(logging, level.upper(), logging.INFO)

    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
