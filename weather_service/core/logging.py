"""Logging setup for the service.

Two channels share the ``weather_service`` logger:

- application records (INFO and above by default) go to the console and,
  when LOG_DIR is set, to ``application.log``;
- inbound request lines are logged at the custom ``HTTP`` level and, when
  LOG_DIR is set, are the only records written to ``http.log``.
"""
import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from weather_service.config import Settings

LOGGER_NAME = "weather_service"
LOG_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"

HTTP = 15
logging.addLevelName(HTTP, "HTTP")


class HttpOnlyFilter(logging.Filter):
    """Pass only records logged at the HTTP level."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno == HTTP


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach handlers to the service logger and return it.

    Safe to call more than once; previously attached handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level = logging.getLevelName(settings.LOG_LEVEL)
    logger.setLevel(min(level, HTTP))
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if settings.LOG_DIR:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)

        application_file = logging.FileHandler(log_dir / "application.log")
        application_file.setLevel(level)
        application_file.setFormatter(formatter)
        logger.addHandler(application_file)

        http_file = logging.FileHandler(log_dir / "http.log")
        http_file.setLevel(HTTP)
        http_file.addFilter(HttpOnlyFilter())
        http_file.setFormatter(formatter)
        logger.addHandler(http_file)

    # Handlers are attached here; don't duplicate through the root logger
    logger.propagate = False
    return logger


REDACTED_QUERY_KEYS = ("apikey",)


def log_http_request(
    logger: logging.Logger,
    ip: Optional[str],
    method: str,
    path: str,
    query: Mapping[str, Any],
) -> None:
    """Log one inbound request line on the HTTP channel.

    The inbound gate key is masked when it was sent as a query parameter.
    """
    safe_query = {key: ("***" if key in REDACTED_QUERY_KEYS else value) for key, value in query.items()}
    logger.log(HTTP, "IP: %s %s %s %s", ip, method, path, json.dumps(safe_query))
