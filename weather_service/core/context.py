"""Explicit application context passed to components at construction."""
import logging
from dataclasses import dataclass

from weather_service.config import Settings


@dataclass(frozen=True)
class AppContext:
    """Settings and logger shared by every component of one application."""
    settings: Settings
    logger: logging.Logger

    def child_logger(self, suffix: str) -> logging.Logger:
        return self.logger.getChild(suffix)
