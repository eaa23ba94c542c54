"""Project loggers.

Loggers write day-stamped files under ``<project>/logs/<subdir>/`` and,
optionally, to the console. ``get_app_logger`` returns the logger used by
use cases and adapters; ``get_usage_logger`` records entry point
invocations.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from meal_billing.utils.utils import get_project_root

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class LoggerBuilder:
    """Fluent builder for configured ``logging.Logger`` instances."""

    def __init__(self) -> None:
        self._name = "app"
        self._subdir = "app"
        self._prefix = "app_logs"
        self._console = True
        self._level = logging.INFO
        self._formatter_factory: Callable[[], logging.Formatter] = (
            LoggerBuilder._default_formatter
        )
        self._file_handler_factory: Callable[
            [Path, logging.Formatter], logging.Handler
        ] = LoggerBuilder._default_file_handler
        self._console_handler_factory: Callable[
            [logging.Formatter], logging.Handler
        ] = LoggerBuilder._default_console_handler

    def name(self, value: str) -> "LoggerBuilder":
        self._name = value
        return self

    def subdir(self, value: str) -> "LoggerBuilder":
        self._subdir = value
        return self

    def prefix(self, value: str) -> "LoggerBuilder":
        self._prefix = value
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, value: int) -> "LoggerBuilder":
        self._level = value
        return self

    def formatter(
        self,
        factory: Callable[[], logging.Formatter],
    ) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(
        self,
        factory: Callable[[Path, logging.Formatter], logging.Handler],
    ) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(
        self,
        factory: Callable[[logging.Formatter], logging.Handler],
    ) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Create the logger, or return it when already configured.

        Returns:
            logging.Logger: Logger with file and optional console handlers.
        """
        logger = logging.getLogger(self._name)
        logger.setLevel(self._level)
        if logger.handlers:
            return logger

        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"

        fmt = self._formatter_factory()
        logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return datetime.now().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(DEFAULT_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.Handler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(fmt: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper delegating to a built ``logging.Logger``."""

    _instance: Optional["Logger"] = None
    _subdir = "app"
    _prefix = "app_logs"
    _console = True

    def __new__(cls, name: str = "app") -> "Logger":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = (
                LoggerBuilder()
                .name(name)
                .subdir(cls._subdir)
                .prefix(cls._prefix)
                .console(cls._console)
                .build()
            )
            cls._instance = instance
        return cls._instance

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def critical(self, message: str) -> None:
        self.logger.critical(message)


class AppLogger(Logger):
    """Application logger used by use cases and adapters."""

    _instance: Optional["AppLogger"] = None


class UsageLogger(Logger):
    """Logger recording entry point usage."""

    _instance: Optional["UsageLogger"] = None
    _subdir = "usage"
    _prefix = "usage_logs"
    _console = False


def get_app_logger() -> AppLogger:
    """Return the shared application logger."""
    return AppLogger("meal_billing")


def get_usage_logger() -> UsageLogger:
    """Return the shared usage logger."""
    return UsageLogger("meal_billing.usage")


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "UsageLogger",
    "get_app_logger",
    "get_usage_logger",
]
