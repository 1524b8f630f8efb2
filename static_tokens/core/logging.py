# static_tokens/core/logging.py
"""
Centralized logging system for the static token generator.

Provides:
- StaticTokensLogger: Global logging configuration
- LoggingMixin: Consistent logging behavior for classes
- Utility functions: Context logging helpers
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime


ROOT_LOGGER_NAME = 'static_tokens'


class StaticTokensFormatter(logging.Formatter):
    """Plain log line followed by any structured context attached to the record."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        base_msg = f"{timestamp} - {record.name} - {record.levelname} - {record.getMessage()}"

        context_parts = []
        context_attrs = ['network', 'denom', 'table', 'path', 'count', 'error']

        for attr in context_attrs:
            if hasattr(record, attr):
                context_parts.append(f"{attr}={getattr(record, attr)}")

        if context_parts:
            return f"{base_msg} | {' '.join(context_parts)}"

        return base_msg


class StaticTokensLogger:
    """Global logging configuration and management"""

    _configured = False

    @classmethod
    def configure(cls,
                  log_dir: Optional[Path] = None,
                  log_level: str = "INFO",
                  force: bool = False) -> None:

        if cls._configured and not force:
            return

        level = getattr(logging, log_level.upper())

        if log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)

        root_logger.handlers.clear()

        formatter = StaticTokensFormatter()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        if log_dir:
            file_handler = logging.FileHandler(log_dir / 'static_tokens.log')
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

            error_handler = logging.FileHandler(log_dir / 'static_tokens_errors.log')
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(formatter)
            root_logger.addHandler(error_handler)

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if not name.startswith(ROOT_LOGGER_NAME):
            name = f'{ROOT_LOGGER_NAME}.{name}'

        return logging.getLogger(name)


# === Utility Functions ===

def get_class_logger(cls_instance) -> logging.Logger:
    module = cls_instance.__class__.__module__
    class_name = cls_instance.__class__.__name__

    prefix = f'{ROOT_LOGGER_NAME}.'
    if module.startswith(prefix):
        module = module[len(prefix):]

    return StaticTokensLogger.get_logger(f"{module}.{class_name}")


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    if logger.isEnabledFor(level):
        record = logger.makeRecord(
            logger.name, level, "", 0, message, (), None
        )
        for key, value in context.items():
            setattr(record, key, value)
        logger.handle(record)


# === LoggingMixin for Classes ===

class LoggingMixin:
    """
    Mixin to add consistent logging behavior to any class.

    Creates a class-specific logger under the ``static_tokens`` hierarchy
    and exposes level helpers that accept structured context keywords.
    """

    @property
    def logger(self) -> logging.Logger:
        if not hasattr(self, '_logger'):
            self._logger = get_class_logger(self)
        return self._logger

    def log_debug(self, message: str, **context) -> None:
        log_with_context(self.logger, logging.DEBUG, message, **context)

    def log_info(self, message: str, **context) -> None:
        log_with_context(self.logger, logging.INFO, message, **context)

    def log_warning(self, message: str, **context) -> None:
        log_with_context(self.logger, logging.WARNING, message, **context)

    def log_error(self, message: str, **context) -> None:
        log_with_context(self.logger, logging.ERROR, message, **context)
