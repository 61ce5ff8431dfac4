"""
Logging configuration with plain text or JSON output on stdout.
"""
import json
import logging
import sys
from typing import Any

from cryptomanager.core.config import Settings, get_settings

_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log_dict: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_dict["exception"] = self.formatException(record.exc_info)

        # Fields passed through extra=
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_dict[key] = value

        return json.dumps(log_dict, ensure_ascii=False, default=str)


class LoggingConfig:
    """Configure logging for the application once per process."""

    _configured = False

    @classmethod
    def configure(
        cls,
        settings: Settings | None = None,
        module_levels: dict[str, str] | None = None,
    ) -> None:
        if cls._configured:
            return

        settings = settings or get_settings()

        levels = {
            "uvicorn.access": "INFO" if settings.debug else "WARNING",
            "uvicorn.error": "INFO",
            "cryptomanager": "DEBUG" if settings.debug else settings.log_level,
        }
        if module_levels:
            levels.update(module_levels)

        if settings.log_format == "json":
            formatter: logging.Formatter = JsonFormatter(datefmt="%Y-%m-%d %H:%M:%S")
        else:
            formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.setLevel(settings.log_level.upper())
        root_logger.addHandler(console_handler)

        for name, level in levels.items():
            logging.getLogger(name).setLevel(level.upper())

        cls._configured = True
