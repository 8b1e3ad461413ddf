"""
Logging utilities for the transaction validator
"""

import json
import logging
import logging.handlers
import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional

from utxo_validator.exceptions import ConfigError

LOGGER_NAME = 'utxo_validator'

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def __init__(self, include_context: bool = True):
        super().__init__()
        self.include_context = include_context

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            'timestamp': record.created,
            'level': record.levelname,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line_no': record.lineno,
            'logger': record.name
        }

        if self.include_context:
            log_data['thread_id'] = threading.get_ident()
            log_data['thread_name'] = threading.current_thread().name

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class LogManager:
    """Owns the handlers attached to the package logger"""

    def __init__(self, level: str = "INFO", log_file: Optional[str] = None,
                 max_size: int = 10 * 1024 * 1024, backup_count: int = 5,
                 json_format: bool = False,
                 fmt: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'):
        self.level = level
        self.log_file = log_file
        self.max_size = max_size
        self.backup_count = backup_count
        self.json_format = json_format
        self.fmt = fmt

        self.logger = logging.getLogger(LOGGER_NAME)
        self._setup_logging()

    def _setup_logging(self) -> None:
        level = getattr(logging, self.level.upper(), logging.INFO)
        self.logger.setLevel(level)

        self.logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(JSONFormatter() if self.json_format else logging.Formatter(self.fmt))
        self.logger.addHandler(console_handler)

        if self.log_file:
            self._add_file_handler()

        self.logger.propagate = False

    def _add_file_handler(self) -> None:
        """Add a rotating file handler; file records are always JSON"""
        try:
            log_path = Path(self.log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                self.log_file,
                maxBytes=self.max_size,
                backupCount=self.backup_count
            )
        except OSError as e:
            raise ConfigError(f"Failed to setup file logging: {e}")

        file_handler.setLevel(self.logger.level)
        file_handler.setFormatter(JSONFormatter())
        self.logger.addHandler(file_handler)

    def set_level(self, level: str) -> None:
        level_val = getattr(logging, level.upper(), logging.INFO)
        self.logger.setLevel(level_val)
        for handler in self.logger.handlers:
            handler.setLevel(level_val)

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        if name:
            return logging.getLogger(f"{LOGGER_NAME}.{name}")
        return self.logger

    def close(self) -> None:
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.setLevel(logging.NOTSET)
        self.logger.addHandler(logging.NullHandler())
        self.logger.propagate = True


def setup_logging(config=None) -> LogManager:
    """Set up package logging from a LoggingConfig (or defaults)"""
    if config is None:
        return LogManager()

    return LogManager(
        level=config.level,
        log_file=config.file,
        max_size=config.max_size,
        backup_count=config.backup_count,
        json_format=config.json_format,
        fmt=config.format
    )


class timed:
    """Context manager that logs how long a block took at DEBUG level"""

    def __init__(self, operation: str, log: logging.Logger = logger):
        self.operation = operation
        self.log = log

    def __enter__(self) -> 'timed':
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.duration = time.perf_counter() - self.start
        self.log.debug(f"{self.operation} took {self.duration * 1000:.3f}ms")
