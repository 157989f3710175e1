"""Logging configuration for the MCP Pix JIRA server."""

import logging
import os
import sys
import time
import types
import uuid
from collections.abc import Mapping
from contextvars import ContextVar, Token
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

DEFAULT_LOGGER_NAME = "mcp-pix-jira"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_DIRECTORY = "logs"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

# LOG_LEVEL accepts the short names used in .env files
LEVEL_ALIASES = {"warn": "WARNING"}

# Shared by every logger so records from plain module loggers carry it too
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})


def get_context_str() -> str:
    """Render the active context as ``key=value,...`` or ``no-context``."""
    context_data = _log_context.get()
    if not context_data:
        return "no-context"

    # operation=X,trace_id=Y,...
    return ",".join(f"{k}={v}" for k, v in context_data.items())


class ContextualLogger(logging.Logger):
    """Logger that stamps every record with the active operation context."""

    def _log(
        self,
        level: int,
        msg: object,
        args: tuple[object, ...] | Mapping[str, object],
        exc_info: Any = None,
        extra: Mapping[str, object] | None = None,
        stack_info: bool = False,
        stacklevel: int = 1,
    ) -> None:
        if extra is None:
            extra = {}

        if "context" not in extra:
            extra = dict(extra)
            extra["context"] = get_context_str()

        super()._log(level, msg, args, exc_info, extra, stack_info, stacklevel + 1)

    def get_context(self) -> dict[str, Any]:
        return dict(_log_context.get())

    def set_context(self, **kwargs: Any) -> None:
        """
        Sets context values for the logger.

        Args:
            **kwargs: Key-value pairs to add to the context
        """
        _log_context.set({**_log_context.get(), **kwargs})

    def clear_context(self) -> None:
        """Removes all context data from the logger."""
        _log_context.set({})


class _ContextDefaultFilter(logging.Filter):
    """Supplies ``context`` for records emitted by plain ``logging.Logger``s."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = get_context_str()
        return True


class LoggingContextManager:
    """Context manager that logs start, end and duration of an operation."""

    def __init__(self, logger: logging.Logger, operation: str, **context: Any) -> None:
        """
        Initializes the logging context manager.

        Args:
            logger: Logger receiving the start/end records
            operation: Name of the operation being executed
            **context: Additional context data (e.g. issue_key)
        """
        self.logger = logger
        self.operation = operation
        self.context = context.copy()
        self.start_time = time.time()
        self.trace_id = context.get("trace_id", str(uuid.uuid4())[:8])
        self._token: Token[dict[str, Any]] | None = None

    def __enter__(self) -> "LoggingContextManager":
        self.context["operation"] = self.operation
        self.context["trace_id"] = self.trace_id

        self._token = _log_context.set({**_log_context.get(), **self.context})

        self.logger.debug(f"Operation started: {self.operation}")
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        duration = time.time() - self.start_time

        if exc_type:
            self.logger.error(
                f"Operation failed: {self.operation} after {duration:.3f}s - {exc_val}"
            )
        else:
            self.logger.debug(
                f"Operation completed: {self.operation} in {duration:.3f}s"
            )

        if self._token is not None:
            _log_context.reset(self._token)
            self._token = None


def resolve_log_level(level: str | None) -> int:
    """Translate a level name (debug, info, warn, error...) into a logging level."""
    name = (level or DEFAULT_LOG_LEVEL).strip()
    name = LEVEL_ALIASES.get(name.lower(), name.upper())
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Invalid log level: {level}")
    return resolved


def setup_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: str | None = None,
    log_to_file: bool = False,
    log_dir: str | None = None,
    log_format: str | None = None,
) -> ContextualLogger:
    """
    Configures and returns a contextual logger.

    Console output goes to stderr: stdout is reserved for the stdio MCP
    transport.

    Args:
        name: Logger name
        level: Log level (debug, info, warn, error)
        log_to_file: If True, also logs to a rotating file
        log_dir: Directory to store log files
        log_format: Log format

    Returns:
        Configured contextual logger
    """
    logging.setLoggerClass(ContextualLogger)
    logger = logging.getLogger(name)
    logging.setLoggerClass(logging.Logger)

    logger.setLevel(resolve_log_level(level or os.getenv("LOG_LEVEL")))

    # Calling setup_logger twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format or os.getenv("LOG_FORMAT", DEFAULT_FORMAT))
    context_filter = _ContextDefaultFilter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(context_filter)
    logger.addHandler(console_handler)

    if log_to_file:
        log_directory = log_dir or os.getenv("LOG_DIR", DEFAULT_LOG_DIRECTORY)
        Path(log_directory).mkdir(parents=True, exist_ok=True)

        log_file = Path(log_directory) / f"{name}.log"
        file_handler = RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_SIZE, backupCount=LOG_BACKUP_COUNT
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        logger.addHandler(file_handler)

    logger.propagate = False

    return cast(ContextualLogger, logger)


def log_operation(
    logger: logging.Logger, operation: str, **context: Any
) -> LoggingContextManager:
    """
    Creates a context manager for operation logging.

    Args:
        logger: Logger (contextual or plain)
        operation: Name of the operation
        **context: Additional context data

    Returns:
        Context manager configured for operation logging
    """
    return LoggingContextManager(logger, operation, **context)
