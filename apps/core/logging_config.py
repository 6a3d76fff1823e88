"""
Structured logging for service operations.

Provides JSON logging with correlation IDs, so every step of a service
invocation can be traced back to the invocation that triggered it.
"""

import json
import logging
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

_correlation_id: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)


# ============================================================================
# Correlation ID Management
# ============================================================================

class CorrelationIDManager:
    """Manages correlation IDs for the current execution context."""

    @classmethod
    def get_correlation_id(cls) -> str:
        """
        Get current correlation ID or generate a new one.

        Returns:
            Correlation ID string
        """
        correlation_id = _correlation_id.get()
        if correlation_id is None:
            correlation_id = str(uuid.uuid4())
            _correlation_id.set(correlation_id)
        return correlation_id

    @classmethod
    def set_correlation_id(cls, correlation_id: str):
        """
        Set correlation ID for current context.

        Returns:
            Token to pass to reset_correlation_id
        """
        return _correlation_id.set(correlation_id)

    @classmethod
    def reset_correlation_id(cls, token):
        """Restore the correlation ID that was current before set_correlation_id."""
        _correlation_id.reset(token)

    @classmethod
    def clear_correlation_id(cls):
        """Clear current correlation ID."""
        _correlation_id.set(None)


@contextmanager
def correlation_scope(correlation_id: Optional[str] = None):
    """
    Run a block under its own correlation ID.

    Args:
        correlation_id: ID to use (default: a fresh UUID)

    Yields:
        The correlation ID in effect inside the block
    """
    correlation_id = correlation_id or str(uuid.uuid4())
    token = CorrelationIDManager.set_correlation_id(correlation_id)
    try:
        yield correlation_id
    finally:
        CorrelationIDManager.reset_correlation_id(token)


# ============================================================================
# Structured Logger
# ============================================================================

class StructuredLogger:
    """
    Structured logger with JSON formatting.

    Every entry carries the correlation ID of the current context.
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (usually __name__)
        """
        self.logger = logging.getLogger(name)

    def build_log_entry(
        self,
        level: str,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> Dict[str, Any]:
        """
        Build structured log entry.

        Args:
            level: Log level
            message: Log message
            extra: Additional fields
            exc_info: Exception information

        Returns:
            Dictionary containing log entry
        """
        entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'message': message,
            'correlation_id': CorrelationIDManager.get_correlation_id(),
            'logger': self.logger.name,
        }

        if extra:
            entry['extra'] = extra

        if exc_info:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info),
            }

        return entry

    def _log(
        self,
        level: int,
        level_name: str,
        message: str,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ):
        if self.logger.isEnabledFor(level):
            log_entry = self.build_log_entry(level_name, message, extra, exc_info)
            self.logger.log(level, json.dumps(log_entry, default=str), exc_info=exc_info)

    def debug(self, message: str, **kwargs):
        """Log debug message."""
        self._log(logging.DEBUG, 'DEBUG', message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message."""
        self._log(logging.INFO, 'INFO', message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message."""
        self._log(logging.WARNING, 'WARNING', message, kwargs)

    def error(self, message: str, exc_info: Optional[BaseException] = None, **kwargs):
        """Log error message."""
        self._log(logging.ERROR, 'ERROR', message, kwargs, exc_info)


# ============================================================================
# Context Managers
# ============================================================================

@contextmanager
def log_operation_context(operation: str, logger_name: str = __name__, **kwargs):
    """
    Context manager for logging an operation with automatic start/end.

    Args:
        operation: Operation name
        logger_name: Name of the underlying logger
        **kwargs: Additional context

    Example:
        with log_operation_context('contact_created', account_id=1):
            ...
    """
    logger = StructuredLogger(logger_name)

    context = {'operation': operation}
    context.update(kwargs)

    logger.debug(f'Starting {operation}', **context)

    start_time = time.time()
    try:
        yield logger
    except Exception as e:
        logger.error(
            f'Failed {operation}',
            exc_info=e,
            duration_seconds=time.time() - start_time,
            status='failure',
            **context
        )
        raise

    logger.info(
        f'Completed {operation}',
        duration_seconds=time.time() - start_time,
        status='success',
        **context
    )


# ============================================================================
# Helper Functions
# ============================================================================

def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    return StructuredLogger(name)
