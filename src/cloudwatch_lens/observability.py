"""Structured logging for CloudWatch Lens.

Diagnostics go to stderr as one JSON object per line so they never mix with
log events printed on stdout.

Example:
    ```python
    from cloudwatch_lens.observability import log_event

    log_event('log_streams_listed', {
        'logGroupName': '/aws/lambda/my-function',
        'count': 12,
    })
    ```
"""

import json
import logging
import sys
import time
from typing import Any, Dict, Optional

LOGGER_NAME = "cloudwatch_lens"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure the package logger.

    Args:
        level: Log level name ('DEBUG', 'INFO', 'WARNING', 'ERROR')
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))

    logger.handlers = [handler]
    logger.setLevel(level.upper())
    logger.propagate = False


def log_event(
    event_type: str,
    details: Optional[Dict[str, Any]] = None,
    level: str = "INFO",
) -> None:
    """
    Log a structured event.

    Args:
        event_type: Type of event (e.g., 'log_events_fetched')
        details: Additional context (logGroupName, count, etc.)
        level: Log level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
    """
    if details is None:
        details = {}

    log_entry = {
        "eventType": event_type,
        **details,
    }

    if level == "WARNING":
        logger.warning(json.dumps(log_entry, default=str))
    elif level == "ERROR":
        logger.error(json.dumps(log_entry, default=str))
    elif level == "DEBUG":
        logger.debug(json.dumps(log_entry, default=str))
    else:
        logger.info(json.dumps(log_entry, default=str))


def log_error(
    event_type: str,
    error: BaseException,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Log an error event with exception details.

    Args:
        event_type: Type of error event (e.g., 'cli_failed')
        error: The exception that occurred
        details: Additional context
    """
    if details is None:
        details = {}

    log_entry = {
        "eventType": event_type,
        "error": str(error),
        "errorType": type(error).__name__,
        **details,
    }

    logger.error(json.dumps(log_entry, default=str))


def log_metrics(
    event_type: str,
    metrics: Dict[str, Any],
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """Log timing and count metrics as structured data."""
    if details is None:
        details = {}

    log_entry = {
        "eventType": event_type,
        "metrics": metrics,
        **details,
    }

    logger.info(json.dumps(log_entry, default=str))


class ObservabilityContext:
    """
    Context manager for logging operations with timing.

    Example:
        ```python
        with ObservabilityContext('merge_log_events', {'streams': 3}):
            do_work()
        ```

    Logs:
        - 'merge_log_events_started'
        - 'merge_log_events_completed' (with duration_ms)
        - 'merge_log_events_failed' (if exception occurs)
    """

    def __init__(self, operation_name: str, context: Optional[Dict[str, Any]] = None):
        self.operation_name = operation_name
        self.context = context or {}
        self.start_time: Optional[float] = None

    def __enter__(self):
        self.start_time = time.time()

        log_event(f"{self.operation_name}_started", self.context, level="DEBUG")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is None:
            return False

        duration_ms = int((time.time() - self.start_time) * 1000)

        if exc_type is not None:
            log_error(
                f"{self.operation_name}_failed",
                exc_val,
                {**self.context, "duration_ms": duration_ms},
            )
        else:
            log_metrics(
                f"{self.operation_name}_completed",
                {"duration_ms": duration_ms},
                self.context,
            )
        return False
