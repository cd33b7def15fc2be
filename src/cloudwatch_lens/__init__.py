"""CloudWatch Lens - browse AWS Lambda and SQS logs from the terminal.

This package provides:
- Paginated listers for log streams, log events, Lambda functions and SQS queues
- A concurrent multi-stream merge ordered by timestamp
- Formatting helpers for timestamps, sizes and log levels
- Interactive selectors and screens driven by a click CLI
"""

__version__ = "0.1.0"

from .constants import AWSService, LogLevel
from .models import (
    AWSCredentials,
    AWSRegion,
    LambdaFunction,
    LogEvent,
    LogStream,
    MergedLogEvent,
    Page,
    ServiceOption,
    SqsQueue,
)
from .pagination import collect_pages, iter_pages
from .services import (
    find_log_groups,
    get_log_events,
    get_merged_log_events,
    iter_log_events,
    list_lambda_functions,
    list_log_streams,
    list_sqs_queues,
)

__all__ = [
    # Models
    "AWSCredentials",
    "AWSRegion",
    "LambdaFunction",
    "LogEvent",
    "LogStream",
    "MergedLogEvent",
    "Page",
    "ServiceOption",
    "SqsQueue",
    # Constants
    "AWSService",
    "LogLevel",
    # Pagination
    "iter_pages",
    "collect_pages",
    # Listers
    "list_log_streams",
    "get_log_events",
    "iter_log_events",
    "get_merged_log_events",
    "find_log_groups",
    "list_lambda_functions",
    "list_sqs_queues",
]
