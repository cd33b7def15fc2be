"""AWS listers used by the screens and the CLI."""

from .cloudwatch import (
    find_log_groups,
    get_log_events,
    get_merged_log_events,
    iter_log_events,
    list_log_streams,
)
from .lambda_service import list_lambda_functions
from .sqs import get_queue_attributes, list_sqs_queues

__all__ = [
    "list_log_streams",
    "get_log_events",
    "iter_log_events",
    "get_merged_log_events",
    "find_log_groups",
    "list_lambda_functions",
    "list_sqs_queues",
    "get_queue_attributes",
]
