"""CloudWatch Logs listers: log streams, log events and multi-stream merges."""

from concurrent.futures import ThreadPoolExecutor
from operator import attrgetter
from typing import Iterator, List, Optional, Sequence

from ..constants import DEFAULT_STREAM_LIMIT, LOG_GROUPS_PAGE_SIZE, LOG_STREAMS_PAGE_SIZE
from ..models import LogEvent, LogStream, MergedLogEvent, Page
from ..observability import ObservabilityContext, log_event
from ..pagination import collect_pages, iter_pages

# Upper bound on concurrent GetLogEvents calls in a merge
MAX_MERGE_WORKERS = 10


def list_log_streams(
    logs_client,
    log_group_name: str,
    limit: int = DEFAULT_STREAM_LIMIT,
) -> List[LogStream]:
    """
    List the most recently active streams of a log group.

    Args:
        logs_client: An instance of boto3.client("logs")
        log_group_name: Log group to describe
        limit: Maximum number of streams to return

    Returns:
        Up to ``limit`` streams, most recent event first

    Raises:
        botocore.exceptions.ClientError: Propagated from any page request
    """
    streams: List[LogStream] = []

    def fetch_page(cursor: Optional[str]) -> Page:
        kwargs = {
            "logGroupName": log_group_name,
            "orderBy": "LastEventTime",
            "descending": True,
            "limit": min(limit - len(streams), LOG_STREAMS_PAGE_SIZE),
        }
        if cursor:
            kwargs["nextToken"] = cursor

        response = logs_client.describe_log_streams(**kwargs)

        # Nameless entries cannot be opened later
        items = [
            LogStream(
                name=stream["logStreamName"],
                last_event_time=stream.get("lastEventTimestamp") or 0,
                first_event_time=stream.get("firstEventTimestamp") or 0,
                last_ingestion_time=stream.get("lastIngestionTime") or 0,
                stored_bytes=stream.get("storedBytes"),
            )
            for stream in response.get("logStreams", [])
            if stream.get("logStreamName")
        ]
        return Page(items=items, cursor=response.get("nextToken"))

    if limit <= 0:
        return streams

    for page in iter_pages(fetch_page):
        streams.extend(page.items)
        if len(streams) >= limit:
            break

    log_event(
        "log_streams_listed",
        {"logGroupName": log_group_name, "count": len(streams[:limit])},
    )
    return streams[:limit]


def iter_log_events(
    logs_client,
    log_group_name: str,
    log_stream_name: str,
) -> Iterator[LogEvent]:
    """
    Generate every event of a log stream, oldest first.

    Pages are only requested as the caller consumes events.
    """

    def fetch_page(cursor: Optional[str]) -> Page:
        kwargs = {
            "logGroupName": log_group_name,
            "logStreamName": log_stream_name,
            "startFromHead": True,
        }
        if cursor:
            kwargs["nextToken"] = cursor

        response = logs_client.get_log_events(**kwargs)

        items = [
            LogEvent(
                timestamp=event.get("timestamp") or 0,
                message=event.get("message") or "",
                ingestion_time=event.get("ingestionTime"),
            )
            for event in response.get("events", [])
        ]
        return Page(items=items, cursor=response.get("nextForwardToken"))

    for page in iter_pages(fetch_page):
        yield from page.items


def get_log_events(
    logs_client,
    log_group_name: str,
    log_stream_name: str,
) -> List[LogEvent]:
    """
    Fetch the complete event sequence of a log stream, oldest first.

    There is no upper bound: the whole stream is held in memory. Use
    :func:`iter_log_events` to consume a large stream lazily.

    Args:
        logs_client: An instance of boto3.client("logs")
        log_group_name: Log group containing the stream
        log_stream_name: Stream to read

    Returns:
        All events; missing timestamps default to 0 and missing messages to ""
    """
    events = list(iter_log_events(logs_client, log_group_name, log_stream_name))

    log_event(
        "log_events_fetched",
        {
            "logGroupName": log_group_name,
            "logStreamName": log_stream_name,
            "count": len(events),
        },
        level="DEBUG",
    )
    return events


def get_merged_log_events(
    logs_client,
    log_group_name: str,
    log_stream_names: Sequence[str],
    max_workers: Optional[int] = None,
) -> List[MergedLogEvent]:
    """
    Fetch several streams concurrently and merge them by timestamp.

    Every stream is fetched in full on a thread pool. The merge waits for all
    of them; if any fetch fails the whole merge fails with that error.
    Events with equal timestamps keep stream enumeration order, then their
    order within the stream.

    Args:
        logs_client: An instance of boto3.client("logs"), shared by the workers
        log_group_name: Log group containing the streams
        log_stream_names: Streams to merge
        max_workers: Thread pool size (defaults to one per stream, capped)

    Returns:
        Events from all streams, ascending by timestamp, tagged with their stream
    """
    if not log_stream_names:
        return []

    workers = max_workers or min(len(log_stream_names), MAX_MERGE_WORKERS)

    with ObservabilityContext(
        "merge_log_events",
        {"logGroupName": log_group_name, "streams": len(log_stream_names)},
    ):
        with ThreadPoolExecutor(max_workers=workers) as executor:
            per_stream = list(
                executor.map(
                    lambda name: get_log_events(logs_client, log_group_name, name),
                    log_stream_names,
                )
            )

        merged = [
            MergedLogEvent(stream=name, **event.model_dump())
            for name, events in zip(log_stream_names, per_stream)
            for event in events
        ]
        # list.sort is stable
        merged.sort(key=attrgetter("timestamp"))

    return merged


def find_log_groups(
    logs_client,
    pattern: str,
    limit: Optional[int] = None,
) -> List[str]:
    """
    Find log groups whose name contains ``pattern`` (matched case-insensitively by CloudWatch).

    Args:
        logs_client: An instance of boto3.client("logs")
        pattern: Substring passed as logGroupNamePattern
        limit: Maximum number of group names to return

    Returns:
        Matching log group names
    """

    def fetch_page(cursor: Optional[str]) -> Page:
        kwargs = {
            "logGroupNamePattern": pattern,
            "limit": LOG_GROUPS_PAGE_SIZE,
        }
        if cursor:
            kwargs["nextToken"] = cursor

        response = logs_client.describe_log_groups(**kwargs)

        items = [
            group["logGroupName"]
            for group in response.get("logGroups", [])
            if group.get("logGroupName")
        ]
        return Page(items=items, cursor=response.get("nextToken"))

    return collect_pages(fetch_page, limit=limit)
