"""Shared fixtures: in-memory stand-ins for boto3 clients."""

import logging
import threading

import pytest
from botocore.exceptions import ClientError


def client_error(operation: str, code: str = "AccessDeniedException") -> ClientError:
    """Build the ClientError botocore raises for a failed call."""
    return ClientError({"Error": {"Code": code, "Message": "denied"}}, operation)


class FakeLogsClient:
    """Serves describe_log_streams / get_log_events / describe_log_groups from memory.

    get_log_events mimics the real API: once a stream is exhausted it hands back
    the token it was given.
    """

    def __init__(self, streams=None, events=None, log_groups=None, event_page_size=2):
        self.streams = streams or []
        self.events = events or {}
        self.log_groups = log_groups or []
        self.event_page_size = event_page_size
        self.failing_streams = set()
        self.calls = []
        self._lock = threading.Lock()

    def _record(self, operation, kwargs):
        with self._lock:
            self.calls.append((operation, kwargs))

    def calls_to(self, operation):
        return [kwargs for op, kwargs in self.calls if op == operation]

    def describe_log_streams(self, **kwargs):
        self._record("describe_log_streams", kwargs)
        assert kwargs["limit"] <= 50

        offset = int(kwargs.get("nextToken", "s/0").split("/")[1])
        page = self.streams[offset : offset + kwargs["limit"]]
        response = {"logStreams": page}
        if offset + kwargs["limit"] < len(self.streams):
            response["nextToken"] = f"s/{offset + kwargs['limit']}"
        return response

    def get_log_events(self, **kwargs):
        self._record("get_log_events", kwargs)
        name = kwargs["logStreamName"]
        if name in self.failing_streams:
            raise client_error("GetLogEvents")

        events = self.events.get(name, [])
        offset = int(kwargs.get("nextToken", "f/0").split("/")[1])
        page = events[offset : offset + self.event_page_size]
        next_offset = min(offset + self.event_page_size, len(events))
        return {"events": page, "nextForwardToken": f"f/{next_offset}"}

    def describe_log_groups(self, **kwargs):
        self._record("describe_log_groups", kwargs)
        pattern = kwargs["logGroupNamePattern"]
        matching = [{"logGroupName": g} for g in self.log_groups if pattern in g]

        offset = int(kwargs.get("nextToken", "g/0").split("/")[1])
        page = matching[offset : offset + kwargs["limit"]]
        response = {"logGroups": page}
        if offset + kwargs["limit"] < len(matching):
            response["nextToken"] = f"g/{offset + kwargs['limit']}"
        return response


class FakeLambdaClient:
    """Serves list_functions with Marker / NextMarker paging."""

    def __init__(self, functions=None, page_size=2):
        self.functions = functions or []
        self.page_size = page_size
        self.calls = []

    def list_functions(self, **kwargs):
        self.calls.append(kwargs)
        offset = int(kwargs.get("Marker", "0"))
        response = {"Functions": self.functions[offset : offset + self.page_size]}
        if offset + self.page_size < len(self.functions):
            response["NextMarker"] = str(offset + self.page_size)
        return response


class FakeSqsClient:
    """Serves list_queues with NextToken paging and get_queue_attributes."""

    def __init__(self, queue_urls=None, page_size=2, attributes=None):
        self.queue_urls = queue_urls or []
        self.page_size = page_size
        self.attributes = attributes or {}
        self.calls = []

    def list_queues(self, **kwargs):
        self.calls.append(kwargs)
        offset = int(kwargs.get("NextToken", "0"))
        page = self.queue_urls[offset : offset + self.page_size]
        # ListQueues omits QueueUrls entirely when there are none
        response = {"QueueUrls": page} if page else {}
        if offset + self.page_size < len(self.queue_urls):
            response["NextToken"] = str(offset + self.page_size)
        return response

    def get_queue_attributes(self, **kwargs):
        self.calls.append(kwargs)
        return {"Attributes": self.attributes}


def make_streams(count, prefix="stream"):
    """Stream descriptors, newest first."""
    return [
        {
            "logStreamName": f"{prefix}-{i}",
            "lastEventTimestamp": 1_000_000 - i,
            "firstEventTimestamp": 1000 + i,
            "lastIngestionTime": 1_000_001 - i,
            "storedBytes": 100 * i,
        }
        for i in range(count)
    ]


@pytest.fixture
def logs_client():
    """Empty fake CloudWatch Logs client."""
    return FakeLogsClient()


@pytest.fixture(autouse=True)
def clean_aws_env(monkeypatch):
    """Keep the caller's AWS settings out of the tests."""
    for key in (
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "AWS_REGION",
        "AWS_DEFAULT_REGION",
        "CWLENS_STREAM_LIMIT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to streams captured by a previous test."""
    yield
    logger = logging.getLogger("cloudwatch_lens")
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
