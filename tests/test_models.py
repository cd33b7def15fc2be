"""Tests for CloudWatch Lens models."""

import pytest
from pydantic import ValidationError

from cloudwatch_lens.models import LambdaFunction, LogEvent, LogStream, MergedLogEvent, SqsQueue
from cloudwatch_lens.prompts import get_regions, get_services


class TestRecords:
    """Test suite for record models."""

    def test_log_records_are_frozen(self):
        """Test that fetched records cannot be mutated."""
        event = LogEvent(timestamp=1, message="m")
        stream = LogStream(name="s")

        with pytest.raises(ValidationError):
            event.message = "changed"
        with pytest.raises(ValidationError):
            stream.name = "other"

    def test_merged_event_extends_log_event(self):
        """Test that a merged event keeps the event fields and adds its stream."""
        event = LogEvent(timestamp=3, message="m", ingestion_time=4)

        merged = MergedLogEvent(stream="s", **event.model_dump())

        assert isinstance(merged, LogEvent)
        assert (merged.stream, merged.timestamp, merged.message, merged.ingestion_time) == (
            "s",
            3,
            "m",
            4,
        )

    def test_lambda_log_group(self):
        """Test the log group derived from a function name."""
        assert LambdaFunction(name="orders").log_group_name == "/aws/lambda/orders"

    @pytest.mark.parametrize(
        "url",
        [
            "https://sqs.eu-west-1.amazonaws.com/123456789012/orders.fifo",
            "https://sqs.eu-west-1.amazonaws.com/123456789012/orders.fifo/",
        ],
    )
    def test_queue_name_from_url(self, url):
        """Test queue name extraction."""
        assert SqsQueue(url=url).name == "orders.fifo"


class TestCatalogs:
    """Test suite for the static region and service catalogs."""

    def test_regions_unique(self):
        """Test that region codes are unique and well formed."""
        codes = [r.code for r in get_regions()]

        assert len(codes) == len(set(codes))
        assert all(code.count("-") == 2 for code in codes)
        assert "us-east-1" in codes

    def test_services(self):
        """Test the service catalog values."""
        assert [s.value for s in get_services()] == ["lambda", "sqs"]
