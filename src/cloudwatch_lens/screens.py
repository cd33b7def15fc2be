"""Screens that walk the operator from a service to its log events."""

from typing import Optional

import click

from .constants import DEFAULT_STREAM_LIMIT, AWSService
from .display import (
    display_error,
    display_info,
    display_log,
    display_log_separator,
    display_success,
)
from .models import AWSCredentials, SqsQueue
from .prompts import (
    select_lambda_function,
    select_log_group,
    select_log_stream,
    select_sqs_queue,
)
from .services import (
    find_log_groups,
    get_log_events,
    get_merged_log_events,
    get_queue_attributes,
    list_lambda_functions,
    list_log_streams,
    list_sqs_queues,
)
from .utils import get_lambda_client, get_logs_client, get_sqs_client


class LogScreen:
    """Sequences the selectors and listers for one browsing session."""

    def __init__(
        self,
        region: str,
        credentials: Optional[AWSCredentials] = None,
        stream_limit: int = DEFAULT_STREAM_LIMIT,
        merge: bool = False,
        json_output: bool = False,
        query: Optional[str] = None,
    ):
        """Initialize screen.

        Args:
            region: AWS region to browse
            credentials: Explicit credentials (boto3 default chain when None)
            stream_limit: Maximum number of streams to list per log group
            merge: Merge every listed stream instead of picking one
            json_output: Print events as JSON lines
            query: Pre-filter applied to every selector
        """
        self.region = region
        self.credentials = credentials
        self.stream_limit = stream_limit
        self.merge = merge
        self.json_output = json_output
        self.query = query
        self._logs_client = None

    @property
    def logs_client(self):
        """CloudWatch Logs client, created on first use."""
        if self._logs_client is None:
            self._logs_client = get_logs_client(self.region, self.credentials)
        return self._logs_client

    @property
    def status_err(self) -> bool:
        """Status lines go to stderr when stdout carries JSON lines."""
        return self.json_output

    def _header(self, title: str) -> None:
        click.secho(f"\n=== {title} ===", fg="cyan", err=self.status_err)
        click.secho(f"Region: {self.region}\n", dim=True, err=self.status_err)

    def _info(self, message: str) -> None:
        display_info(message, err=self.status_err)

    def _success(self, message: str) -> None:
        display_success(message, err=self.status_err)

    def run(self, service: AWSService) -> None:
        """Open the screen for a service."""
        if service == AWSService.LAMBDA:
            self.run_lambda()
        elif service == AWSService.SQS:
            self.run_sqs()
        else:
            raise ValueError(f"Unsupported service: {service}")

    def run_lambda(self) -> None:
        """Pick a Lambda function and browse its log group."""
        self._header("AWS Lambda")
        self._info("Loading Lambda functions...")

        try:
            functions = list_lambda_functions(get_lambda_client(self.region, self.credentials))
        except Exception:
            display_error("Error fetching Lambda functions")
            raise

        if not functions:
            self._info("\nNo Lambda functions found in this region.")
            return

        self._success(f"Found {len(functions)} function(s)\n")

        name = select_lambda_function(functions, self.query)
        selected = next(fn for fn in functions if fn.name == name)

        click.secho(f"\nSelected function: {selected.name}", fg="cyan", err=self.status_err)
        self.browse_log_group(selected.log_group_name)

    def run_sqs(self) -> None:
        """Pick an SQS queue, then one of its log groups."""
        self._header("Amazon SQS")
        self._info("Loading SQS queues...")

        sqs_client = get_sqs_client(self.region, self.credentials)
        try:
            queues = list_sqs_queues(sqs_client)
        except Exception:
            display_error("Error fetching SQS queues")
            raise

        if not queues:
            self._info("\nNo SQS queues found in this region.")
            return

        self._success(f"Found {len(queues)} queue(s)\n")

        queue = SqsQueue(url=select_sqs_queue(queues, self.query))
        click.secho(f"\nSelected queue: {queue.name}", fg="cyan", err=self.status_err)

        attributes = get_queue_attributes(sqs_client, queue)
        for key, value in attributes.items():
            click.echo(f"  {key}: {value}", err=self.status_err)

        # SQS does not log on its own; consumers and producers log under groups named after it
        try:
            log_groups = find_log_groups(self.logs_client, queue.name)
        except Exception:
            display_error(f"Error fetching log groups for {queue.name}")
            raise

        if not log_groups:
            self._info(f"\nNo log groups found matching '{queue.name}'.")
            return

        self.browse_log_group(select_log_group(log_groups, self.query))

    def browse_log_group(self, log_group_name: str) -> None:
        """List a group's streams, then print one stream or all of them merged."""
        self._info(f"\nLoading log streams for {log_group_name}...")

        try:
            streams = list_log_streams(self.logs_client, log_group_name, self.stream_limit)
        except Exception:
            display_error(f"Error fetching log streams for {log_group_name}")
            raise

        if not streams:
            self._info("\nNo log streams found.")
            return

        self._success(f"Found {len(streams)} stream(s)\n")

        if self.merge:
            self._info(f"Merging events from {len(streams)} stream(s)...")
            try:
                events = get_merged_log_events(
                    self.logs_client, log_group_name, [s.name for s in streams]
                )
            except Exception:
                display_error(f"Error fetching log events for {log_group_name}")
                raise
        else:
            stream_name = select_log_stream(streams, self.query)
            self._info(f"\nLoading events for {stream_name}...")
            try:
                events = get_log_events(self.logs_client, log_group_name, stream_name)
            except Exception:
                display_error(f"Error fetching log events for {stream_name}")
                raise

        if not events:
            self._info("\nNo log events found.")
            return

        if self.json_output:
            for event in events:
                display_log(event, json_output=True)
            return

        display_log_separator()
        for event in events:
            display_log(event)
        display_log_separator()
        self._success(f"{len(events)} event(s)")
