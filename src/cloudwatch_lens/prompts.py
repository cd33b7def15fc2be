"""Interactive selectors built on InquirerPy's fuzzy prompt.

Every selector accepts an optional ``query``. It narrows the candidates with a
case-insensitive substring match over the fields shown to the operator; a
query matching exactly one candidate is taken without prompting.
"""

from datetime import tzinfo
from typing import Callable, List, Optional, Sequence, TypeVar

import click
from InquirerPy import inquirer
from InquirerPy.base.control import Choice

from .constants import AWS_REGIONS, SERVICES, AWSService
from .exceptions import SelectionCancelled
from .formatting import format_bytes, format_timestamp_full, format_timestamp_relative
from .models import AWSRegion, LambdaFunction, LogStream, ServiceOption, SqsQueue

T = TypeVar("T")


def get_regions() -> List[AWSRegion]:
    """Region catalog as models."""
    return [AWSRegion(**region) for region in AWS_REGIONS]


def get_services() -> List[ServiceOption]:
    """Service catalog as models."""
    return [ServiceOption(**service) for service in SERVICES]


def _matches(term: str, *fields: Optional[str]) -> bool:
    term = term.lower()
    return any(field and term in field.lower() for field in fields)


def filter_regions(regions: Sequence[AWSRegion], term: Optional[str]) -> List[AWSRegion]:
    """Regions whose code or name contains ``term``."""
    if not term:
        return list(regions)
    return [r for r in regions if _matches(term, r.code, r.name)]


def filter_services(services: Sequence[ServiceOption], term: Optional[str]) -> List[ServiceOption]:
    """Services whose name, description or value contains ``term``."""
    if not term:
        return list(services)
    return [s for s in services if _matches(term, s.name, s.description, s.value)]


def filter_functions(
    functions: Sequence[LambdaFunction], term: Optional[str]
) -> List[LambdaFunction]:
    """Functions whose name, runtime or description contains ``term``."""
    if not term:
        return list(functions)
    return [fn for fn in functions if _matches(term, fn.name, fn.runtime, fn.description)]


def filter_queues(queues: Sequence[SqsQueue], term: Optional[str]) -> List[SqsQueue]:
    """Queues whose name or URL contains ``term``."""
    if not term:
        return list(queues)
    return [q for q in queues if _matches(term, q.name, q.url)]


def filter_streams(
    streams: Sequence[LogStream],
    term: Optional[str],
    now: Optional[int] = None,
    tz: Optional[tzinfo] = None,
) -> List[LogStream]:
    """Streams whose name, relative age or last-event time contains ``term``."""
    if not term:
        return list(streams)
    return [
        s
        for s in streams
        if _matches(
            term,
            s.name,
            format_timestamp_relative(s.last_event_time, now=now, tz=tz),
            format_timestamp_full(s.last_event_time, tz=tz),
        )
    ]


def function_label(fn: LambdaFunction) -> str:
    """Display name of a function choice."""
    return f"{fn.name} ({fn.runtime})" if fn.runtime else fn.name


def stream_label(stream: LogStream, now: Optional[int] = None) -> str:
    """Display name of a stream choice: age, name and size."""
    age = format_timestamp_relative(stream.last_event_time, now=now)
    return f"{age} | {stream.name} | {format_bytes(stream.stored_bytes)}"


def _fuzzy(message: str, choices: List[Choice]):
    try:
        return inquirer.fuzzy(message=message, choices=choices, match_exact=True).execute()
    except (KeyboardInterrupt, EOFError) as e:
        raise SelectionCancelled(message) from e


def _select(
    message: str,
    candidates: Sequence[T],
    query: Optional[str],
    filter_fn: Callable[[Sequence[T], Optional[str]], List[T]],
    label: Callable[[T], str],
    value: Callable[[T], str],
) -> str:
    matched = filter_fn(candidates, query)

    if query and len(matched) == 1:
        click.secho(f"{message} {label(matched[0])}", fg="cyan")
        return value(matched[0])

    if query and not matched:
        click.secho(f"Nothing matches '{query}', showing everything", fg="yellow")
        matched = list(candidates)

    return _fuzzy(message, [Choice(value=value(c), name=label(c)) for c in matched])


def select_region(query: Optional[str] = None) -> str:
    """Pick a region code."""
    return _select(
        "Select an AWS region:",
        get_regions(),
        query,
        filter_regions,
        label=lambda r: f"{r.code} - {r.name}",
        value=lambda r: r.code,
    )


def select_service(query: Optional[str] = None) -> AWSService:
    """Pick a service to browse."""
    selected = _select(
        "Select an AWS service:",
        get_services(),
        query,
        filter_services,
        label=lambda s: f"{s.name} - {s.description}",
        value=lambda s: s.value,
    )
    return AWSService(selected)


def select_lambda_function(
    functions: Sequence[LambdaFunction], query: Optional[str] = None
) -> str:
    """Pick a function name."""
    return _select(
        "Select a Lambda function:",
        functions,
        query,
        filter_functions,
        label=function_label,
        value=lambda fn: fn.name,
    )


def select_sqs_queue(queues: Sequence[SqsQueue], query: Optional[str] = None) -> str:
    """Pick a queue URL."""
    return _select(
        "Select an SQS queue:",
        queues,
        query,
        filter_queues,
        label=lambda q: q.name,
        value=lambda q: q.url,
    )


def select_log_group(log_groups: Sequence[str], query: Optional[str] = None) -> str:
    """Pick a log group name."""
    return _select(
        "Select a log group:",
        log_groups,
        query,
        lambda groups, term: [g for g in groups if not term or _matches(term, g)],
        label=lambda g: g,
        value=lambda g: g,
    )


def select_log_stream(streams: Sequence[LogStream], query: Optional[str] = None) -> str:
    """Pick a stream name, newest first as listed."""
    return _select(
        "Select a log stream:",
        streams,
        query,
        filter_streams,
        label=stream_label,
        value=lambda s: s.name,
    )
