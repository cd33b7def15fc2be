"""
CloudWatch Lens command line.

Interactive browser:
    cwlens [--region us-east-1] [--service lambda] [--query my-func]

Non-interactive dump of the latest streams of a log group:
    cwlens logs --function my-func [--limit 10] [--merge] [--json]

Install with: pip install -e .
"""

import sys
from typing import Callable, Optional

import click

from . import __version__
from .constants import DEFAULT_LOGS_COMMAND_LIMIT, LAMBDA_LOG_GROUP_PREFIX, AWSService
from .credentials import ensure_aws_credentials
from .display import (
    display_banner,
    display_error,
    display_info,
    display_log,
    display_stream_header,
)
from .exceptions import SelectionCancelled
from .observability import ObservabilityContext, log_error, setup_logging
from .prompts import get_regions, select_region, select_service
from .screens import LogScreen
from .services import get_log_events, get_merged_log_events, list_log_streams
from .utils import get_aws_region, get_logs_client, get_stream_limit, load_env


def run_guarded(action: Callable[[], None]) -> None:
    """
    Run a CLI action and turn its outcome into an exit code.

    A cancelled prompt exits 0; any other error is printed and exits 2.
    """
    try:
        action()
    except SelectionCancelled:
        click.echo()
        click.secho("👋 Cancelled", fg="yellow", err=True)
        sys.exit(0)
    except Exception as e:
        log_error("cli_failed", e)
        display_error(f"Error: {e}")
        sys.exit(2)


@click.group(invoke_without_command=True)
@click.option("--region", "-r", default=None, help="AWS region (prompted if omitted)")
@click.option(
    "--service",
    "-s",
    type=click.Choice([s.value for s in AWSService]),
    default=None,
    help="Service to browse (prompted if omitted)",
)
@click.option("--query", "-q", default=None, help="Pre-filter for every selection list")
@click.option(
    "--limit",
    "-l",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of log streams to list (or set CWLENS_STREAM_LIMIT)",
)
@click.option("--merge", "-m", is_flag=True, help="Merge all listed streams by timestamp")
@click.option("--json", "-j", "json_output", is_flag=True, help="Print events as JSON lines")
@click.option(
    "--env-file",
    type=click.Path(exists=False),
    default=".env",
    help="Path to .env file with AWS credentials/config",
)
@click.option("--verbose", "-v", is_flag=True, help="Log diagnostics to stderr")
@click.version_option(__version__, prog_name="cwlens")
@click.pass_context
def cli(
    ctx: click.Context,
    region: Optional[str],
    service: Optional[str],
    query: Optional[str],
    limit: Optional[int],
    merge: bool,
    json_output: bool,
    env_file: str,
    verbose: bool,
):
    """Browse CloudWatch logs of Lambda functions and SQS queues."""
    load_env(env_file)
    setup_logging("INFO" if verbose else "WARNING")

    ctx.ensure_object(dict)
    ctx.obj["env_file"] = env_file

    if ctx.invoked_subcommand is not None:
        return

    def browse() -> None:
        display_banner()
        credentials = ensure_aws_credentials(interactive=True, env_file=env_file)

        selected_region = region or select_region(query=query)
        selected_service = AWSService(service) if service else select_service(query=query)

        screen = LogScreen(
            region=selected_region,
            credentials=credentials,
            stream_limit=limit or get_stream_limit(),
            merge=merge,
            json_output=json_output,
            query=query,
        )
        screen.run(selected_service)

    run_guarded(browse)


@cli.command()
@click.option("--function", "-f", "function_name", default=None, help="Lambda function name")
@click.option("--log-group", "-g", default=None, help="Log group name")
@click.option("--region", "-r", default=None, help="AWS region (AWS_REGION by default)")
@click.option(
    "--limit",
    "-l",
    type=click.IntRange(min=1),
    default=DEFAULT_LOGS_COMMAND_LIMIT,
    show_default=True,
    help="Number of latest log streams to read",
)
@click.option("--merge", "-m", is_flag=True, help="Merge all streams by timestamp")
@click.option("--json", "-j", "json_output", is_flag=True, help="Print events as JSON lines")
@click.pass_context
def logs(
    ctx: click.Context,
    function_name: Optional[str],
    log_group: Optional[str],
    region: Optional[str],
    limit: int,
    merge: bool,
    json_output: bool,
):
    """
    Print the events of the latest log streams of a log group.

    Without --merge each stream is printed in turn under a header; with
    --merge all events are interleaved by timestamp and tagged with their
    stream.
    """
    region = region or get_aws_region()
    if not log_group and function_name:
        log_group = f"{LAMBDA_LOG_GROUP_PREFIX}{function_name}"

    if not log_group:
        display_error(
            "Provide --function <name> OR --log-group <group>. Example: --function myLambda"
        )
        sys.exit(1)

    def dump() -> None:
        credentials = ensure_aws_credentials(interactive=False, env_file=ctx.obj.get("env_file"))
        logs_client = get_logs_client(region, credentials)

        click.echo(f"Region: {region}", err=True)
        click.echo(f"Log group: {log_group}", err=True)
        click.echo(f"Fetching {limit} latest log stream(s)...", err=True)

        streams = list_log_streams(logs_client, log_group, limit)
        if not streams:
            display_info("No log streams found.", err=True)
            return

        if merge:
            for event in get_merged_log_events(logs_client, log_group, [s.name for s in streams]):
                display_log(event, json_output=json_output)
            return

        with ObservabilityContext("dump_log_streams", {"logGroupName": log_group}):
            for stream in streams:
                display_stream_header(stream, err=json_output)
                for event in get_log_events(logs_client, log_group, stream.name):
                    display_log(event, json_output=json_output)

    run_guarded(dump)


@cli.command()
def regions():
    """List the AWS regions that can be browsed."""
    for region in get_regions():
        click.echo(f"{region.code:<16} {region.name}")


if __name__ == "__main__":
    cli()
