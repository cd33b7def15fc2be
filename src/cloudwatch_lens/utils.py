"""Common utility functions: configuration and AWS client construction."""

import os
from pathlib import Path
from typing import Optional

import boto3
from dotenv import load_dotenv

from .constants import DEFAULT_REGION, DEFAULT_STREAM_LIMIT
from .models import AWSCredentials


def get_aws_region() -> str:
    """Get AWS region from environment or default."""
    return os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or DEFAULT_REGION


def get_stream_limit() -> int:
    """Get the maximum number of log streams to list."""
    value = os.getenv("CWLENS_STREAM_LIMIT")
    if not value:
        return DEFAULT_STREAM_LIMIT
    return int(value)


def get_session(region: str, credentials: Optional[AWSCredentials] = None) -> boto3.Session:
    """
    Build a boto3 session for a region.

    Explicit credentials are handed to the session rather than exported to the
    process environment. Without them boto3's default provider chain applies.
    """
    if credentials is None:
        return boto3.Session(region_name=region)

    return boto3.Session(
        aws_access_key_id=credentials.access_key_id,
        aws_secret_access_key=credentials.secret_access_key,
        region_name=region,
    )


def get_logs_client(region: str, credentials: Optional[AWSCredentials] = None):
    """Get CloudWatch Logs client."""
    return get_session(region, credentials).client("logs")


def get_lambda_client(region: str, credentials: Optional[AWSCredentials] = None):
    """Get Lambda client."""
    return get_session(region, credentials).client("lambda")


def get_sqs_client(region: str, credentials: Optional[AWSCredentials] = None):
    """Get SQS client."""
    return get_session(region, credentials).client("sqs")


def load_env(env_file: Path | str | None = None) -> None:
    """
    Load environment variables from .env files using dotenv.

    Loads in order:
    1. Base .env file (or specified env_file)
    2. .env.local (if it exists) - allows local overrides

    Args:
        env_file: Path to base .env file. If None, looks for .env in current directory.
    """
    if env_file is None:
        env_file = Path(".env")
    else:
        env_file = Path(env_file)

    load_dotenv(env_file, override=False)

    env_local = env_file.parent / f"{env_file.stem}.local{env_file.suffix}"
    if env_local.exists():
        load_dotenv(env_local, override=True)
