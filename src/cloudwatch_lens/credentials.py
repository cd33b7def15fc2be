"""
AWS credential resolution.

Sources, in order:
1. AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY in the process environment
2. The same keys in a .env file in the current directory
3. The default profile of ~/.aws/credentials
4. An interactive prompt, whose answers are saved to ~/.aws/credentials

Resolved credentials are returned to the caller, never exported to the
environment.
"""

import configparser
import os
from pathlib import Path
from typing import Optional

import click
from dotenv import dotenv_values
from InquirerPy import inquirer

from .constants import CREDENTIALS_PROFILE
from .exceptions import CredentialsError, SelectionCancelled
from .models import AWSCredentials
from .observability import log_error, log_event


def get_credentials_path() -> Path:
    """Path of the shared AWS credentials file."""
    return Path.home() / ".aws" / "credentials"


def get_env_credentials(env_file: Path | str | None = None) -> Optional[AWSCredentials]:
    """
    Read credentials from the environment, then from a .env file.

    Args:
        env_file: .env file to read. Defaults to .env in the current directory.
    """
    access_key_id = os.getenv("AWS_ACCESS_KEY_ID")
    secret_access_key = os.getenv("AWS_SECRET_ACCESS_KEY")

    if access_key_id and secret_access_key:
        return AWSCredentials(access_key_id=access_key_id, secret_access_key=secret_access_key)

    env_path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if not env_path.exists():
        return None

    values = dotenv_values(env_path)
    access_key_id = values.get("AWS_ACCESS_KEY_ID")
    secret_access_key = values.get("AWS_SECRET_ACCESS_KEY")

    if access_key_id and secret_access_key:
        return AWSCredentials(access_key_id=access_key_id, secret_access_key=secret_access_key)

    return None


def _read_config(path: Path) -> configparser.ConfigParser:
    config = configparser.ConfigParser(interpolation=None)
    config.read(path, encoding="utf-8")
    return config


def read_credentials_file(path: Optional[Path] = None) -> Optional[AWSCredentials]:
    """
    Read the default profile from an INI credentials file.

    A file that cannot be parsed is reported and treated as missing.
    """
    path = path or get_credentials_path()
    if not path.exists():
        return None

    try:
        config = _read_config(path)
    except configparser.Error as e:
        click.secho(f"✗ Error reading AWS credentials file: {e}", fg="red", err=True)
        log_error("credentials_file_unreadable", e, {"path": str(path)})
        return None

    for section in (CREDENTIALS_PROFILE, CREDENTIALS_PROFILE.capitalize()):
        if not config.has_section(section):
            continue
        profile = config[section]
        access_key_id = profile.get("aws_access_key_id")
        secret_access_key = profile.get("aws_secret_access_key")
        if access_key_id and secret_access_key:
            return AWSCredentials(
                access_key_id=access_key_id,
                secret_access_key=secret_access_key,
            )

    return None


def save_credentials(credentials: AWSCredentials, path: Optional[Path] = None) -> Path:
    """
    Store credentials as the default profile.

    Other profiles, and other keys of the default profile, are kept. A file
    that cannot be parsed is left untouched and its configparser.Error raised.

    Returns:
        Path written to
    """
    path = path or get_credentials_path()
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)

    config = _read_config(path) if path.exists() else configparser.ConfigParser(interpolation=None)
    if not config.has_section(CREDENTIALS_PROFILE):
        config.add_section(CREDENTIALS_PROFILE)

    config[CREDENTIALS_PROFILE]["aws_access_key_id"] = credentials.access_key_id
    config[CREDENTIALS_PROFILE]["aws_secret_access_key"] = credentials.secret_access_key

    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        config.write(f)
    os.chmod(path, 0o600)

    log_event("credentials_saved", {"path": str(path)})
    return path


def _required(label: str):
    def validate(value: str) -> bool:
        return bool(value and value.strip())

    return validate, f"{label} is required"


def prompt_for_credentials() -> AWSCredentials:
    """Ask the operator for an access key pair."""
    click.secho("\nAWS credentials not found. Please enter your credentials:", fg="yellow")
    click.secho("(These will be stored in ~/.aws/credentials)\n", dim=True)

    validate, invalid_message = _required("Access Key ID")
    try:
        access_key_id = inquirer.text(
            message="AWS Access Key ID:",
            validate=validate,
            invalid_message=invalid_message,
        ).execute()

        validate, invalid_message = _required("Secret Access Key")
        secret_access_key = inquirer.secret(
            message="AWS Secret Access Key:",
            validate=validate,
            invalid_message=invalid_message,
        ).execute()
    except (KeyboardInterrupt, EOFError) as e:
        raise SelectionCancelled("Credential entry cancelled") from e

    access_key_id = (access_key_id or "").strip()
    secret_access_key = (secret_access_key or "").strip()
    if not access_key_id or not secret_access_key:
        raise CredentialsError("Both an access key ID and a secret access key are required")

    return AWSCredentials(access_key_id=access_key_id, secret_access_key=secret_access_key)


def ensure_aws_credentials(
    interactive: bool = True,
    env_file: Path | str | None = None,
    credentials_path: Optional[Path] = None,
) -> Optional[AWSCredentials]:
    """
    Resolve credentials from the first source that has them.

    Args:
        interactive: Prompt (and save) when no source has credentials
        env_file: .env file to consult
        credentials_path: Credentials file to read and write

    Returns:
        Credentials, or None when not interactive and nothing was found, in
        which case boto3's own provider chain (profiles, SSO, instance roles)
        is left to apply.
    """
    credentials = get_env_credentials(env_file)
    if credentials:
        click.secho(
            "✓ Using credentials from environment variables or .env file",
            fg="green",
            err=True,
        )
        return credentials

    credentials = read_credentials_file(credentials_path)
    if credentials:
        click.secho("✓ Using credentials from ~/.aws/credentials", fg="green", err=True)
        return credentials

    if not interactive:
        return None

    credentials = prompt_for_credentials()

    try:
        saved_to = save_credentials(credentials, credentials_path)
        click.secho(f"✓ Credentials saved to {saved_to}", fg="green", err=True)
    except (OSError, configparser.Error) as e:
        click.secho(f"⚠ Could not save credentials: {e}", fg="yellow", err=True)
        log_error("credentials_save_failed", e)

    return credentials
