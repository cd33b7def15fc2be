"""Exceptions raised by CloudWatch Lens."""


class LensError(Exception):
    """Base class for CloudWatch Lens errors."""


class SelectionCancelled(LensError):
    """The operator interrupted an interactive prompt."""


class CredentialsError(LensError):
    """AWS credentials could not be resolved."""
