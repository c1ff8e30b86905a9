"""
Client Errors
=============
Exception hierarchy raised by the Unleash client configuration.
"""

from typing import Optional


class UnleashError(Exception):
    """Base exception for all Unleash client errors."""


class ConfigurationError(UnleashError):
    """
    Raised when a configuration cannot be built or validated.

    Attributes:
        fields: Names of the configuration fields involved
    """

    def __init__(self, message: str, fields: Optional[list[str]] = None):
        super().__init__(message)
        self.fields = list(fields or [])


class InvalidArgumentError(ConfigurationError, ValueError):
    """Unknown option, wrong type, or a custom strategy lacking is_enabled."""


class MissingRequiredFieldError(ConfigurationError, ValueError):
    """A required option (url, app_name) is absent while the client is enabled."""
