"""
Exception hierarchy for smartconfig.

All failures raised by the package derive from SmartConfigError so callers
can catch one type at the application boundary.
"""

from typing import Optional


class SmartConfigError(Exception):
    """Base class for all smartconfig failures."""


class ConfigurationError(SmartConfigError):
    """Configuration is missing, malformed or cannot serve a request."""


class ConfigurationMissing(ConfigurationError):
    """A required configuration key is absent."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Configuration key '{key}' does not exist")


class RemoteUnavailable(ConfigurationError):
    """Remote fallback is needed but no registry URL is configured."""

    def __init__(self, message: str = "Base URL not set"):
        super().__init__(message)


class InvalidLedgerId(ConfigurationError, ValueError):
    """A ledger identifier string could not be parsed."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid ledger id: {value!r}")


class RemoteFetchFailed(SmartConfigError):
    """
    A registry request failed.

    Attributes:
        url: Requested URL
        status_code: HTTP status for non-2xx responses, None for transport
            or decoding failures
    """

    def __init__(self, url: str, status_code: Optional[int] = None, reason: str = ""):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"GET {url} failed with status {status_code}"
        else:
            message = f"GET {url} failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


__all__ = [
    "SmartConfigError",
    "ConfigurationError",
    "ConfigurationMissing",
    "RemoteUnavailable",
    "InvalidLedgerId",
    "RemoteFetchFailed",
]
