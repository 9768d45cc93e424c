"""
Input Validation - checks for externally supplied configuration values.

Every validator returns an ``(is_valid, error_message)`` tuple; callers
decide whether a failure is fatal.
"""

from typing import Any, Optional, Tuple
from urllib.parse import urlparse

# =============================================================================
# Constants
# =============================================================================

MIN_THRESHOLD_PERCENT = 0
MAX_THRESHOLD_PERCENT = 100

# Registry URL value that disables remote fallback
LOCAL_REGISTRY = "local"

ALLOWED_URL_SCHEMES = ("http", "https")


# =============================================================================
# Validation Functions
# =============================================================================


def validate_number(
    value: Any,
    name: str,
    min_val: Optional[float] = None,
    max_val: Optional[float] = None,
) -> Tuple[bool, str]:
    """
    Validate a numeric value within optional bounds.

    Booleans are rejected even though they are ints in Python.

    Args:
        value: Value to validate
        name: Field name for error messages
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        (is_valid, error_message)
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False, f"{name} must be a number, got {type(value).__name__}"

    if value != value:  # NaN
        return False, f"{name} must be a number, got NaN"

    if min_val is not None and value < min_val:
        return False, f"{name} must be >= {min_val}, got {value}"

    if max_val is not None and value > max_val:
        return False, f"{name} must be <= {max_val}, got {value}"

    return True, ""


def validate_threshold_percent(value: Any) -> Tuple[bool, str]:
    """Validate a consensus threshold percentage (0-100)."""
    return validate_number(
        value,
        "clusterConfig.threshold",
        MIN_THRESHOLD_PERCENT,
        MAX_THRESHOLD_PERCENT,
    )


def validate_registry_url(url: Any) -> Tuple[bool, str]:
    """
    Validate a registry base URL.

    Accepts None (unset), the literal ``local``, or an absolute http(s) URL.
    """
    if url is None or url == LOCAL_REGISTRY:
        return True, ""

    if not isinstance(url, str):
        return False, f"smartRegistryUrl must be str, got {type(url).__name__}"

    parsed = urlparse(url)
    if parsed.scheme not in ALLOWED_URL_SCHEMES:
        return False, f"smartRegistryUrl must use http or https, got {url!r}"

    if not parsed.netloc:
        return False, f"smartRegistryUrl has no host: {url!r}"

    return True, ""


def is_remote_registry(url: Optional[str]) -> bool:
    """Whether ``url`` enables the remote registry fallback."""
    return url is not None and url != LOCAL_REGISTRY


__all__ = [
    "validate_number",
    "validate_threshold_percent",
    "validate_registry_url",
    "is_remote_registry",
    "LOCAL_REGISTRY",
    "MIN_THRESHOLD_PERCENT",
    "MAX_THRESHOLD_PERCENT",
]
