"""
Error taxonomy for dtdrafts.

Every failure the tool can report derives from DraftsError. Library code
raises these; only the CLI turns them into a message and an exit code.
"""

from __future__ import annotations


class DraftsError(Exception):
    """Base class for all reportable failures.

    Attributes:
        kind: Short tag identifying the failure category
        hint: Optional remediation shown to the user after the message
    """

    kind = "error"

    def __init__(self, message: str, hint: str | None = None):
        super().__init__(message)
        self.hint = hint


class ConfigError(DraftsError):
    """Configuration (API key or settings file) is unreadable or malformed."""

    kind = "config"


class MissingApiKeyError(ConfigError):
    kind = "missing_api_key"

    def __init__(self, message: str = "No API key found."):
        super().__init__(
            message,
            hint="Please set it first with: dtdrafts --set-api-key YOUR_API_KEY",
        )


class CacheError(DraftsError):
    """The article cache file exists but cannot be read or parsed."""

    kind = "cache"


class NetworkError(DraftsError):
    kind = "network"


class ApiStatusError(DraftsError):
    """The API answered with a non-success HTTP status."""

    kind = "http_status"

    def __init__(self, status_code: int, reason: str = ""):
        status = f"{status_code} {reason}".strip()
        super().__init__(
            f"API request failed with status: {status}.",
            hint="Please check your API key.",
        )
        self.status_code = status_code


class ResponseParseError(DraftsError):
    kind = "parse"


class StorageWriteError(DraftsError):
    """Creating the data directory or writing a file failed."""

    kind = "storage_write"
