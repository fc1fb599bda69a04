"""Custom exception hierarchy for the Instagram client.

Explicit exception types let the action runner tell apart failures the user
should see in a dialog (API errors, missing authorization) from faults that
must propagate unhandled (transport problems, runaway pagination, JSON nested
too deep to flatten).
"""

from __future__ import annotations

from typing import Optional


class InstaSheetsError(Exception):
    """Base class for all client related errors."""


class ApiError(InstaSheetsError):
    """Raised when a response envelope reports a status code other than 200."""

    def __init__(self, code: Optional[int], kind: Optional[str] = None, message: Optional[str] = None):
        self.code = code
        self.kind = kind
        self.message = message
        super().__init__(f"Instagram error {code}: {kind}: {message}")

    @property
    def title(self) -> str:
        return f"Instagram error {self.code}"

    @property
    def detail(self) -> str:
        return f"{self.kind}: {self.message}"


class AuthMissingError(ApiError):
    """Raised when a request is attempted without a usable access token."""

    def __init__(self, message: str = "No access token available. Run Authorize and try again."):
        super().__init__(401, "AuthMissing", message)


class TransportError(InstaSheetsError):
    """Raised on network failures and bodies that are not a JSON status envelope."""


class PaginationError(InstaSheetsError):
    """Raised when a pagination chain exceeds the page ceiling or revisits a URL."""


class FlattenDepthError(InstaSheetsError):
    """Raised when JSON nesting exceeds the configured depth guard."""


__all__ = [
    "InstaSheetsError",
    "ApiError",
    "AuthMissingError",
    "TransportError",
    "PaginationError",
    "FlattenDepthError",
]
