from __future__ import annotations

from typing import Optional, Protocol


class PropertyStore(Protocol):
    """Protocol for the key/value store that persists OAuth credentials.

    Implementations hold string values only; callers serialize as needed.
    """

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class TokenProvider(Protocol):
    """Protocol for anything that can hand out an Instagram access token."""

    def has_access(self) -> bool:
        ...

    def get_access_token(self) -> str:
        """Return the token or raise AuthMissingError."""


__all__ = ["PropertyStore", "TokenProvider"]
