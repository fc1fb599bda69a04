from __future__ import annotations

from typing import Optional, Protocol


class UserInterface(Protocol):
    """Protocol for the host UI (spreadsheet dialogs, console, test script).

    `prompt` returns the text the user entered, or None when the dialog was
    cancelled. An empty string means the user confirmed without typing.
    """

    def prompt(self, message: str) -> Optional[str]:
        ...

    def alert(self, title: str, message: Optional[str] = None) -> None:
        ...

    def show_authorization_link(self, url: str) -> None:
        ...


__all__ = ["UserInterface"]
