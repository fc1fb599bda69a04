from typing import Iterable, List, Optional, Tuple


class ScriptedUI:
    """A scripted UI for tests and non-interactive runs.

    Prompts are answered from a fixed list (None = cancel); running out of
    answers behaves like cancelling. Alerts and links are recorded, not shown.
    """

    def __init__(self, answers: Iterable[Optional[str]] = ()):
        self._answers: List[Optional[str]] = list(answers)
        self.prompts: List[str] = []
        self.alerts: List[Tuple[str, Optional[str]]] = []
        self.links: List[str] = []

    def prompt(self, message: str) -> Optional[str]:
        self.prompts.append(message)
        if not self._answers:
            return None
        return self._answers.pop(0)

    def alert(self, title: str, message: Optional[str] = None) -> None:
        self.alerts.append((title, message))

    def show_authorization_link(self, url: str) -> None:
        self.links.append(url)


__all__ = ["ScriptedUI"]
