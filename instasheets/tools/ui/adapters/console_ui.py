import sys
from typing import Optional, TextIO


class ConsoleUI:
    """Terminal UI used by the CLI runner.

    End of input (Ctrl-D) cancels a prompt.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def prompt(self, message: str) -> Optional[str]:
        self.stdout.write(f"{message} ")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def alert(self, title: str, message: Optional[str] = None) -> None:
        self.stdout.write(f"[{title}]" + (f" {message}" if message else "") + "\n")

    def show_authorization_link(self, url: str) -> None:
        self.stdout.write(
            "Open this URL to authorize (it opens Instagram in your browser):\n"
            f"  {url}\n"
        )


__all__ = ["ConsoleUI"]
