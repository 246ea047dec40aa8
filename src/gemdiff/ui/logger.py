"""leveled console logging in the style of a terminal logger."""

from datetime import datetime
from typing import Callable, Optional, Sequence

from rich.console import Console
from rich.markup import escape

LEVELS = {
    "info": ("ℹ", "blue"),
    "success": ("✔", "green"),
    "warn": ("⚠", "yellow"),
    "error": ("⨯", "red"),
    "fatal": ("!", "bold red"),
}


class Logger:
    """
    prints one line per message: metadata, level symbol, level name, message.

    messages may carry rich markup (e.g. links); metadata is any of
    "date" and "time".
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        metadata: Sequence[str] = ("date", "time"),
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.console = console or Console()
        self.metadata = tuple(metadata)
        self._clock = clock

    def _prefix(self) -> str:
        now = self._clock()
        parts = []
        if "date" in self.metadata:
            parts.append(now.strftime("%Y-%m-%d"))
        if "time" in self.metadata:
            parts.append(now.strftime("%H:%M:%S.%f")[:-3])
        if not parts:
            return ""
        return f"[dim]\\[{' '.join(parts)}][/dim] "

    def log(self, level: str, message: str):
        symbol, color = LEVELS[level]
        self.console.print(f"{self._prefix()}[{color}]{symbol} {level:<8}[/{color}] {message}")

    def info(self, message: str):
        self.log("info", message)

    def success(self, message: str):
        self.log("success", message)

    def warn(self, message: str):
        self.log("warn", message)

    def error(self, message: str):
        self.log("error", message)

    def fatal(self, message: str):
        self.log("fatal", message)


def plain(text: str) -> str:
    """escape user supplied text before it goes into a log line."""
    return escape(text)
