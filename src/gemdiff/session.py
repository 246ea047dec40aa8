"""the per-run session context shared by every component."""

from dataclasses import dataclass, field
from typing import Dict, Optional

from rich.console import Console

from .ui.logger import Logger
from .ui.progress import ProgressManager
from .utils.command import CommandRunner

# vim-style navigation on top of the arrow keys
DEFAULT_KEY_ALIASES = {"j": "down", "k": "up", "l": "space"}


@dataclass
class Session:
    console: Console
    logger: Logger
    progress: ProgressManager
    runner: CommandRunner
    key_aliases: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_KEY_ALIASES))
    abort_key: str = "escape"

    @classmethod
    def create(cls, console: Optional[Console] = None) -> "Session":
        console = console or Console()
        return cls(
            console=console,
            logger=Logger(console),
            progress=ProgressManager(console),
            runner=CommandRunner(console),
        )

    def aliases_for(self, key: str) -> list:
        """keys that should behave like `key` in interactive prompts."""
        return [alias for alias, target in self.key_aliases.items() if target == key]
