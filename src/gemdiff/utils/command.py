"""runs external commands and echoes them through the console."""

import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from rich.console import Console
from rich.markup import escape

from ..domain.errors import CommandFailed

Command = Union[str, List[str]]


@dataclass
class CommandResult:
    command: Command
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def failure(self) -> bool:
        return not self.success


def format_command(command: Command) -> str:
    if isinstance(command, str):
        return command
    return " ".join(command)


class CommandRunner:
    """blocking subprocess wrapper with a pretty printer."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def run(
        self,
        command: Command,
        strict: bool = True,
        quiet: bool = False,
        cwd: Optional[Path] = None,
    ) -> CommandResult:
        """
        run a command to completion.

        args:
            command: argument list, or a string to run through the shell
            strict: raise CommandFailed on a non-zero exit status
            quiet: print nothing
            cwd: working directory for the command

        returns:
            CommandResult with captured output
        """
        shown = format_command(command)
        if not quiet:
            self.console.print(f"Running [bold]{escape(shown)}[/bold]")

        started = time.monotonic()
        try:
            completed = subprocess.run(
                command,
                shell=isinstance(command, str),
                cwd=cwd,
                capture_output=True,
                text=True,
            )
            result = CommandResult(command, completed.returncode, completed.stdout or "", completed.stderr or "")
        except OSError as e:
            # binary missing or not executable, reported like a shell would
            result = CommandResult(command, 127, "", str(e))

        if not quiet:
            for line in (result.stdout + result.stderr).splitlines():
                self.console.print(f"\t{escape(line)}")
            elapsed = time.monotonic() - started
            color = "green" if result.success else "red"
            self.console.print(
                f"Finished in {elapsed:.3f} seconds with exit status "
                f"[{color}]{result.returncode}[/{color}]"
            )

        if strict and result.failure:
            raise CommandFailed(command, result.returncode, result.stderr)
        return result
