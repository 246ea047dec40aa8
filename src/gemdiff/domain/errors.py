from typing import List, Optional, Union


class GemDiffError(Exception):
    """base class for exceptions in gemdiff."""
    pass


class PrerequisiteMissing(GemDiffError):
    """raised when a required external tool is not on PATH."""
    def __init__(self, tool: str, hint: str):
        self.tool = tool
        self.hint = hint
        super().__init__(f"{tool} was not detected in your PATH.")


class RegistryError(GemDiffError):
    """raised when the version list of a gem cannot be retrieved."""
    def __init__(self, package_name: str, reason: str = ""):
        self.package_name = package_name
        self.reason = reason
        message = f"Failed to fetch gem versions for {package_name}."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class FetchError(GemDiffError):
    """raised when a gem archive could not be downloaded."""
    def __init__(self, package_name: str, version: str, reason: str = ""):
        self.package_name = package_name
        self.version = version
        self.reason = reason
        message = f"Failed to fetch gem {package_name} version {version}."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class CommandFailed(GemDiffError):
    """raised when a strict external command exits non-zero."""
    def __init__(self, command: Union[str, List[str]], returncode: int, stderr: Optional[str] = None):
        self.command = command
        self.returncode = returncode
        self.stderr = stderr or ""
        shown = command if isinstance(command, str) else " ".join(command)
        super().__init__(f"`{shown}` exited with status {returncode}")


class SelectionAborted(GemDiffError):
    """raised when the operator leaves an interactive prompt with escape."""
    pass


class InvalidSource(RegistryError):
    """raised when a gem source cannot be parsed as a url."""
    def __init__(self, source: str):
        self.source = source
        self.package_name = ""
        self.reason = "invalid gem source"
        GemDiffError.__init__(self, f"Invalid gem source {source!r}.")
