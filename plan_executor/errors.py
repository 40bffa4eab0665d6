"""Exception types raised by the executor core."""

from typing import Optional, Sequence, Union


class PlanExecutorError(Exception):
    """Base class for errors raised by the executor itself."""


class CommandExecutionError(PlanExecutorError):
    """An external command could not be spawned or exited with a failure status."""

    def __init__(
        self,
        command: Union[str, Sequence[str]],
        reason: str,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ) -> None:
        self.command = command
        self.reason = reason
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Command {command!r} failed: {reason}")


class UnknownActionError(PlanExecutorError, KeyError):
    """No factory is registered under the requested action name."""

    def __init__(self, name: str, available: Sequence[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(name)

    def __str__(self) -> str:
        return (
            f"Action '{self.name}' not found "
            f"(available: {', '.join(self.available) or 'none'})"
        )
