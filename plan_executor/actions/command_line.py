"""Action running an external command as a child process."""

import asyncio
import os
import shlex
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Union

import structlog

from ..context import ExecutionContext
from ..errors import CommandExecutionError
from ..params import ParamSpec
from .base import Action, ActionKind

logger = structlog.get_logger(__name__)

Command = Union[str, Sequence[str]]
CommandBuilder = Callable[[Any], Command]


@dataclass(frozen=True)
class CommandResult:
    """Captured output of a successful command."""

    stdout: str
    stderr: str


def command_from_params(params: Any) -> Command:
    """Default builder: read ``command`` off the parameters."""
    if isinstance(params, Mapping):
        return params["command"]
    return params.command


class CommandLineAction(Action):
    """Action that builds a command from its parameters and runs it.

    Commands are spawned as an argument vector; string commands are split
    with shell quoting rules but never interpreted by a shell. Pass
    ``shell=True`` to hand the raw string to the platform shell instead
    (pipes, globbing, variable expansion).
    """

    kind = ActionKind.COMMAND_LINE

    def __init__(
        self,
        id: str,
        params: Any = None,
        command_builder: Optional[CommandBuilder] = None,
        *,
        shell: bool = False,
        params_meta: Optional[Mapping[str, Union[ParamSpec, Mapping[str, Any]]]] = None,
    ) -> None:
        """Initialize command line action.

        Args:
            id: Caller-assigned identifier
            params: Parameters handed to the command builder
            command_builder: Function turning params into a command string or
                argument list; defaults to reading ``params["command"]``
            shell: Run through the platform shell instead of as an argv
            params_meta: Optional descriptive metadata about the parameters
        """
        super().__init__(id, params, params_meta)
        self.command_builder = command_builder or command_from_params
        self.shell = shell

    def build_command(self) -> Command:
        return self.command_builder(self.params)

    def describe(self) -> str:
        """Render the built command as it would be typed."""
        return self._render(self.build_command())

    async def run(self, params: Any, ctx: ExecutionContext) -> CommandResult:
        command = self.command_builder(params)
        env = {**os.environ, **(ctx.env or {})}

        logger.debug(
            "Running command",
            action=self.id,
            command=self._render(command),
            cwd=str(ctx.cwd),
            shell=self.shell,
        )

        try:
            if self.shell:
                process = await asyncio.create_subprocess_shell(
                    self._render(command),
                    cwd=ctx.cwd,
                    env=env,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
            else:
                argv = shlex.split(command) if isinstance(command, str) else list(command)
                if not argv:
                    raise CommandExecutionError(command, "empty command")
                process = await asyncio.create_subprocess_exec(
                    *argv,
                    cwd=ctx.cwd,
                    env=env,
                    stdout=asyncio.subprocess.PIPE,
                    stderr=asyncio.subprocess.PIPE,
                )
        except (OSError, ValueError) as e:
            logger.error(
                "Failed to spawn command",
                action=self.id,
                command=self._render(command),
                error=str(e),
            )
            raise CommandExecutionError(command, str(e)) from e

        stdout_bytes, stderr_bytes = await process.communicate()
        stdout = stdout_bytes.decode("utf-8", errors="replace")
        stderr = stderr_bytes.decode("utf-8", errors="replace")

        if process.returncode != 0:
            logger.error(
                "Command exited with failure status",
                action=self.id,
                command=self._render(command),
                exit_code=process.returncode,
            )
            raise CommandExecutionError(
                command,
                f"exited with status {process.returncode}",
                returncode=process.returncode,
                stderr=stderr,
            )

        logger.debug("Command completed", action=self.id, exit_code=process.returncode)
        return CommandResult(stdout=stdout, stderr=stderr)

    @staticmethod
    def _render(command: Command) -> str:
        if isinstance(command, str):
            return command
        return shlex.join(command)
