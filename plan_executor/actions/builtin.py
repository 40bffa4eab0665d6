"""Built-in action factories."""

from typing import Any, Dict, Mapping, Optional

from .base import Action
from .command_line import CommandLineAction
from .registry import get_action_registry


def _command(
    action_id: str,
    parameters: Dict[str, Any],
    params_meta: Optional[Mapping[str, Any]],
) -> Action:
    return CommandLineAction(action_id, parameters, params_meta=params_meta)


def _shell(
    action_id: str,
    parameters: Dict[str, Any],
    params_meta: Optional[Mapping[str, Any]],
) -> Action:
    return CommandLineAction(action_id, parameters, shell=True, params_meta=params_meta)


def register_builtin_actions() -> None:
    registry = get_action_registry()
    registry.register("command", _command, "Run a command as an argument vector")
    registry.register("shell", _shell, "Run a command string through the platform shell")


register_builtin_actions()
