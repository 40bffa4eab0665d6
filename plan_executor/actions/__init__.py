"""Actions, plans and the action registry."""

from .base import Action, ActionKind, Executable
from .command_line import CommandBuilder, CommandLineAction, CommandResult
from .handler import Handler, HandlerAction
from .plan import Plan
from .registry import ActionRegistry, get_action_registry, register_action
from . import builtin

__all__ = [
    "Action",
    "ActionKind",
    "Executable",
    "CommandBuilder",
    "CommandLineAction",
    "CommandResult",
    "Handler",
    "HandlerAction",
    "Plan",
    "ActionRegistry",
    "get_action_registry",
    "register_action",
]
