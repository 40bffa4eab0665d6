"""Composable actions and plans with dry-run support."""

from .actions import (
    Action,
    ActionKind,
    ActionRegistry,
    CommandBuilder,
    CommandLineAction,
    CommandResult,
    Executable,
    Handler,
    HandlerAction,
    Plan,
    get_action_registry,
    register_action,
)
from .config import ActionConfig, ExecutorSettings, PlanConfig
from .context import EnvVariables, ExecutionContext
from .errors import CommandExecutionError, PlanExecutorError, UnknownActionError
from .params import ParamMeta, ParamSpec
from .runner import run

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionKind",
    "ActionRegistry",
    "CommandBuilder",
    "CommandLineAction",
    "CommandResult",
    "Executable",
    "Handler",
    "HandlerAction",
    "Plan",
    "get_action_registry",
    "register_action",
    "ActionConfig",
    "ExecutorSettings",
    "PlanConfig",
    "EnvVariables",
    "ExecutionContext",
    "CommandExecutionError",
    "PlanExecutorError",
    "UnknownActionError",
    "ParamMeta",
    "ParamSpec",
    "run",
]
