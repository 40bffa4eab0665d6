"""Execution context shared by every action of a run."""

import os
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

import structlog

if TYPE_CHECKING:
    from .config import ExecutorSettings

EnvVariables = Mapping[str, str]


def _render_event(logger: Any, method_name: str, event_dict: Any) -> str:
    return event_dict["event"]


def _default_output() -> Any:
    """Dry-run channel printing the bare event line to stdout.

    It carries its own processor chain, so ``setup_logging`` never adds
    timestamps, levels or JSON wrapping to dry-run lines.
    """
    return structlog.wrap_logger(
        structlog.PrintLogger(sys.stdout),
        processors=[_render_event],
        wrapper_class=structlog.BoundLogger,
        context_class=dict,
    )


@dataclass(frozen=True)
class ExecutionContext:
    """Read-only parameters threaded through every execute call."""

    cwd: Union[str, Path]
    dry_run: bool = False
    env: Optional[EnvVariables] = None
    logger: Any = field(default_factory=_default_output, compare=False, repr=False)

    def with_overrides(self, **changes: Any) -> "ExecutionContext":
        """Return a copy of this context with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_settings(
        cls,
        settings: "ExecutorSettings",
        cwd: Optional[Union[str, Path]] = None,
    ) -> "ExecutionContext":
        """Build a context from loaded settings.

        Args:
            settings: Executor settings
            cwd: Working directory; falls back to ``settings.cwd`` and then
                the current process directory

        Returns:
            New execution context
        """
        return cls(
            cwd=cwd or settings.cwd or os.getcwd(),
            dry_run=settings.dry_run,
        )
