"""Base classes for executables and actions."""

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping, Optional, Union

import structlog
from pydantic import BaseModel

from ..context import ExecutionContext
from ..params import ParamMeta, ParamSpec, normalize_params_meta

logger = structlog.get_logger(__name__)


class ActionKind(Enum):
    """Variant tag of an action."""

    HANDLER = "handler"
    COMMAND_LINE = "command_line"
    PLAN = "plan"
    CUSTOM = "custom"


class Executable(ABC):
    """Anything that can be executed against an execution context."""

    def __init__(self, id: str) -> None:
        self.id = id

    @abstractmethod
    async def execute(self, ctx: ExecutionContext) -> Any:
        """Execute against the given context.

        Args:
            ctx: Execution context

        Returns:
            Variant-specific result
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"


class Action(Executable):
    """Executable bound to its parameters at construction time."""

    kind: ActionKind = ActionKind.CUSTOM

    def __init__(
        self,
        id: str,
        params: Any = None,
        params_meta: Optional[Mapping[str, Union[ParamSpec, Mapping[str, Any]]]] = None,
    ) -> None:
        """Initialize action.

        Args:
            id: Caller-assigned identifier
            params: Parameters passed to ``run`` on every execution
            params_meta: Optional descriptive metadata about the parameters
        """
        super().__init__(id)
        self._params = params
        self.params_meta: Optional[ParamMeta] = normalize_params_meta(params_meta)

    @property
    def params(self) -> Any:
        return self._params

    def describe(self) -> str:
        """Render ``<id>(<json params>)``."""
        if isinstance(self._params, BaseModel):
            serialized = self._params.model_dump_json()
        else:
            serialized = json.dumps(self._params, separators=(",", ":"), ensure_ascii=False)
        return f"{self.id}({serialized})"

    async def execute(self, ctx: ExecutionContext) -> Any:
        """Run the action, or only log its description in dry-run mode."""
        if ctx.dry_run:
            description = self.describe()
            ctx.logger.info(f"[dry-run][action:{self.id}] {description}")
            return self._dry_run_result()

        logger.debug("Executing action", action=self.id, kind=self.kind.value)
        try:
            result = await self.run(self._params, ctx)
        except Exception as e:
            logger.debug(
                "Action failed",
                action=self.id,
                kind=self.kind.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        logger.debug("Action completed", action=self.id, kind=self.kind.value)
        return result

    @abstractmethod
    async def run(self, params: Any, ctx: ExecutionContext) -> Any:
        """Perform the action's effect.

        Args:
            params: The parameters bound at construction
            ctx: Execution context

        Returns:
            Variant-specific result
        """
        pass

    def _dry_run_result(self) -> Any:
        return None
