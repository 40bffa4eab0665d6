"""Action delegating to a caller-supplied function."""

import inspect
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from ..context import ExecutionContext
from ..params import ParamSpec
from .base import Action, ActionKind

Handler = Callable[[Any, ExecutionContext], Union[Any, Awaitable[Any]]]


class HandlerAction(Action):
    """Action whose effect is a plain or async function ``(params, ctx)``."""

    kind = ActionKind.HANDLER

    def __init__(
        self,
        id: str,
        params: Any,
        handler: Handler,
        params_meta: Optional[Mapping[str, Union[ParamSpec, Mapping[str, Any]]]] = None,
    ) -> None:
        super().__init__(id, params, params_meta)
        self.handler = handler

    async def run(self, params: Any, ctx: ExecutionContext) -> Any:
        result = self.handler(params, ctx)
        if inspect.isawaitable(result):
            result = await result
        return result
