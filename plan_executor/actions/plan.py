"""Sequential composition of executables."""

from typing import Any, Iterable, Iterator, List, Optional, Tuple

import structlog

from ..context import ExecutionContext
from .base import Action, ActionKind, Executable

logger = structlog.get_logger(__name__)


class Plan(Action):
    """Ordered list of executables run one after another.

    Members run in insertion order and each finishes before the next starts.
    The first failing member aborts the plan and its exception propagates
    as is. Members are held by reference and may be shared between plans.
    """

    kind = ActionKind.PLAN

    def __init__(self, id: str, executables: Optional[Iterable[Executable]] = None) -> None:
        super().__init__(id, None)
        self._executables: List[Executable] = list(executables or [])

    def add(self, executable: Executable) -> "Plan":
        """Append a member and return the plan for chaining."""
        self._executables.append(executable)
        return self

    @property
    def executables(self) -> Tuple[Executable, ...]:
        return tuple(self._executables)

    def __len__(self) -> int:
        return len(self._executables)

    def __iter__(self) -> Iterator[Executable]:
        return iter(self._executables)

    def describe(self) -> str:
        return f"{self.id} [{', '.join(e.id for e in self._executables)}]"

    async def run(self, params: Any, ctx: ExecutionContext) -> List[Any]:
        results: List[Any] = []
        total = len(self._executables)

        for index, executable in enumerate(self._executables, start=1):
            logger.debug(
                "Running plan member",
                plan=self.id,
                member=executable.id,
                position=index,
                total=total,
            )
            results.append(await executable.execute(ctx))

        logger.info("Plan completed", plan=self.id, members=total)
        return results

    def _dry_run_result(self) -> List[Any]:
        return []
