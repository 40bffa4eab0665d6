"""Synchronous entry point for running an executable."""

import asyncio
from typing import Any, Optional

import structlog

from .actions.base import Executable
from .config import ExecutorSettings
from .context import ExecutionContext
from .utils import setup_logging

logger = structlog.get_logger(__name__)


def run(
    executable: Executable,
    ctx: Optional[ExecutionContext] = None,
    settings: Optional[ExecutorSettings] = None,
) -> Any:
    """Execute from synchronous code.

    Without an explicit context, settings are loaded from the environment,
    logging is configured from them and the context is derived from them.

    Args:
        executable: Action or plan to run
        ctx: Execution context
        settings: Settings used when ``ctx`` is omitted

    Returns:
        The executable's result

    Raises:
        Exception: whatever the executable raised, unchanged
    """
    if ctx is None:
        settings = settings or ExecutorSettings()
        setup_logging(settings.log_level, settings.log_format)
        ctx = ExecutionContext.from_settings(settings)

    logger.info(
        "Starting execution",
        executable=executable.id,
        cwd=str(ctx.cwd),
        dry_run=ctx.dry_run,
    )

    try:
        result = asyncio.run(executable.execute(ctx))
    except Exception as e:
        logger.error(
            "Execution failed",
            executable=executable.id,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise

    logger.info("Execution finished", executable=executable.id)
    return result
