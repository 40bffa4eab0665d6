"""Pytest configuration and fixtures for plan executor tests."""

from typing import Any, List
from unittest.mock import MagicMock

import pytest
import structlog

from plan_executor import ExecutionContext, ExecutorSettings, HandlerAction


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def ctx(tmp_path):
    """Provide a non dry-run execution context rooted in a temp directory."""
    return ExecutionContext(cwd=str(tmp_path))


@pytest.fixture
def output():
    """Provide a mocked dry-run output channel."""
    return MagicMock()


@pytest.fixture
def dry_run_ctx(tmp_path, output):
    """Provide a dry-run context whose output is captured."""
    return ExecutionContext(cwd=str(tmp_path), dry_run=True, logger=output)


@pytest.fixture
def executor_settings(tmp_path):
    """Provide test executor settings."""
    return ExecutorSettings(
        log_level="DEBUG",
        log_format="plain",
        cwd=str(tmp_path),
    )


@pytest.fixture
def event_log() -> List[str]:
    """Shared ordered log that recording actions append to."""
    return []


@pytest.fixture
def recording_action(event_log):
    """Factory for handler actions that record their start and end."""

    def make(action_id: str, result: Any = None, error: Exception = None) -> HandlerAction:
        async def handler(params, ctx):
            event_log.append(f"{action_id}-start")
            if error is not None:
                raise error
            event_log.append(f"{action_id}-end")
            return result

        return HandlerAction(action_id, {}, handler)

    return make
