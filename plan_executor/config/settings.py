"""Configuration models using Pydantic."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..params import ParamSpec


class ActionConfig(BaseModel):
    """Declarative description of a single action."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(
        description="Identifier of the action"
    )
    action: str = Field(
        description="Registered name of the action to build"
    )
    parameters: Dict[str, Any] = Field(
        default_factory=dict,
        description="Parameters bound to the action"
    )
    params_meta: Optional[Dict[str, ParamSpec]] = Field(
        default=None,
        description="Descriptive metadata about the parameters"
    )


class PlanConfig(BaseModel):
    """Declarative description of a plan and its ordered members."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(
        description="Identifier of the plan"
    )
    steps: List[Union[ActionConfig, "PlanConfig"]] = Field(
        default_factory=list,
        description="Members of the plan, in execution order"
    )


PlanConfig.model_rebuild()


class ExecutorSettings(BaseSettings):
    """Global executor configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="PLAN_EXECUTOR_",
        case_sensitive=False,
        validate_assignment=True,
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_format: str = Field(
        default="json",
        pattern="^(json|plain)$",
        description="Log format (json, plain)"
    )

    # Execution defaults
    dry_run: bool = Field(
        default=False,
        description="Only log action descriptions instead of running them"
    )
    cwd: Optional[str] = Field(
        default=None,
        description="Working directory for executions (None for the process cwd)"
    )
