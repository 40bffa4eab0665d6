"""Configuration management with Pydantic models."""

from .settings import ActionConfig, ExecutorSettings, PlanConfig

__all__ = ["ExecutorSettings", "ActionConfig", "PlanConfig"]
