"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from plan_executor.config import ActionConfig, ExecutorSettings, PlanConfig


class TestActionConfig:
    """Test ActionConfig model."""

    def test_valid_action_config(self):
        """Test creating valid action config."""
        config = ActionConfig(
            id="init-git",
            action="command",
            parameters={"command": "git init"}
        )

        assert config.id == "init-git"
        assert config.action == "command"
        assert config.parameters["command"] == "git init"

    def test_action_config_defaults(self):
        """Test action config with default parameters."""
        config = ActionConfig(id="noop", action="noop")

        assert config.parameters == {}
        assert config.params_meta is None

    def test_action_config_requires_action(self):
        """Test the action name is mandatory."""
        with pytest.raises(ValidationError):
            ActionConfig(id="missing")


class TestPlanConfig:
    """Test PlanConfig model."""

    def test_nested_steps(self):
        """Test plans and actions can be mixed in steps."""
        config = PlanConfig.model_validate(
            {
                "id": "outer",
                "steps": [
                    {"id": "a", "action": "command", "parameters": {"command": "true"}},
                    {"id": "inner", "steps": [{"id": "b", "action": "shell"}]},
                ],
            }
        )

        assert isinstance(config.steps[0], ActionConfig)
        assert isinstance(config.steps[1], PlanConfig)
        assert config.steps[1].steps[0].id == "b"

    def test_empty_plan(self):
        """Test steps default to an empty list."""
        assert PlanConfig(id="empty").steps == []


class TestExecutorSettings:
    """Test ExecutorSettings model."""

    def test_default_settings(self):
        """Test default executor settings."""
        settings = ExecutorSettings()

        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.dry_run is False
        assert settings.cwd is None

    def test_custom_settings(self):
        """Test custom executor settings."""
        settings = ExecutorSettings(
            log_level="DEBUG",
            log_format="plain",
            dry_run=True,
            cwd="/srv/project"
        )

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "plain"
        assert settings.dry_run is True
        assert settings.cwd == "/srv/project"

    def test_env_prefix(self, monkeypatch):
        """Test settings are read from prefixed environment variables."""
        monkeypatch.setenv("PLAN_EXECUTOR_DRY_RUN", "true")
        monkeypatch.setenv("plan_executor_log_level", "WARNING")

        settings = ExecutorSettings()

        assert settings.dry_run is True
        assert settings.log_level == "WARNING"

    def test_log_level_validation(self):
        """Test unknown log levels are rejected."""
        with pytest.raises(ValidationError):
            ExecutorSettings(log_level="VERBOSE")

    def test_log_format_validation(self):
        """Test unknown log formats are rejected."""
        with pytest.raises(ValidationError):
            ExecutorSettings(log_format="xml")

    def test_validate_assignment(self):
        """Test assignments are validated."""
        settings = ExecutorSettings()

        with pytest.raises(ValidationError):
            settings.log_format = "yaml"
