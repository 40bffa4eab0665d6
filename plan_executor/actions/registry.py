"""Action factory registry and decorator."""

from typing import Any, Callable, Dict, List, Mapping, Optional, Union

import structlog

from ..config import ActionConfig, PlanConfig
from ..errors import UnknownActionError
from .base import Action
from .handler import Handler, HandlerAction
from .plan import Plan

logger = structlog.get_logger(__name__)

ActionFactory = Callable[[str, Dict[str, Any], Optional[Mapping[str, Any]]], Action]


class ActionRegistry:
    """Registry mapping action names to factories."""

    def __init__(self) -> None:
        self._factories: Dict[str, ActionFactory] = {}
        self._descriptions: Dict[str, str] = {}

    def register(self, name: str, factory: ActionFactory, description: str = "") -> None:
        """Register an action factory.

        Args:
            name: Name used by ``create`` and in ``ActionConfig.action``
            factory: Callable ``(action_id, parameters, params_meta) -> Action``
            description: Optional human-readable description
        """
        if name in self._factories:
            logger.warning("Overriding existing action factory", action=name)

        self._factories[name] = factory
        self._descriptions[name] = description or f"Action factory for {name}"

        logger.debug("Registered action factory", action=name)

    def create(
        self,
        name: str,
        action_id: str,
        parameters: Optional[Dict[str, Any]] = None,
        params_meta: Optional[Mapping[str, Any]] = None,
    ) -> Action:
        """Build an action from a registered factory.

        Raises:
            UnknownActionError: if nothing is registered under ``name``
        """
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownActionError(name, list(self._factories))

        return factory(action_id, dict(parameters or {}), params_meta)

    def build(self, config: Union[ActionConfig, PlanConfig]) -> Action:
        """Build an action or a nested plan from its declarative config."""
        if isinstance(config, PlanConfig):
            plan = Plan(config.id)
            for step in config.steps:
                plan.add(self.build(step))
            return plan

        return self.create(config.action, config.id, config.parameters, config.params_meta)

    def list_actions(self) -> List[Dict[str, str]]:
        """List all registered actions.

        Returns:
            List of action info dictionaries
        """
        return [
            {"name": name, "description": self._descriptions[name]}
            for name in self._factories
        ]

    def __contains__(self, name: str) -> bool:
        return name in self._factories


# Global action registry instance
_action_registry = ActionRegistry()


def register_action(name: str, description: str = "") -> Callable[[Handler], Handler]:
    """Decorator registering a handler function as a named action.

    The decorated function receives ``(params, ctx)`` and is wrapped in a
    ``HandlerAction`` each time the registry builds the action.
    """
    def decorator(handler: Handler) -> Handler:
        def factory(
            action_id: str,
            parameters: Dict[str, Any],
            params_meta: Optional[Mapping[str, Any]],
        ) -> Action:
            return HandlerAction(action_id, parameters, handler, params_meta)

        _action_registry.register(
            name, factory, description or (handler.__doc__ or "").strip()
        )
        return handler

    return decorator


def get_action_registry() -> ActionRegistry:
    """Get the global action registry instance."""
    return _action_registry
