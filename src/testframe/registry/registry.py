"""In-memory registry mapping identifiers to component definitions."""

from __future__ import annotations

import logging

from testframe.core.interfaces import Component, ComponentId

LOGGER = logging.getLogger(__name__)


class DuplicateComponentError(ValueError):
    """Raised when two components are registered under the same identifier."""


class ComponentRegistry:
    """Registration-ordered store of component definitions."""

    def __init__(self, *components: Component) -> None:
        self._components: dict[ComponentId, Component] = {}
        for component in components:
            self.register(component)

    def register(self, component: Component) -> Component:
        """Add ``component`` to the registry and return it."""
        component_id = component.id
        if component_id in self._components:
            msg = f"Component {component_id!r} is already registered"
            raise DuplicateComponentError(msg)
        self._components[component_id] = component
        LOGGER.debug("Registered component: %s", component_id)
        return component

    def get(self, component_id: ComponentId) -> Component | None:
        """Return the component registered under ``component_id`` if any."""
        return self._components.get(component_id)

    def ids(self) -> list[ComponentId]:
        """Return registered identifiers in registration order."""
        return list(self._components)

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._components

    def __len__(self) -> int:
        return len(self._components)


__all__ = ["ComponentRegistry", "DuplicateComponentError"]
