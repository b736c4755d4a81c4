"""Memoised dependency resolution and lifecycle tracking for components."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from testframe.core.interfaces import (
    Closer,
    Component,
    ComponentId,
    ComponentLookup,
    Resettable,
)
from testframe.core.models import ComponentInstance

LOGGER = logging.getLogger(__name__)


class TrackerError(RuntimeError):
    """Base class for failures raised by the tracker itself."""


class DependencyNotFoundError(TrackerError, LookupError):
    """Raised when a required component is missing from the registry."""

    def __init__(self, dependency_id: ComponentId, component_id: ComponentId) -> None:
        super().__init__(
            f"unable to resolve dependency {dependency_id} for component {component_id}"
        )
        self.dependency_id = dependency_id
        self.component_id = component_id


class CircularDependencyError(TrackerError):
    """Raised when cycle detection finds a component depending on itself."""

    def __init__(self, path: list[ComponentId]) -> None:
        super().__init__(
            "circular dependency: " + " -> ".join(str(item) for item in path)
        )
        self.path = tuple(path)


class ResetError(ExceptionGroup):
    """Aggregate of every reset failure seen during a single sweep."""

    def derive(self, excs: Sequence[Exception]) -> ResetError:
        return ResetError(self.message, excs)


class Tracker:
    """Keeps track of initialised components and their initialisation order.

    Components are resolved depth-first: every required identifier is looked
    up in the registry and initialised before the requesting component, so
    the recorded order is a valid topological order of the dependency graph.
    Each identifier is initialised at most once until :meth:`cleanup`.
    """

    def __init__(
        self,
        registry: ComponentLookup,
        *,
        logger: logging.Logger | None = None,
        detect_cycles: bool = False,
    ) -> None:
        """Bind the tracker to the registry used to look up dependencies.

        Args:
            registry: Lookup for components named in ``requires``.
            logger: Logger for sweep diagnostics; defaults to the module logger.
            detect_cycles: Raise :class:`CircularDependencyError` on cycles
                instead of recursing until ``RecursionError``.
        """
        self._registry = registry
        self._logger = logger or LOGGER
        self._detect_cycles = detect_cycles
        self._instance_map: dict[ComponentId, Any] = {}
        # Initialisation order, used for ordered reset and cleanup.
        self._instances: list[ComponentInstance] = []
        self._resolving: list[ComponentId] = []

    def initialize(self, context: Any, component: Component) -> Any:
        """Initialise ``component`` and its dependencies, returning its instance.

        Raises:
            DependencyNotFoundError: If a required identifier is not registered.
            CircularDependencyError: If cycle detection is on and a cycle is found.
            Exception: Whatever a component's ``init`` raises, unchanged.
        """
        component_id = component.id
        if component_id in self._instance_map:
            return self._instance_map[component_id]

        if self._detect_cycles:
            if component_id in self._resolving:
                start = self._resolving.index(component_id)
                raise CircularDependencyError(
                    [*self._resolving[start:], component_id]
                )
            self._resolving.append(component_id)
            try:
                return self._resolve(context, component)
            finally:
                self._resolving.pop()
        return self._resolve(context, component)

    def _resolve(self, context: Any, component: Component) -> Any:
        component_id = component.id
        dependencies: dict[ComponentId, Any] = {}
        for dependency_id in component.requires():
            dependency = self._registry.get(dependency_id)
            if dependency is None:
                raise DependencyNotFoundError(dependency_id, component_id)
            dependencies[dependency_id] = self.initialize(context, dependency)

        value = component.init(context, dependencies)

        self._instance_map[component_id] = value
        self._instances.append(ComponentInstance(id=component_id, value=value))
        self._logger.debug("Initialized dependency: %s", component_id)
        return value

    def get(self, component_id: ComponentId) -> tuple[Any, bool]:
        """Return the tracked instance for ``component_id`` and whether it exists."""
        if component_id in self._instance_map:
            return self._instance_map[component_id], True
        return None, False

    def all(self) -> list[Any]:
        """Return all tracked instances in initialisation order."""
        return [entry.value for entry in self._instances]

    def reset(self) -> None:
        """Reset every resettable instance, front to back.

        Every instance is attempted even when an earlier one fails.

        Raises:
            ResetError: Grouping each failure in the order it occurred.
        """
        errors: list[Exception] = []
        for entry in self._instances:
            if not _supports(entry.value, Resettable, "reset"):
                continue
            self._logger.debug("Resetting state for dependency: %s", entry.id)
            try:
                entry.value.reset()
            except Exception as exc:  # noqa: BLE001
                self._logger.error(
                    "Error resetting dependency state: %s: %s", entry.id, exc
                )
                errors.append(exc)

        if errors:
            raise ResetError("error resetting dependency state", errors)

    def cleanup(self) -> None:
        """Close every closable instance and forget all tracked state.

        Close failures are logged and otherwise ignored, so this is safe to
        call unconditionally during teardown.
        """
        for entry in list(self._instances):
            if not _supports(entry.value, Closer, "close"):
                continue
            self._logger.debug("Cleaning up state for dependency: %s", entry.id)
            try:
                entry.value.close()
            except Exception as exc:  # noqa: BLE001
                self._logger.error(
                    "Error cleaning up dependency state: %s: %s", entry.id, exc
                )

        self._instance_map.clear()
        self._instances.clear()

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._instance_map

    def __len__(self) -> int:
        return len(self._instances)


def _supports(value: Any, capability: type, method: str) -> bool:
    """Return whether ``value`` is an instance with a callable ``method``."""
    if isinstance(value, type) or not isinstance(value, capability):
        return False
    return callable(getattr(value, method, None))


__all__ = [
    "CircularDependencyError",
    "DependencyNotFoundError",
    "ResetError",
    "Tracker",
    "TrackerError",
]
