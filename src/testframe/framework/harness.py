"""Harness owning the component graph and lifecycle for one test run."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

from testframe.core.config import TrackerSettings, load_app_settings
from testframe.core.interfaces import ComponentId, ComponentLookup

from .tracker import Tracker, TrackerError

LOGGER = logging.getLogger(__name__)


class ComponentNotFoundError(TrackerError, LookupError):
    """Raised when a requested component is not present in the registry."""


class Harness:
    """Binds a registry, a tracker, and an execution context together.

    Example:
        >>> with Harness(registry, context) as harness:
        ...     api = harness.require("api")[0]
        ...     harness.reset()
    """

    def __init__(
        self,
        registry: ComponentLookup,
        context: Any = None,
        *,
        settings: TrackerSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Bind the harness to a registry and the context handed to initialisers.

        When ``settings`` is omitted, tracker settings come from
        :func:`load_app_settings`, so ``TESTFRAME_TRACKER__DETECT_CYCLES`` applies.
        """
        settings = settings or load_app_settings().tracker
        self._registry = registry
        self._context = context
        self._logger = logger or LOGGER
        self._tracker = Tracker(
            registry, logger=self._logger, detect_cycles=settings.detect_cycles
        )

    @property
    def context(self) -> Any:
        """Opaque context passed to every component initialiser."""
        return self._context

    @property
    def tracker(self) -> Tracker:
        """Tracker holding the instances created by this harness."""
        return self._tracker

    def require(self, *component_ids: ComponentId) -> list[Any]:
        """Initialise the named components, returning instances in argument order."""
        values: list[Any] = []
        for component_id in component_ids:
            component = self._registry.get(component_id)
            if component is None:
                msg = f"component {component_id} is not registered"
                raise ComponentNotFoundError(msg)
            values.append(self._tracker.initialize(self._context, component))
        return values

    def get(self, component_id: ComponentId) -> tuple[Any, bool]:
        """Return a previously initialised instance without creating it."""
        return self._tracker.get(component_id)

    def instances(self) -> list[Any]:
        """Return every initialised instance in initialisation order."""
        return self._tracker.all()

    def reset(self) -> None:
        """Reset all resettable instances between test cases."""
        self._tracker.reset()

    def close(self) -> None:
        """Tear down all instances; never raises for component close failures."""
        self._logger.info("Cleaning up %d dependencies", len(self._tracker))
        self._tracker.cleanup()

    def __enter__(self) -> Harness:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


__all__ = ["ComponentNotFoundError", "Harness"]
