"""Protocol interfaces shared by the tracker and its collaborators."""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

ComponentId = Hashable


class Component(Protocol):
    """A piece of test infrastructure that can be initialised on demand."""

    @property
    def id(self) -> ComponentId:
        """Identifier naming the component and, once resolved, its instance."""
        raise NotImplementedError

    def requires(self) -> Sequence[ComponentId]:
        """Return identifiers of the components this one depends on."""
        raise NotImplementedError

    def init(self, context: Any, dependencies: Mapping[ComponentId, Any]) -> Any:
        """Create the component instance from its resolved dependencies."""
        raise NotImplementedError


class ComponentLookup(Protocol):
    """Read-only lookup of component definitions by identifier."""

    def get(self, component_id: ComponentId) -> Component | None:
        """Return the component registered under ``component_id`` if any."""
        raise NotImplementedError


@runtime_checkable
class Resettable(Protocol):
    """Instance whose internal state can be reset between test cases."""

    def reset(self) -> None:
        """Restore the instance to a clean state."""
        raise NotImplementedError


@runtime_checkable
class Closer(Protocol):
    """Instance holding resources that must be released at teardown."""

    def close(self) -> None:
        """Release any resources held by the instance."""
        raise NotImplementedError


__all__ = [
    "Closer",
    "Component",
    "ComponentId",
    "ComponentLookup",
    "Resettable",
]
