"""Core data records used by the tracker."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .interfaces import ComponentId

ComponentFactory = Callable[[Any, Mapping[ComponentId, Any]], Any]


@dataclass(frozen=True, slots=True)
class ComponentInstance:
    """Initialised component value paired with its identifier."""

    id: ComponentId
    value: Any


@dataclass(frozen=True, slots=True)
class FunctionComponent:
    """Component backed by a plain factory callable.

    Attributes:
        id: Identifier the component is registered under.
        factory: Callable receiving ``(context, dependencies)``.
        dependencies: Identifiers that must be initialised first.
    """

    id: ComponentId
    factory: ComponentFactory
    dependencies: tuple[ComponentId, ...] = ()

    def requires(self) -> Sequence[ComponentId]:
        """Return the declared dependency identifiers."""
        return self.dependencies

    def init(self, context: Any, dependencies: Mapping[ComponentId, Any]) -> Any:
        """Invoke the factory with the resolved dependency values."""
        return self.factory(context, dependencies)


__all__ = ["ComponentFactory", "ComponentInstance", "FunctionComponent"]
