"""Component resolution and lifecycle tracking."""

from .harness import ComponentNotFoundError, Harness
from .tracker import (
    CircularDependencyError,
    DependencyNotFoundError,
    ResetError,
    Tracker,
    TrackerError,
)

__all__ = [
    "CircularDependencyError",
    "ComponentNotFoundError",
    "DependencyNotFoundError",
    "Harness",
    "ResetError",
    "Tracker",
    "TrackerError",
]
