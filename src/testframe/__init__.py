"""Lazy component resolution and lifecycle tracking for test harnesses."""

from .core import (
    AppSettings,
    Closer,
    Component,
    ComponentInstance,
    FunctionComponent,
    Resettable,
    configure_logging,
    load_app_settings,
)
from .framework import (
    CircularDependencyError,
    ComponentNotFoundError,
    DependencyNotFoundError,
    Harness,
    ResetError,
    Tracker,
    TrackerError,
)
from .registry import ComponentRegistry, DuplicateComponentError

__all__ = [
    "AppSettings",
    "CircularDependencyError",
    "Closer",
    "Component",
    "ComponentInstance",
    "ComponentNotFoundError",
    "ComponentRegistry",
    "DependencyNotFoundError",
    "DuplicateComponentError",
    "FunctionComponent",
    "Harness",
    "ResetError",
    "Resettable",
    "Tracker",
    "TrackerError",
    "configure_logging",
    "load_app_settings",
]
