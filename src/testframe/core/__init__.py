"""Core utilities for configuration, logging, and component contracts."""

from .config import AppSettings, LoggingSettings, TrackerSettings, load_app_settings
from .interfaces import Closer, Component, ComponentId, ComponentLookup, Resettable
from .logging import configure_logging
from .models import ComponentInstance, FunctionComponent

__all__ = [
    "AppSettings",
    "Closer",
    "Component",
    "ComponentId",
    "ComponentInstance",
    "ComponentLookup",
    "FunctionComponent",
    "LoggingSettings",
    "Resettable",
    "TrackerSettings",
    "configure_logging",
    "load_app_settings",
]
