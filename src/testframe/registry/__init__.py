"""Component registry implementations."""

from .registry import ComponentRegistry, DuplicateComponentError

__all__ = ["ComponentRegistry", "DuplicateComponentError"]
