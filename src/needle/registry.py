"""
Needle adapter registration system.

Provides decorator-based registration of needle classes and the lookup that
finds the adapter class for a raw value such as a string or compiled pattern.
"""

import logging
from typing import TYPE_CHECKING, Any

from .constants import NeedleKind
from .exceptions import UnsupportedNeedleError

if TYPE_CHECKING:
    from .needles.base import NeedleModel

logger = logging.getLogger(__name__)


class NeedleRegistry:
    """
    Registry for needle classes.

    Tracks every needle class by kind, and for adapter classes also the raw
    source type they wrap (e.g. str -> StringNeedle).
    """

    def __init__(self):
        self._kinds: dict[str, dict[str, Any]] = {}
        # source type -> needle class
        self._adapters: dict[type, type['NeedleModel']] = {}
        # Reverse mapping: class -> kind
        self._class_to_kind: dict[type, str] = {}

    def register(
        self,
        kind: str | NeedleKind,
        needle_class: type['NeedleModel'],
        source_type: type | None = None,
    ) -> None:
        """
        Register a needle class.

        Args:
            kind: String or NeedleKind enum identifier for the needle kind
            needle_class: Needle implementation class
            source_type: Raw value type the class adapts, or None if it has none

        Re-registering a kind replaces the previous class (useful for testing).

        Raises:
            ValueError: If source_type is given but the class does not override from_value
        """
        if source_type is not None and not self._builds_from_value(needle_class):
            raise ValueError(
                f"{needle_class.__name__} must override from_value to adapt "
                f"'{source_type.__name__}' values",
            )

        kind_str = str(kind)

        previous = self._kinds.get(kind_str)
        if previous is not None and previous["source_type"] is not None:
            self._adapters.pop(previous["source_type"], None)

        self._kinds[kind_str] = {
            "class": needle_class,
            "source_type": source_type,
        }
        if source_type is not None:
            self._adapters[source_type] = needle_class
        self._class_to_kind[needle_class] = kind_str

        logger.debug(
            "Registered needle kind %r -> %s (source type: %s)",
            kind_str,
            needle_class.__name__,
            source_type.__name__ if source_type is not None else None,
        )

    def get_needle_class(self, kind: str) -> type['NeedleModel']:
        """
        Get the needle class registered for a kind.

        Raises:
            ValueError: If the kind is not registered
        """
        kind_str = str(kind)
        if kind_str not in self._kinds:
            raise ValueError(f"Needle kind '{kind_str}' is not registered")
        return self._kinds[kind_str]["class"]

    def find_adapter_class(self, source_type: type) -> type['NeedleModel'] | None:
        """
        Find the adapter class for a raw value type.

        Walks the type's MRO so subclasses (e.g. a str subclass) resolve to the
        adapter of their closest registered base.

        Returns:
            The adapter class, or None if no base of source_type is registered
        """
        for base in source_type.__mro__:
            if base in self._adapters:
                return self._adapters[base]
        return None

    def get_adapter_class(self, source_type: type) -> type['NeedleModel']:
        """
        Get the adapter class for a raw value type.

        Raises:
            UnsupportedNeedleError: If no adapter is registered for the type or its bases
        """
        adapter_class = self.find_adapter_class(source_type)
        if adapter_class is None:
            raise UnsupportedNeedleError(
                f"No needle adapter registered for type '{source_type.__name__}'",
                value_type=source_type,
            )
        return adapter_class

    def get_kind_for_class(self, cls: type) -> str:
        """
        Get the kind a needle class is registered under.

        Raises:
            ValueError: If class is not registered
        """
        if cls not in self._class_to_kind:
            raise ValueError(f"Class {cls} is not registered")
        return self._class_to_kind[cls]

    def list_registered_needles(self) -> dict[str, dict[str, Any]]:
        """Return a copy of the registration info for every kind."""
        return {kind: info.copy() for kind, info in self._kinds.items()}

    def clear(self) -> None:
        """Clear all registrations (useful for testing)."""
        self._kinds.clear()
        self._adapters.clear()
        self._class_to_kind.clear()

    @staticmethod
    def _builds_from_value(needle_class: type) -> bool:
        """Determine if a needle class provides its own from_value."""
        # Import here to avoid circular import
        from .needles.base import NeedleModel  # noqa: PLC0415
        return needle_class.from_value.__func__ is not NeedleModel.from_value.__func__


# Global registry instance
_global_registry = NeedleRegistry()


def register(kind: str | NeedleKind, source_type: type | None = None) -> callable:
    """
    Decorator for registering needle classes.

    Args:
        kind: String or NeedleKind enum identifier for the needle kind
        source_type: Raw value type the decorated class adapts, if any

    Returns:
        Decorator function

    Example:
        @register(NeedleKind.STRING, source_type=str)
        class StringNeedle(NeedleModel):
            ...

        # Strings are also supported:
        @register('glob', source_type=GlobPattern)
        class GlobNeedle(NeedleModel):
            ...
    """
    def decorator(cls: type['NeedleModel']) -> type['NeedleModel']:
        _global_registry.register(kind, cls, source_type)
        return cls

    return decorator


def get_needle_class(kind: str) -> type['NeedleModel']:
    """Get the needle class registered for a kind."""
    return _global_registry.get_needle_class(kind)


def find_adapter_class(source_type: type) -> type['NeedleModel'] | None:
    """Find the adapter class for a raw value type, or None."""
    return _global_registry.find_adapter_class(source_type)


def get_adapter_class(source_type: type) -> type['NeedleModel']:
    """Get the adapter class for a raw value type."""
    return _global_registry.get_adapter_class(source_type)


def get_kind_for_class(cls: type) -> str:
    """Get the kind a needle class is registered under."""
    return _global_registry.get_kind_for_class(cls)


def list_registered_needles() -> dict[str, dict[str, Any]]:
    """
    Get all registered needle kinds.

    Returns:
        Dict mapping kind strings to {"class": ..., "source_type": ...}
    """
    return _global_registry.list_registered_needles()


def clear_registry() -> None:
    """Clear all registered needles (useful for testing)."""
    _global_registry.clear()


def get_registry_state() -> dict[str, dict[str, Any]]:
    """Get the current state of the registry so it can be restored later."""
    return _global_registry.list_registered_needles()


def restore_registry_state(registry_state: dict[str, dict[str, Any]]) -> None:
    """
    Restore the registry state from get_registry_state() output.

    Args:
        registry_state: Dict containing needle registrations to restore
    """
    _global_registry.clear()

    for kind, info in registry_state.items():
        _global_registry.register(kind, info["class"], info["source_type"])
