"""Canonical default ("zero") key values per key type.

An entity is transient while its key equals the default of its key type.
Defaults are looked up once, when an entity class is created.

Usage:
    default_id_for(int)            # 0
    default_id_for(uuid.UUID)      # UUID('00000000-0000-0000-0000-000000000000')
    default_id_for(int | None)     # None

    register_default_id(OrderNumber, OrderNumber(0))
"""

from __future__ import annotations

import types
import uuid
from typing import Any, TypeVar, Union, get_args, get_origin

_UNION_ORIGINS = (Union, types.UnionType)


class KeyDefaultRegistry:
    """Process-local mapping from key types to their default value.

    Types without a registered default (and unions containing ``None``) resolve
    to ``None``, the absence value used for reference-like keys.
    """

    def __init__(self) -> None:
        """Initialize registry with defaults for the builtin key types."""
        self._defaults: dict[type, Any] = {
            int: 0,
            float: 0.0,
            str: "",
            bytes: b"",
            uuid.UUID: uuid.UUID(int=0),
        }

    def register(self, key_type: type, default: Any) -> None:
        """Register the default value for a key type.

        Args:
            key_type: Key class.
            default: Value meaning "no key assigned yet".

        Raises:
            TypeError: If key_type is not a class or default is not an instance of it.
        """
        if not isinstance(key_type, type):
            raise TypeError(f"Key type must be a class, got {key_type!r}")
        if default is not None and not isinstance(default, key_type):
            raise TypeError(
                f"Default {default!r} is not an instance of key type {key_type.__name__}"
            )
        self._defaults[key_type] = default

    def default_for(self, key_type: Any) -> Any:
        """Resolve the default value for a key type annotation.

        Lookup order: exact type, then the type's MRO, then ``None``.
        Parameterized generics resolve through their origin class and unions
        resolve to ``None``.

        Args:
            key_type: Key class or type annotation.

        Returns:
            The default key value.
        """
        origin = get_origin(key_type)
        if origin in _UNION_ORIGINS:
            return None
        if origin is not None:
            key_type = origin
        if not isinstance(key_type, type):
            return None

        for klass in key_type.__mro__:
            if klass in self._defaults:
                return self._defaults[klass]
        return None

    def is_registered(self, key_type: type) -> bool:
        """Check if a default is registered for exactly this type."""
        return key_type in self._defaults


# Module-level registry instance
_registry = KeyDefaultRegistry()


def get_key_defaults() -> KeyDefaultRegistry:
    """Access the global key-default registry.

    Returns:
        The process-local KeyDefaultRegistry instance.
    """
    return _registry


def register_default_id(key_type: type, default: Any) -> None:
    """Register a default key value on the global registry.

    Must run before entity classes keyed by ``key_type`` are defined, since
    defaults are resolved at class creation.
    """
    _registry.register(key_type, default)


def default_id_for(key_type: Any) -> Any:
    """Resolve a default key value from the global registry."""
    return _registry.default_for(key_type)


def resolve_key_type(cls: type, base: type) -> Any | None:
    """Find the concrete key type a class declares through its generic bases.

    Only the class's own ``__orig_bases__`` are inspected: a subscripted base
    whose origin is ``base`` (or a subclass of it) with a single non-TypeVar
    argument provides the key type.

    Args:
        cls: Class being created.
        base: Generic entity base class (EntityWithId).

    Returns:
        The key type annotation, or None if this class does not declare one.
    """
    for orig in cls.__dict__.get("__orig_bases__", ()):
        origin = get_origin(orig)
        if not (isinstance(origin, type) and issubclass(origin, base)):
            continue
        args = get_args(orig)
        if len(args) == 1 and not isinstance(args[0], TypeVar):
            return args[0]
    return None
