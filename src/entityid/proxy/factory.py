"""Proxy type generation.

ProxyFactory is a stateful service that builds dynamic subclasses of entity
types, the way an ORM generates lazy-loading proxies. A proxy type reports
the class it was generated from through ``unproxied_type``, so a proxy and a
plain instance with the same key compare equal.
"""

from __future__ import annotations

from typing import Any, TypeVar

from entityid.config import get_settings
from entityid.core.entity import EntityWithId

E = TypeVar("E", bound=EntityWithId[Any])

_PROXIED_TYPE_ATTR = "__proxied_type__"


def is_proxy_type(cls: Any) -> bool:
    """Check if a class was generated by a ProxyFactory.

    Args:
        cls: Object to check; non-classes are never proxy types.

    Returns:
        True if cls is a generated proxy type, False otherwise.
    """
    return isinstance(cls, type) and _PROXIED_TYPE_ATTR in vars(cls)


class ProxyFactory:
    """Generates and caches one proxy subclass per entity type.

    Args:
        suffix: Class name suffix for generated types. Defaults to the
            configured ``proxy_suffix``.
    """

    def __init__(self, suffix: str | None = None):
        """Initialize proxy factory.

        Args:
            suffix: Class name suffix for generated types.
        """
        self._suffix = suffix if suffix is not None else get_settings().proxy_suffix
        self._proxies: dict[type, type] = {}

    def proxy_type(self, cls: type[E]) -> type[E]:
        """Get the proxy subclass for an entity type, generating it on first use.

        Proxying a proxy type returns the proxy of its underlying type.

        Args:
            cls: Entity class to proxy.

        Returns:
            Generated subclass of cls.

        Raises:
            TypeError: If cls is not an EntityWithId subclass.
        """
        if not (isinstance(cls, type) and issubclass(cls, EntityWithId)):
            raise TypeError(f"Cannot proxy {cls!r}: not an EntityWithId subclass")
        if is_proxy_type(cls):
            cls = vars(cls)[_PROXIED_TYPE_ATTR]

        proxy = self._proxies.get(cls)
        if proxy is None:
            proxy = self._build(cls)
            self._proxies[cls] = proxy
        return proxy

    def materialize(self, cls: type[E], key: Any) -> E:
        """Create a proxy instance that carries only its key.

        The entity's own ``__init__`` is not run, matching a lazy-loading
        proxy whose state is fetched later.

        Args:
            cls: Entity class the proxy stands for.
            key: Persisted key of the row.

        Returns:
            Instance of the proxy type for cls.

        Raises:
            ValueError: If key is the default (transient) key for cls.
        """
        proxy_cls = self.proxy_type(cls)
        instance = proxy_cls.__new__(proxy_cls)
        EntityWithId.__init__(instance)
        instance.assign_id(key)
        return instance

    def _build(self, cls: type) -> type:
        def unproxied_type(instance: Any) -> type:
            return cls

        namespace = {
            _PROXIED_TYPE_ATTR: cls,
            "__module__": cls.__module__,
            "__qualname__": f"{cls.__qualname__}{self._suffix}",
            "unproxied_type": unproxied_type,
        }
        return type(f"{cls.__name__}{self._suffix}", (cls,), namespace)


# Module-level factory instance, created on first use so settings load lazily
_factory: ProxyFactory | None = None


def get_proxy_factory() -> ProxyFactory:
    """Access the global proxy factory.

    Returns:
        The process-local ProxyFactory instance.
    """
    global _factory
    if _factory is None:
        _factory = ProxyFactory()
    return _factory
