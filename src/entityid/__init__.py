"""entityid: identity-keyed entities with proxy-aware equality.

Usage:
    from entityid import EntityWithId

    class Customer(EntityWithId[int]):
        def __init__(self, name: str, id: int | None = None) -> None:
            super().__init__(id)
            self.name = name

    a = Customer("ada")
    b = Customer("ada")
    assert a != b            # both transient
    a.assign_id(7)
    assert a == Customer("ada", id=7)
"""

__version__ = "0.1.0"

# Config
from entityid.config import IdentitySettings, configure, get_settings

# Core primitives
from entityid.core import (
    TRANSIENT_HASH,
    Entity,
    EntityWithId,
    IdentityReassignmentError,
    Key,
    default_id_for,
    register_default_id,
    unproxied_type_of,
)

# Proxies
from entityid.proxy import ProxyFactory, get_proxy_factory, is_proxy_type

__all__ = [
    # Version
    "__version__",
    # Core
    "Key",
    "TRANSIENT_HASH",
    "Entity",
    "EntityWithId",
    "IdentityReassignmentError",
    "unproxied_type_of",
    "default_id_for",
    "register_default_id",
    # Proxies
    "ProxyFactory",
    "get_proxy_factory",
    "is_proxy_type",
    # Config
    "IdentitySettings",
    "configure",
    "get_settings",
]
