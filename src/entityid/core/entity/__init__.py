"""Entity identity: keyed entities, key defaults and proxy-aware equality."""

from entityid.core.entity.keys import (
    KeyDefaultRegistry,
    default_id_for,
    get_key_defaults,
    register_default_id,
)
from entityid.core.entity.models import (
    Entity,
    EntityWithId,
    IdentityReassignmentError,
    unproxied_type_of,
)

__all__ = [
    # Models
    "Entity",
    "EntityWithId",
    "IdentityReassignmentError",
    "unproxied_type_of",
    # Keys
    "KeyDefaultRegistry",
    "default_id_for",
    "get_key_defaults",
    "register_default_id",
]
