"""Core functionalities: entity equality contract and key defaults.

Architecture Note:
    core/ contains the pure comparison logic and has no state beyond the
    key-default registry. For the stateful proxy type cache, see proxy/.
"""

from entityid.core.entity import (
    Entity,
    EntityWithId,
    IdentityReassignmentError,
    KeyDefaultRegistry,
    default_id_for,
    get_key_defaults,
    register_default_id,
    unproxied_type_of,
)
from entityid.core.types import TRANSIENT_HASH, Key

__all__ = [
    # Types
    "Key",
    "TRANSIENT_HASH",
    # Entity
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
