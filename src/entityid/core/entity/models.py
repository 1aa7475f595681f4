"""Identity-keyed entity models.

Two entities are equal when they carry the same non-default key and one's
unproxied type is assignable to the other's. Transient entities (key still at
its default) are only ever equal to themselves.

Usage:
    class Order(EntityWithId[int]):
        def __init__(self, customer: str, id: int | None = None) -> None:
            super().__init__(id)
            self.customer = customer

    order = Order("ada")          # transient, hash(order) == 0
    order.assign_id(42)           # identified, hash(order) == hash(42)
    order == Order("bob", id=42)  # True
"""

from __future__ import annotations

from typing import Any, ClassVar

from entityid.core.entity.keys import default_id_for, resolve_key_type
from entityid.core.types import TRANSIENT_HASH, Key


class IdentityReassignmentError(Exception):
    """Raised when an identified entity is given a different key."""

    pass


class Entity:
    """Marker base for domain objects tracked by a persistence layer."""

    __slots__ = ()


class EntityWithId[K: Key](Entity):
    """Entity identified by a primary key of type ``K``.

    The key default is resolved from the generic parameter when the subclass
    is created (``0`` for ``int``, ``""`` for ``str``, ...). Subclasses may set
    ``default_id`` in their class body to override it. Only subclasses are
    instantiated; constructing EntityWithId itself raises TypeError.

    Equality and hashing read the key on every call and take no locks: callers
    must not mutate the key while another thread compares the entity.
    """

    key_type: ClassVar[Any] = None
    default_id: ClassVar[Any] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        key_type = resolve_key_type(cls, EntityWithId)
        if key_type is None:
            return
        cls.key_type = key_type
        if "default_id" not in cls.__dict__:
            cls.default_id = default_id_for(key_type)

    def __init__(self, id: K | None = None) -> None:
        if type(self) is EntityWithId:
            raise TypeError("EntityWithId is abstract; instantiate a subclass")
        self._id: K = type(self).default_id if id is None else id

    @property
    def id(self) -> K:
        """Primary key of this entity."""
        return self._id

    @property
    def is_transient(self) -> bool:
        """True while the key still holds the default value for its type."""
        return bool(self._id == type(self).default_id)

    def assign_id(self, key: K) -> None:
        """Set the primary key. Intended for persistence mechanisms.

        The key is write-once: a transient entity takes it, assigning the key
        it already holds does nothing, and any other key is refused.

        Args:
            key: Key issued for this entity.

        Raises:
            ValueError: If key is the default value (entities never become
                transient again).
            IdentityReassignmentError: If the entity already has a different key.
        """
        if key == type(self).default_id:
            raise ValueError(
                f"Cannot assign default key {key!r} to {type(self).__name__}"
            )
        if not self.is_transient and self._id != key:
            raise IdentityReassignmentError(
                f"{type(self).__name__} already has key {self._id!r}, cannot assign {key!r}"
            )
        self._id = key

    def unproxied_type(self) -> type:
        """Return the declared type this instance stands for.

        Proxy types generated by a persistence layer override this to return
        the class they were generated from.
        """
        return type(self)

    def equals(self, other: EntityWithId[K] | None) -> bool:
        """Determine whether this entity and ``other`` are the same persisted entity.

        Args:
            other: Entity to compare to.

        Returns:
            True if other is this instance, or if neither is transient, their
            keys are equal and one unproxied type is a subclass of the other.
        """
        # instance is never equal to nothing
        if other is None:
            return False

        if other is self:
            return True

        if self.is_transient or other.is_transient or self._id != other._id:
            return False

        # same key: one side may be a proxy subclass of the other
        this_type = unproxied_type_of(self)
        other_type = unproxied_type_of(other)
        return issubclass(other_type, this_type) or issubclass(this_type, other_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntityWithId):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return TRANSIENT_HASH if self.is_transient else hash(self._id)

    def __repr__(self) -> str:
        key = "<transient>" if self.is_transient else repr(self._id)
        return f"{type(self).__name__}(id={key})"


def unproxied_type_of(instance: Any) -> type:
    """Get the declared type of an object, seeing through generated proxies.

    Entities answer through their ``unproxied_type`` hook; any other object
    is its own type.
    """
    if isinstance(instance, EntityWithId):
        return instance.unproxied_type()
    return type(instance)
