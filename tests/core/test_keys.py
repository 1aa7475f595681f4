"""Tests for key default resolution.

Why these tests exist:
- Transience is defined against the default key, so a wrong default makes
  persisted entities look transient (or the reverse)
- Defaults are resolved once per class, from its generic parameter
"""

import enum
import uuid
from typing import Optional

import pytest

from entityid import EntityWithId
from entityid.core.entity import KeyDefaultRegistry


class OrderNumber(str):
    pass


class Priority(enum.IntEnum):
    LOW = 1
    HIGH = 2


@pytest.fixture
def registry():
    """Create a KeyDefaultRegistry for testing."""
    return KeyDefaultRegistry()


def test_builtin_defaults(registry):
    assert registry.default_for(int) == 0
    assert registry.default_for(float) == 0.0
    assert registry.default_for(str) == ""
    assert registry.default_for(bytes) == b""
    assert registry.default_for(uuid.UUID) == uuid.UUID(int=0)


def test_optional_keys_default_to_none(registry):
    assert registry.default_for(Optional[int]) is None
    assert registry.default_for(int | None) is None


def test_unknown_type_defaults_to_none(registry):
    class Sku:
        pass

    assert registry.default_for(Sku) is None


def test_subclass_resolves_through_mro(registry):
    """Key subclasses inherit their base type's default."""
    assert registry.default_for(OrderNumber) == ""
    assert registry.default_for(Priority) == 0


def test_parameterized_generic_resolves_origin(registry):
    registry.register(tuple, ())

    assert registry.default_for(tuple[int, int]) == ()


def test_register_custom_default(registry):
    registry.register(OrderNumber, OrderNumber("N/A"))

    assert registry.is_registered(OrderNumber)
    assert registry.default_for(OrderNumber) == "N/A"


def test_register_rejects_mismatched_default(registry):
    with pytest.raises(TypeError, match="is not an instance of key type"):
        registry.register(uuid.UUID, 0)


def test_register_rejects_non_class(registry):
    with pytest.raises(TypeError, match="must be a class"):
        registry.register(Optional[int], None)  # type: ignore[arg-type]


# Resolution on entity classes


def test_entity_default_from_generic_parameter():
    class Product(EntityWithId[str]):
        pass

    assert Product.key_type is str
    assert Product.default_id == ""
    assert Product().id == ""
    assert Product().is_transient
    assert not Product(id="sku-1").is_transient


def test_uuid_keyed_entity(document_cls):
    """CRITICAL: The nil UUID is the transient key for UUID entities."""
    assert document_cls().id == uuid.UUID(int=0)
    assert document_cls(id=uuid.uuid4()).is_transient is False


def test_optional_keyed_entity_is_transient_on_none():
    class Session(EntityWithId[int | None]):
        pass

    assert Session().id is None
    assert Session().is_transient
    assert not Session(id=0).is_transient


def test_explicit_default_id_overrides_registry():
    class LegacyRow(EntityWithId[int]):
        default_id = -1

    assert LegacyRow().id == -1
    assert LegacyRow().is_transient
    assert not LegacyRow(id=0).is_transient
    assert LegacyRow.key_type is int


def test_subclass_inherits_key_type(order_cls, rush_order_cls):
    assert rush_order_cls.key_type is int
    assert rush_order_cls.default_id == order_cls.default_id == 0


def test_generic_intermediate_base():
    """Key type declared further down a generic hierarchy is still resolved."""

    class AuditedEntity[K](EntityWithId[K]):
        pass

    class Ticket(AuditedEntity[uuid.UUID]):
        pass

    assert AuditedEntity.key_type is None
    assert Ticket.key_type is uuid.UUID
    assert Ticket().id == uuid.UUID(int=0)
