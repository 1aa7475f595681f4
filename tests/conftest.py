"""Shared test fixtures."""

import sys
import uuid

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from entityid import EntityWithId, configure


class FixtureOrder(EntityWithId[int]):
    def __init__(self, customer: str = "ada", id: int | None = None) -> None:
        super().__init__(id)
        self.customer = customer


class FixtureRushOrder(FixtureOrder):
    pass


class FixtureInvoice(EntityWithId[int]):
    pass


class FixtureDocument(EntityWithId[uuid.UUID]):
    pass


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop any settings a test configured."""
    yield
    configure(None)


@pytest.fixture
def order_cls():
    return FixtureOrder


@pytest.fixture
def rush_order_cls():
    return FixtureRushOrder


@pytest.fixture
def invoice_cls():
    return FixtureInvoice


@pytest.fixture
def document_cls():
    return FixtureDocument
