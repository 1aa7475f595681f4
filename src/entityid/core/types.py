"""Core type definitions for entityid."""

from collections.abc import Hashable

type Key = Hashable
"""Bound for entity key types.

A key must support equality and hashing, and have a canonical default value
registered in the key-default registry (see `entityid.core.entity.keys`).
"""

TRANSIENT_HASH = 0
"""Hash shared by every transient entity, whatever its type."""
