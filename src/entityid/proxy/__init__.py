"""Proxy types standing in for entities materialized by a persistence layer."""

from entityid.proxy.factory import ProxyFactory, get_proxy_factory, is_proxy_type

__all__ = [
    "ProxyFactory",
    "get_proxy_factory",
    "is_proxy_type",
]
