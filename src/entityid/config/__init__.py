"""Configuration module using Pydantic Settings.

Usage:
    from entityid.config import IdentitySettings, get_settings

    settings = get_settings()
    settings.proxy_suffix  # "Proxy"
"""

from entityid.config.settings import (
    IdentitySettings,
    configure,
    get_settings,
)

__all__ = [
    "IdentitySettings",
    "configure",
    "get_settings",
]
