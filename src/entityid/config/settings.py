"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from entityid.config import IdentitySettings, configure

    # Load from environment variables (ENTITYID_*)
    settings = IdentitySettings()

    # Or override with explicit values
    configure(IdentitySettings(proxy_suffix="Lazy"))
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class IdentitySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for entity identity handling.

    Attributes:
        proxy_suffix: Suffix appended to class names of generated proxy types.

    Environment Variables:
        ENTITYID_PROXY_SUFFIX
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTITYID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    proxy_suffix: str = "Proxy"


_settings: IdentitySettings | None = None


def get_settings() -> IdentitySettings:
    """Access the process-wide settings, loading them on first use.

    Returns:
        The active IdentitySettings instance.
    """
    global _settings
    if _settings is None:
        _settings = IdentitySettings()
    return _settings


def configure(settings: IdentitySettings | None) -> None:
    """Replace the process-wide settings.

    Args:
        settings: New settings, or None to reload from the environment on next use.
    """
    global _settings
    _settings = settings
