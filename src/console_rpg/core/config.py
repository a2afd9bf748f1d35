"""Configuration management for the console RPG world core.

Settings are loaded with pydantic-settings from environment variables and
an optional .env file.

Example:
    >>> from console_rpg.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.combat.unarmed_damage
    1

Environment Variables:
    CONSOLE_RPG_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    CONSOLE_RPG_JSON_LOGS: Emit JSON log lines instead of console output
    CONSOLE_RPG_COMBAT_UNARMED_DAMAGE: Damage dealt by an attack without a weapon
    CONSOLE_RPG_COMBAT_CLAMP_HEALTH_AT_ZERO: Stop health from dropping below zero
    CONSOLE_RPG_QUERY_NAME_CASE_SENSITIVE: Compare names exactly instead of casefolded
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from console_rpg.core.exceptions import ConfigurationError


class CombatSettings(BaseSettings):
    """Configuration for combat resolution.

    Attributes:
        unarmed_damage: Health removed by an attack made without a weapon.
        clamp_health_at_zero: If True, damage never drives health below zero.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONSOLE_RPG_COMBAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    unarmed_damage: int = Field(
        default=1,
        ge=0,
        description="Damage dealt by a bare-handed attack",
    )
    clamp_health_at_zero: bool = Field(
        default=False,
        description="Floor health at zero after damage",
    )


class QuerySettings(BaseSettings):
    """Configuration for the attribute query engine.

    Attributes:
        name_case_sensitive: Compare character and item names exactly.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONSOLE_RPG_QUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    name_case_sensitive: bool = Field(
        default=False,
        description="Use case-sensitive name comparison in room filters",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        combat: Combat resolution settings.
        query: Query engine settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONSOLE_RPG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Console RPG",
        description="Application name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines",
    )

    combat: CombatSettings = Field(default_factory=CombatSettings)
    query: QuerySettings = Field(default_factory=QuerySettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "CombatSettings",
    "QuerySettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
