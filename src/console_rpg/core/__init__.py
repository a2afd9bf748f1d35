"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        ConsoleRpgError: Base exception for all application errors.
        NotFoundError: Referenced entity does not exist.
        InvalidOperationError: Request rejected without mutation.
        ConfigurationError: Configuration-related errors.
        ValidationError: Caller data validation errors.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from console_rpg.core.config import (
    CombatSettings,
    QuerySettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from console_rpg.core.exceptions import (
    ConfigurationError,
    ConsoleRpgError,
    InvalidOperationError,
    NotFoundError,
    ValidationError,
)
from console_rpg.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "ConsoleRpgError",
    "NotFoundError",
    "InvalidOperationError",
    "ConfigurationError",
    "ValidationError",
    # Configuration
    "Settings",
    "CombatSettings",
    "QuerySettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
