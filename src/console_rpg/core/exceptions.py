"""Custom exception hierarchy for the console RPG world core.

All exceptions inherit from ConsoleRpgError, so a presentation layer can
catch one type at its boundary and still read the typed outcome. Every
operation that raises leaves the entity graph unchanged.

Example:
    >>> from console_rpg.core.exceptions import NotFoundError
    >>> raise NotFoundError("Room not found", entity_type="room", entity_id="42")
"""

from __future__ import annotations

from typing import Any, ClassVar


class ConsoleRpgError(Exception):
    """Base exception for all console RPG errors.

    Each subclass names the outcome a presentation layer reports to the
    player ("not_found", "invalid_operation", ...).

    Attributes:
        outcome: Short outcome code for this error type.
        message: Text shown to the player.
        details: Context about the entities involved.
    """

    outcome: ClassVar[str] = "error"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{context}]"

    def to_outcome(self) -> dict[str, Any]:
        """Flatten the error into the record a console layer renders.

        Returns:
            ``outcome`` and ``message`` keys plus every detail entry.
        """
        return {"outcome": self.outcome, "message": self.message, **self.details}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.outcome}: {self.message!r}, details={self.details!r})"


# =============================================================================
# World Domain Exceptions
# =============================================================================


class NotFoundError(ConsoleRpgError):
    """Raised when a referenced character, room, ability or item does not exist."""

    outcome: ClassVar[str] = "not_found"

    def __init__(
        self,
        message: str,
        *,
        entity_type: str | None = None,
        entity_id: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize not-found error with entity context.

        Args:
            message: Human-readable error description.
            entity_type: Kind of entity that was looked up (e.g. 'room').
            entity_id: Identifier or name that failed to resolve.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if entity_type:
            combined_details["entity_type"] = entity_type
        if entity_id is not None:
            combined_details["entity_id"] = str(entity_id)
        super().__init__(message, details=combined_details)


class InvalidOperationError(ConsoleRpgError):
    """Raised when a request is well-formed but not allowed.

    Using an ability the character does not hold, filtering by an
    unrecognised criterion, or driving experience below zero all land here.
    """

    outcome: ClassVar[str] = "invalid_operation"

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        character_id: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid operation error with operation context.

        Args:
            message: Human-readable error description.
            operation: Name of the rejected operation.
            character_id: Character that attempted the operation, if any.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if operation:
            combined_details["operation"] = operation
        if character_id is not None:
            combined_details["character_id"] = str(character_id)
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(ConsoleRpgError):
    """Raised when application configuration is invalid."""

    outcome: ClassVar[str] = "configuration"

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(ConsoleRpgError):
    """Raised when caller-supplied data fails validation.

    This covers malformed filter values and items placed in the wrong
    equipment slot.
    """

    outcome: ClassVar[str] = "validation"

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    "ConsoleRpgError",
    "NotFoundError",
    "InvalidOperationError",
    "ConfigurationError",
    "ValidationError",
]
