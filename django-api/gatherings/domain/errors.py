"""Domain error codes for the gatherings module."""

from dataclasses import dataclass, field
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    ORGANIZER_NOT_FOUND = "ORGANIZER_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_INPUT = "INVALID_INPUT"
    INSUFFICIENT_INVENTORY = "INSUFFICIENT_INVENTORY"
    ALREADY_RSVPED = "ALREADY_RSVPED"
    PERSISTENCE_CONFLICT = "PERSISTENCE_CONFLICT"
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class OrganizerNotFoundError(DomainError):
    """Raised when an organizer lookup matches no user."""

    def __init__(self, user_id: int) -> None:
        super().__init__(
            code=ErrorCode.ORGANIZER_NOT_FOUND,
            message="Organizer not found",
        )
        self.user_id = user_id


@dataclass(eq=False)
class InvalidInputError(DomainError):
    """Raised when required fields are missing or malformed."""

    code: ErrorCode = ErrorCode.INVALID_INPUT
    message: str = "Invalid input"
    details: dict = field(default_factory=dict)


class InvalidEventIdError(InvalidInputError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class PersistenceConflictError(DomainError):
    """Raised when a conditional write matched no stored record."""

    def __init__(
        self,
        event_id: str,
        code: ErrorCode = ErrorCode.PERSISTENCE_CONFLICT,
        message: str = "Conflicting update",
    ) -> None:
        super().__init__(code=code, message=message)
        self.event_id = event_id


class InsufficientInventoryError(PersistenceConflictError):
    """Raised when a purchase would sell more tickets than remain."""

    def __init__(self, event_id: str, requested: int, available: int) -> None:
        super().__init__(
            event_id,
            code=ErrorCode.INSUFFICIENT_INVENTORY,
            message="Not enough tickets available",
        )
        self.requested = requested
        self.available = available


class AlreadyRsvpedError(PersistenceConflictError):
    """Raised when a user RSVPs to an event they already attend."""

    def __init__(self, event_id: str, user_id: int) -> None:
        super().__init__(
            event_id,
            code=ErrorCode.ALREADY_RSVPED,
            message="Already RSVPed",
        )
        self.user_id = user_id


class NotificationFailedError(DomainError):
    """Raised by dispatchers when a confirmation could not be delivered.

    Never reaches API clients: the committed change it belongs to stands.
    """

    def __init__(self, to_address: str, reason: str = "") -> None:
        super().__init__(
            code=ErrorCode.NOTIFICATION_FAILED,
            message="Confirmation email could not be sent",
        )
        self.to_address = to_address
        self.reason = reason
