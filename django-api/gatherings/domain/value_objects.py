"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self
from uuid import UUID

# Largest value the ticket columns can hold.
MAX_TICKETS = 2_147_483_647


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Quantity:
    """Number of tickets requested in a single purchase."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Quantity must be an integer")
        if self.value < 1:
            raise ValueError("Quantity must be at least 1")
        if self.value > MAX_TICKETS:
            raise ValueError(f"Quantity cannot exceed {MAX_TICKETS}")


@dataclass(frozen=True)
class TicketInventory:
    """Ticket limit and sold count of an event.

    ``sold`` never exceeds ``limit``; a sale that would break this is
    rejected rather than clamped.
    """

    limit: int
    sold: int = 0

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("Ticket limit must be a positive integer")
        if self.sold < 0:
            raise ValueError("Sold count cannot be negative")
        if self.sold > self.limit:
            raise ValueError("Sold count cannot exceed the ticket limit")

    @property
    def available(self) -> int:
        return self.limit - self.sold

    def can_sell(self, quantity: Quantity) -> bool:
        return self.sold + quantity.value <= self.limit

    def sell(self, quantity: Quantity) -> Self:
        """Return the inventory after selling ``quantity`` tickets."""
        if not self.can_sell(quantity):
            raise ValueError("Not enough tickets available")
        return type(self)(limit=self.limit, sold=self.sold + quantity.value)
