"""Notification dispatcher interface.

Dispatchers deliver a single message and report failure by raising
NotificationFailedError. They never know which change the message confirms.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    """A plain-text email ready to send."""

    to_address: str
    subject: str
    body: str


class NotificationDispatcher(ABC):
    """Interface for outbound confirmation delivery."""

    @abstractmethod
    def send(self, to_address: str, subject: str, body: str) -> None:
        """Deliver one message.

        Raises:
            NotificationFailedError: If the transport rejected the message.
        """
        ...

    def deliver(self, message: Message) -> None:
        self.send(message.to_address, message.subject, message.body)
