from gatherings.notifications.interfaces import Message, NotificationDispatcher

__all__ = [
    "Message",
    "NotificationDispatcher",
]
