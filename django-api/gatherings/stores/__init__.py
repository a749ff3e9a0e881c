from gatherings.stores.interfaces import EventStore
from gatherings.stores.memory_store import InMemoryEventStore

__all__ = [
    "EventStore",
    "InMemoryEventStore",
]
