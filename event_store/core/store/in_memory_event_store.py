import logging
from threading import Lock
from typing import List, Optional

from event_store.config.settings import Settings
from event_store.core.domain.event_query import EventQuery
from event_store.core.domain.event_record import EventRecord
from event_store.core.interfaces.event_iterator import EventIterator
from event_store.core.interfaces.event_store import EventStore
from event_store.core.logging.structured_store_logger import StructuredStoreLogger
from event_store.core.store.query_cursor import QueryCursor


class InMemoryEventStore(EventStore):
    """
    Single list of events behind one store-wide lock.

    Every read and write of the list happens under the lock: insert, both
    phases of remove_all, the filter in query, discard, and the in-place
    sort used by dump/sorted_events. Cursors iterate over their own snapshot,
    so the list is never mutated while something walks it unlocked.
    Storage order carries no meaning; dump() may reorder it.
    """

    def __init__(self, structured_logger: Optional[StructuredStoreLogger] = None):
        self._events: List[EventRecord] = []
        self._lock = Lock()
        self._log = structured_logger or StructuredStoreLogger()

    @classmethod
    def from_settings(cls, settings: Settings) -> "InMemoryEventStore":
        return cls(StructuredStoreLogger.from_settings(settings))

    def insert(self, event: EventRecord) -> None:
        with self._lock:
            self._events.append(event)
        self._log.emit("event_inserted", level=logging.DEBUG, type=event.type, event_time=event.timestamp)

    def remove_all(self, event_type: str) -> int:
        with self._lock:
            # Scan first, then delete exactly what the scan found.
            doomed = [index for index, event in enumerate(self._events) if event.type == event_type]
            for index in reversed(doomed):
                del self._events[index]
        if doomed:
            self._log.emit("events_removed", type=event_type, removed=len(doomed))
        return len(doomed)

    def query(self, event_type: str, start_time: int, end_time: int) -> EventIterator:
        query = EventQuery(type=event_type, start_time=start_time, end_time=end_time)
        if query.is_empty:
            return QueryCursor(self, query, [])
        with self._lock:
            snapshot = [event for event in self._events if query.matches(event)]
        return QueryCursor(self, query, snapshot)

    def discard(self, event: EventRecord) -> bool:
        with self._lock:
            index = self._index_of(event)
            if index is not None:
                del self._events[index]
        found = index is not None
        self._log.emit("event_discarded", type=event.type, event_time=event.timestamp, found=found)
        return found

    def sorted_events(self) -> List[EventRecord]:
        with self._lock:
            self._events.sort()
            return list(self._events)

    def dump(self) -> str:
        return "".join(f"{event.type}, {event.timestamp}\n" for event in self.sorted_events())

    def __str__(self) -> str:
        return self.dump()

    def size(self) -> int:
        with self._lock:
            return len(self._events)

    def _index_of(self, event: EventRecord) -> Optional[int]:
        # Identity only: an equal record inserted later is a different entry.
        for index, candidate in enumerate(self._events):
            if candidate is event:
                return index
        return None
