from enum import Enum
from typing import Iterator, List, Optional

from event_store.core.domain.event_query import EventQuery
from event_store.core.domain.event_record import EventRecord
from event_store.core.domain.exceptions import InvalidCursorState
from event_store.core.interfaces.event_iterator import EventIterator
from event_store.core.interfaces.event_store import EventStore


class CursorState(Enum):
    UNPOSITIONED = "unpositioned"
    POSITIONED = "positioned"
    EXHAUSTED = "exhausted"


class QueryCursor(EventIterator):
    """
    Cursor over a snapshot taken when the query ran.
    advance/current read only the snapshot and take no lock; remove_current
    goes back through the store, which serializes the deletion.
    """

    def __init__(self, store: EventStore, query: EventQuery, snapshot: List[EventRecord]):
        self.store = store
        self.query = query
        self._pending: Optional[Iterator[EventRecord]] = iter(snapshot)
        self._current: Optional[EventRecord] = None
        self._removed = False
        self.state = CursorState.UNPOSITIONED

    def advance(self) -> bool:
        if self._pending is not None:
            event = next(self._pending, None)
            if event is not None:
                self._current = event
                self._removed = False
                self.state = CursorState.POSITIONED
                return True
        self._current = None
        self._pending = None
        self.state = CursorState.EXHAUSTED
        return False

    def current(self) -> EventRecord:
        self._require_positioned()
        return self._current

    def remove_current(self) -> None:
        self._require_positioned()
        if self._removed:
            raise InvalidCursorState(f"current event of {self._label()} was already removed; call advance() first")
        self._removed = True
        # Not found means a concurrent remove_all got there first.
        self.store.discard(self._current)

    def close(self) -> None:
        self._pending = None
        self._current = None
        self.state = CursorState.EXHAUSTED

    def _require_positioned(self) -> None:
        if self.state != CursorState.POSITIONED:
            raise InvalidCursorState(
                f"cursor over {self._label()} is {self.state.value}; advance() must return True first"
            )

    def _label(self) -> str:
        return f"{self.query.type} [{self.query.start_time}, {self.query.end_time})"
