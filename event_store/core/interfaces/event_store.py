from abc import ABC, abstractmethod
from typing import List

from event_store.core.domain.event_record import EventRecord
from event_store.core.interfaces.event_iterator import EventIterator


class EventStore(ABC):
    """
    Thread-safe store of typed, timestamped events.
    Duplicates are kept as separate entries.
    """

    @abstractmethod
    def insert(self, event: EventRecord) -> None:
        pass

    @abstractmethod
    def remove_all(self, event_type: str) -> int:
        """
        Remove every event of the given type. Returns how many were removed.
        """
        pass

    @abstractmethod
    def query(self, event_type: str, start_time: int, end_time: int) -> EventIterator:
        """
        Events of event_type with start_time <= timestamp < end_time.
        An empty or inverted range yields an iterator with no elements.
        """
        pass

    @abstractmethod
    def discard(self, event: EventRecord) -> bool:
        """
        Remove this exact stored instance. Returns False if it is no longer stored,
        even when an equal record is.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def sorted_events(self) -> List[EventRecord]:
        pass

    @abstractmethod
    def dump(self) -> str:
        pass
