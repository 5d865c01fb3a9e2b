from abc import ABC, abstractmethod

from event_store.core.domain.event_record import EventRecord


class EventIterator(ABC):
    """
    Single-pass, removable view over the result of a query.
    Callers must check advance() before reading or removing the current element.
    """

    @abstractmethod
    def advance(self) -> bool:
        """
        Move to the next element. Returns False once the results are exhausted.
        """
        pass

    @abstractmethod
    def current(self) -> EventRecord:
        """
        Element the iterator is positioned on.
        Raises InvalidCursorState if advance() was never called or last returned False.
        """
        pass

    @abstractmethod
    def remove_current(self) -> None:
        """
        Remove the positioned element from the store the query was issued on.
        Raises InvalidCursorState under the same conditions as current().
        """
        pass

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> "EventIterator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
