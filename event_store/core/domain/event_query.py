from dataclasses import dataclass

from event_store.core.domain.event_record import EventRecord


@dataclass(frozen=True)
class EventQuery:
    """
    Range predicate over a single event type.
    start_time is inclusive, end_time is exclusive.
    """
    type: str
    start_time: int
    end_time: int

    @property
    def is_empty(self) -> bool:
        return self.start_time >= self.end_time

    def matches(self, event: EventRecord) -> bool:
        return event.type == self.type and self.start_time <= event.timestamp < self.end_time
