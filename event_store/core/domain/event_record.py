from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class EventRecord:
    """
    Immutable (type, timestamp) value.
    Ordering follows field order: type first, then timestamp.
    """
    type: str
    timestamp: int
