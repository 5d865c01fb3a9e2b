import pytest

from event_store.core.domain.event_record import EventRecord
from event_store.core.domain.exceptions import InvalidCursorState
from event_store.core.store.in_memory_event_store import InMemoryEventStore
from event_store.core.store.query_cursor import CursorState

# --- Helpers ---


def create_store(*events: EventRecord) -> InMemoryEventStore:
    store = InMemoryEventStore()
    for event in events:
        store.insert(event)
    return store


# --- Tests ---

def test_fresh_cursor_is_unpositioned():
    cursor = create_store(EventRecord("A", 1)).query("A", 0, 10)

    assert cursor.state == CursorState.UNPOSITIONED
    with pytest.raises(InvalidCursorState):
        cursor.current()
    with pytest.raises(InvalidCursorState):
        cursor.remove_current()


def test_cursor_errors_name_the_query():
    cursor = create_store(EventRecord("A", 1)).query("A", 0, 10)

    with pytest.raises(InvalidCursorState, match=r"A \[0, 10\) is unpositioned"):
        cursor.current()
    cursor.advance()
    cursor.remove_current()
    with pytest.raises(InvalidCursorState, match=r"A \[0, 10\) was already removed"):
        cursor.remove_current()


def test_exhausted_cursor_rejects_access():
    store = create_store(EventRecord("A", 1))
    cursor = store.query("A", 0, 10)

    assert cursor.advance() is True
    assert cursor.advance() is False
    assert cursor.state == CursorState.EXHAUSTED
    with pytest.raises(InvalidCursorState):
        cursor.current()
    with pytest.raises(InvalidCursorState):
        cursor.remove_current()
    assert store.size() == 1


def test_advance_after_exhaustion_keeps_returning_false():
    cursor = create_store().query("A", 0, 10)

    assert cursor.advance() is False
    assert cursor.advance() is False
    assert cursor.advance() is False


def test_current_has_no_side_effects():
    store = create_store(EventRecord("A", 1), EventRecord("A", 2))
    cursor = store.query("A", 0, 10)

    cursor.advance()
    first = cursor.current()

    assert cursor.current() == first
    assert store.size() == 2


def test_remove_current_does_not_advance():
    store = create_store(EventRecord("A", 1), EventRecord("A", 2))
    cursor = store.query("A", 0, 10)

    cursor.advance()
    cursor.remove_current()

    assert cursor.current() == EventRecord("A", 1)
    assert cursor.advance() is True
    assert cursor.current() == EventRecord("A", 2)
    assert store.sorted_events() == [EventRecord("A", 2)]


def test_second_remove_at_same_position_fails():
    store = create_store(EventRecord("A", 1), EventRecord("A", 1))
    cursor = store.query("A", 0, 10)

    cursor.advance()
    cursor.remove_current()
    with pytest.raises(InvalidCursorState):
        cursor.remove_current()

    assert store.sorted_events() == [EventRecord("A", 1)]


def test_removing_every_element_while_iterating():
    store = create_store(EventRecord("A", 1), EventRecord("B", 1), EventRecord("A", 2), EventRecord("A", 50))
    cursor = store.query("A", 0, 10)

    while cursor.advance():
        cursor.remove_current()

    assert store.sorted_events() == [EventRecord("A", 50), EventRecord("B", 1)]


def test_remove_current_after_remove_all_is_silent():
    store = create_store(EventRecord("A", 1), EventRecord("B", 1))
    cursor = store.query("A", 0, 10)
    store.remove_all("A")

    assert cursor.advance() is True
    assert cursor.current() == EventRecord("A", 1)
    cursor.remove_current()

    assert store.sorted_events() == [EventRecord("B", 1)]


def test_stale_cursor_leaves_reinserted_equal_event():
    store = create_store(EventRecord("A", 1))
    cursor = store.query("A", 0, 10)
    store.remove_all("A")
    replacement = EventRecord("A", 1)
    store.insert(replacement)

    assert cursor.advance() is True
    cursor.remove_current()

    remaining = store.sorted_events()
    assert remaining == [EventRecord("A", 1)]
    assert remaining[0] is replacement


def test_close_makes_cursor_terminal():
    cursor = create_store(EventRecord("A", 1), EventRecord("A", 2)).query("A", 0, 10)

    cursor.advance()
    cursor.close()
    cursor.close()

    assert cursor.advance() is False
    with pytest.raises(InvalidCursorState):
        cursor.current()


def test_cursor_as_context_manager():
    store = create_store(EventRecord("A", 1))

    with store.query("A", 0, 10) as cursor:
        assert cursor.advance()
        cursor.remove_current()

    assert cursor.state == CursorState.EXHAUSTED
    assert store.size() == 0
