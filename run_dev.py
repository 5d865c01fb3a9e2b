from concurrent.futures import ThreadPoolExecutor

from event_store.config.settings import settings
from event_store.core.domain.event_record import EventRecord
from event_store.core.logging.structured_store_logger import configure_logging
from event_store.core.store.in_memory_event_store import InMemoryEventStore


def main():
    print("Initializing DEV event store...")
    configure_logging(settings)
    store = InMemoryEventStore.from_settings(settings)

    # 1. Concurrent writers
    def write(worker: int):
        for i in range(5):
            store.insert(EventRecord(f"sensor_{worker % 2}", worker * 100 + i))

    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(write, range(4)))
    print(f"Inserted {store.size()} events")

    # 2. Range query with removal
    with store.query("sensor_0", 0, 150) as cursor:
        while cursor.advance():
            event = cursor.current()
            if event.timestamp % 2 == 0:
                cursor.remove_current()

    # 3. Bulk removal
    removed = store.remove_all("sensor_1")
    print(f"Removed {removed} sensor_1 events")

    print("Final store:")
    print(store.dump(), end="")


if __name__ == "__main__":
    main()
