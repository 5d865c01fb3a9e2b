import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from event_store.config.settings import Settings


class StructuredStoreLogger:
    """
    JSON-lines logger for store mutations.
    Never called while the store lock is held.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, enabled: bool = True):
        self._logger = logger or logging.getLogger("event_store")
        self.enabled = enabled

    @classmethod
    def from_settings(cls, settings: Settings) -> "StructuredStoreLogger":
        return cls(logging.getLogger(settings.LOGGER_NAME), enabled=settings.LOG_MUTATIONS)

    def emit(self, event_type: str, level: int = logging.INFO, **fields: Any) -> None:
        if not self.enabled or not self._logger.isEnabledFor(level):
            return
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
        }
        payload.update(fields)
        self._logger.log(level, json.dumps(payload, default=str, ensure_ascii=True))


def configure_logging(settings: Settings) -> logging.Logger:
    logger = logging.getLogger(settings.LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        logger.addHandler(handler)
    return logger
