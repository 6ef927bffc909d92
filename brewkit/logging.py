import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

LOGGER_NAME = "brewkit"


class RingBufferHandler(logging.Handler):
    """Keeps the most recent brewing records as plain dicts."""

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": dict(getattr(record, "details", {}) or {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, level: int | str = logging.INFO) -> logging.Logger:
    """
    Return the named logger with a ring buffer attached.

    Records still propagate, so handlers configured by the application
    (``logging.basicConfig`` and the like) see every notification. The level
    is applied on every call, including for a logger created earlier.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if ring_buffer(logger) is None:
        logger.addHandler(RingBufferHandler(max_entries=ring_size))
    return logger


def get_logger() -> logging.Logger:
    from brewkit.config import get_settings

    settings = get_settings()
    return create_logger(LOGGER_NAME, settings.log_ring_size, settings.log_level)


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None
