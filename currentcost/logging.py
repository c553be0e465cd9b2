import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, debug: bool = False) -> logging.Logger:
    """Logger that keeps its last ``ring_size`` decoder events in memory."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if any(isinstance(handler, RingBufferHandler) for handler in logger.handlers):
        return logger
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


class MessageLogAdapter(logging.LoggerAdapter):
    """Merges the decoded message's context (device type, ...) into each event's ``details``."""

    def process(self, msg, kwargs):
        extra = dict(kwargs.get("extra") or {})
        extra["details"] = {**self.extra, **extra.get("details", {})}
        kwargs["extra"] = extra
        return msg, kwargs
