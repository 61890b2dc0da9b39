"""Rolling in-memory copy of recent log records, served by ``/api/logs``."""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Deque, List, Optional


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    level: str
    levelno: int
    logger: str
    message: str
    exception: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data.pop("levelno")
        return data


class LogBufferHandler(logging.Handler):
    def __init__(self, capacity: int = 500) -> None:
        super().__init__()
        self.capacity = capacity
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._lock = Lock()

    def emit(self, record: logging.LogRecord) -> None:  # pragma: no cover - thin wrapper
        formatter = self.formatter or logging.Formatter("%(message)s")
        try:
            message = formatter.format(record)
        except Exception:  # pragma: no cover
            message = record.getMessage()
        exception = formatter.formatException(record.exc_info) if record.exc_info else None
        entry = LogEntry(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            level=record.levelname,
            levelno=record.levelno,
            logger=record.name,
            message=message,
            exception=exception,
        )
        with self._lock:
            self._entries.append(entry)

    def get_entries(self, limit: int, min_level: int = logging.NOTSET) -> List[dict[str, Any]]:
        """Newest ``limit`` entries at or above ``min_level``, oldest first."""
        with self._lock:
            entries = [entry for entry in self._entries if entry.levelno >= min_level]
        if limit > 0:
            entries = entries[-limit:]
        return [entry.to_dict() for entry in entries]

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


_log_buffer_handler: LogBufferHandler | None = None


def get_log_buffer_handler(capacity: int = 500) -> LogBufferHandler:
    """Return the process-wide buffer handler."""
    global _log_buffer_handler
    if _log_buffer_handler is None:
        _log_buffer_handler = LogBufferHandler(capacity=capacity)
    return _log_buffer_handler
