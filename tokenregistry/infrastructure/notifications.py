"""Notification Sinks: concrete NotificationSink implementations.

Invariants:
    - LoggingNotificationSink writes one INFO record per event
    - RecordingNotificationSink keeps at most `capacity` events, oldest dropped first
    - FanOutNotificationSink delivers to every sink even if an earlier one raises

Design Decisions:
    - Sinks are plain classes satisfying the core Protocol structurally
    - The registry already guards against a raising sink; FanOut guards per
      sink so one broken observer does not starve the others
"""

import logging
import threading
from collections import deque

from tokenregistry.core.events import RegistryEvent
from tokenregistry.core.registry_protocols import NotificationSink

logger = logging.getLogger(__name__)


class LoggingNotificationSink:
    """Emit events to the application log."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def notify(self, event: RegistryEvent) -> None:
        payload = event.to_dict()
        self._log.info(
            f"{event.kind.value}: {payload}",
            extra={
                "event_kind": event.kind.value,
                "token_id": payload.get("token_id"),
                "owner": payload.get("to"),
            },
        )


class RecordingNotificationSink:
    """Bounded in-memory buffer of recent events, newest last."""

    def __init__(self, capacity: int = 100):
        self._events: deque[RegistryEvent] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def notify(self, event: RegistryEvent) -> None:
        with self._lock:
            self._events.append(event)

    def recent(self, limit: int | None = None) -> list[RegistryEvent]:
        with self._lock:
            events = list(self._events)
        if limit is not None:
            events = events[-limit:] if limit > 0 else []
        return events

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


class FanOutNotificationSink:
    """Deliver each event to several sinks in order."""

    def __init__(self, sinks: list[NotificationSink]):
        self._sinks = list(sinks)

    def notify(self, event: RegistryEvent) -> None:
        for sink in self._sinks:
            try:
                sink.notify(event)
            except Exception as e:
                logger.error(
                    f"Sink {type(sink).__name__} failed: {e}",
                    extra={"event_kind": event.kind.value},
                    exc_info=True,
                )
