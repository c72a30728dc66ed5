"""
shell/events.py - Session event bus

Lets renderers and URL/hash owners observe layout changes without the
controllers knowing about them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
from datetime import datetime, timezone
from enum import Enum
import uuid
import logging

logger = logging.getLogger("shell.events")


class EventType(Enum):
    """Types of session events."""

    LAYOUT_LOADED = "layout_loaded"
    LAYOUT_CHANGED = "layout_changed"
    TOKEN_UPDATED = "token_updated"
    DECODE_FAILED = "decode_failed"
    MODE_CHANGED = "mode_changed"


@dataclass
class SessionEvent:
    """A session event with payload."""

    event_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    event_type: EventType = EventType.LAYOUT_CHANGED
    source: str = ""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    payload: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_id": self.event_id,
            "type": self.event_type.value,
            "source": self.source,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "payload": self.payload,
        }


# Type alias for event handlers
EventHandler = Callable[[SessionEvent], None]


class EventBus:
    """
    Event bus owned by a single session.

    Supports:
    - Event subscription by type
    - Wildcard subscriptions (receive all events)
    - Bounded event history for debugging
    """

    def __init__(self, max_history: int = 100):
        self._handlers: Dict[EventType, List[EventHandler]] = {}
        self._wildcard_handlers: List[EventHandler] = []
        self._history: List[SessionEvent] = []
        self._max_history = max_history

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: Type of events to receive
            handler: Callback function(event) -> None
        """
        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)
            logger.debug(f"Subscribed handler to {event_type.value}")

    def subscribe_all(self, handler: EventHandler) -> None:
        """Subscribe to all events."""
        if handler not in self._wildcard_handlers:
            self._wildcard_handlers.append(handler)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> bool:
        """
        Unsubscribe from events of a specific type.

        Returns:
            True if handler was removed
        """
        try:
            self._handlers.get(event_type, []).remove(handler)
            return True
        except ValueError:
            return False

    def emit(self, event: SessionEvent) -> None:
        """Emit an event to all subscribers. Handler failures are logged."""
        self._history.append(event)
        if len(self._history) > self._max_history:
            self._history = self._history[-self._max_history:]

        logger.debug(f"Emitting event: {event.event_type.value} from {event.source}")

        for handler in list(self._handlers.get(event.event_type, [])):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Event handler failed: {e}")

        for handler in list(self._wildcard_handlers):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Wildcard handler failed: {e}")

    def emit_simple(self, event_type: EventType, source: str = "", **payload) -> SessionEvent:
        """Emit an event built from keyword payload."""
        event = SessionEvent(event_type=event_type, source=source, payload=payload)
        self.emit(event)
        return event

    def get_history(self, limit: int = 20, event_type: Optional[EventType] = None) -> List[SessionEvent]:
        """Recent events, optionally filtered by type."""
        history = self._history
        if event_type:
            history = [e for e in history if e.event_type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        self._history.clear()

    @property
    def handler_count(self) -> int:
        count = sum(len(handlers) for handlers in self._handlers.values())
        return count + len(self._wildcard_handlers)
