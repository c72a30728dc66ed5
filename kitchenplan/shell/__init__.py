"""
shell/ - Session shell and HTTP surface

Holds the current layout for an editing session, keeps the shareable URL
hash in sync with it, and exposes tokens over a FastAPI router.
"""

from .events import (
    EventType,
    SessionEvent,
    EventHandler,
    EventBus,
)

from .session import (
    EditorMode,
    PlanSession,
)


__all__ = [
    # Events
    "EventType",
    "SessionEvent",
    "EventHandler",
    "EventBus",
    # Session
    "EditorMode",
    "PlanSession",
]
