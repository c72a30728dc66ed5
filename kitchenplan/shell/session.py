"""
shell/session.py - Headless editing session v1.0

Owns the current layout and the URL hash that mirrors it. Controllers
publish replacement layouts through the session; after every publish the
token is re-encoded and the hash updated if it changed.
"""

from __future__ import annotations
from typing import Any, Dict, Optional
from enum import Enum
import logging

from kitchenplan.bootstrap.config import KitchenPlanConfig, get_config
from kitchenplan.codec.token import decode_or_default, encode_layout
from kitchenplan.controller.drawing import DrawingController, DRAWING_HELP
from kitchenplan.controller.placement import PlacementController
from kitchenplan.errors.aggregator import ErrorAggregator
from kitchenplan.layout.grid import Layout
from kitchenplan.shell.events import EventBus, EventType

__all__ = [
    'EditorMode',
    'PlanSession',
]

logger = logging.getLogger("shell.session")


class EditorMode(Enum):
    """Which grid receives input."""

    DRAW = "draw"
    PLAN = "plan"


class PlanSession:
    """
    One user's editing session.

    Attributes:
        config: Active configuration
        events: Session event bus
        errors: Decode errors recorded while loading
        placement: Plan grid controller
        drawing: Draw grid controller
        mode: Active editor mode
        url_hash: Current '#<token>' fragment
    """

    def __init__(
        self,
        config: Optional[KitchenPlanConfig] = None,
        events: Optional[EventBus] = None,
    ):
        self.config = config or get_config()
        self.events = events or EventBus()
        self.errors = ErrorAggregator()

        self._layout = Layout.empty(
            self.config.grid.default_width,
            self.config.grid.default_height,
        )
        self.url_hash = ""
        self.mode = EditorMode.DRAW

        self.placement = PlacementController(lambda: self._layout, self.publish)
        self.drawing = DrawingController(lambda: self._layout, self.publish)

        self._sync_token()

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def token(self) -> str:
        return self.url_hash[1:]

    @property
    def help_text(self) -> str:
        if self.mode is EditorMode.DRAW:
            return DRAWING_HELP
        return self.placement.cursor_text()

    # -------------------------------------------------------------------------
    # Loading and publishing
    # -------------------------------------------------------------------------

    def load(self, fragment: Optional[str]) -> Layout:
        """
        Load the layout named by a URL fragment.

        A missing or corrupt fragment yields an empty layout of the default
        size; the decode error is recorded, never raised.
        """
        layout, error = decode_or_default(
            fragment,
            self.config.grid.default_width,
            self.config.grid.default_height,
        )
        if error is not None:
            self.errors.add(error)
            self.events.emit_simple(
                EventType.DECODE_FAILED,
                source="shell.session",
                error=error.to_dict(),
            )

        self._reset_controllers()
        self._layout = layout
        self._sync_token()
        self.events.emit_simple(
            EventType.LAYOUT_LOADED,
            source="shell.session",
            width=layout.width,
            height=layout.height,
            item_count=layout.item_count,
        )
        logger.info(f"Loaded {layout.width}x{layout.height} layout with {layout.item_count} item(s)")
        return layout

    def publish(self, layout: Layout) -> None:
        """Replace the current layout wholesale and refresh the URL hash."""
        previous = self._layout
        self._layout = layout
        self.events.emit_simple(
            EventType.LAYOUT_CHANGED,
            source="shell.session",
            previous=previous,
            layout=layout,
        )
        self._sync_token()

    def _sync_token(self) -> None:
        new_hash = "#" + encode_layout(self._layout)
        if new_hash != self.url_hash:
            self.url_hash = new_hash
            self.events.emit_simple(
                EventType.TOKEN_UPDATED,
                source="shell.session",
                token=new_hash[1:],
            )

    def share_link(self, base_url: Optional[str] = None) -> str:
        """Link that reopens the current layout."""
        base = base_url if base_url is not None else self.config.api.share_base_url
        return base.split("#", 1)[0] + self.url_hash

    def resize(self, width: int, height: int) -> Layout:
        """Start over with an empty layout of a new size."""
        limit = self.config.grid.max_dimension
        if not (1 <= width <= limit and 1 <= height <= limit):
            raise ValueError(f"Layout size must be within 1..{limit} rooms per side")
        self._reset_controllers()
        self.publish(Layout.empty(width, height))
        return self._layout

    # -------------------------------------------------------------------------
    # Modes
    # -------------------------------------------------------------------------

    def set_mode(self, mode: EditorMode) -> None:
        """Switch grids. In-flight gestures are abandoned."""
        if mode is self.mode:
            return
        self._reset_controllers()
        previous, self.mode = self.mode, mode
        self.events.emit_simple(
            EventType.MODE_CHANGED,
            source="shell.session",
            previous=previous.value,
            mode=mode.value,
        )

    def _reset_controllers(self) -> None:
        self.placement.reset()
        self.drawing.reset()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "token": self.token,
            "layout": self._layout.to_dict(),
            "errors": len(self.errors),
        }
