"""
catalog/items.py - Kitchen item catalog v1.0

Fixed registry of placeable appliances and furniture. Room cells of a
layout hold a Placement: an item kind plus the orientation it was placed in.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Any
from enum import Enum
import logging

from kitchenplan.errors.taxonomy import (
    ErrorCode,
    UnknownSymbolError,
    create_codec_error,
)

__all__ = [
    'Orientation',
    'ItemKind',
    'ItemInfo',
    'ITEM_CATALOG',
    'Placement',
    'EMPTY',
    'IMAGE_ROOT',
    'FALLBACK_IMAGE',
    'item_by_code',
    'item_by_slug',
    'placeable_items',
]

logger = logging.getLogger(__name__)

IMAGE_ROOT = "/images/display"
FALLBACK_IMAGE = f"{IMAGE_ROOT}/404.png"


# =============================================================================
# ORIENTATION
# =============================================================================

class Orientation(Enum):
    """Clockwise rotation of a placed item, in degrees."""

    UP = 0
    RIGHT = 90
    DOWN = 180
    LEFT = 270

    @property
    def index(self) -> int:
        """Quarter turns from UP (0-3)."""
        return self.value // 90

    @classmethod
    def from_index(cls, index: int) -> "Orientation":
        return cls((index % 4) * 90)

    def rotate_right(self) -> "Orientation":
        return Orientation.from_index(self.index + 1)

    def rotate_left(self) -> "Orientation":
        return Orientation.from_index(self.index - 1)

    @property
    def transform(self) -> str:
        """CSS transform for this orientation."""
        return f"rotate({self.value}deg)"


# =============================================================================
# ITEM KINDS
# =============================================================================

class ItemKind(Enum):
    """Kinds of room cell content."""

    EMPTY = "empty"

    # Cold storage
    FRIDGE = "fridge"
    FREEZER = "freezer"

    # Cooking
    OVEN = "oven"
    STOVE = "stove"
    COOKTOP = "cooktop"
    RANGE_HOOD = "range_hood"
    MICROWAVE = "microwave"

    # Cleaning
    SINK = "sink"
    DISHWASHER = "dishwasher"

    # Work surfaces and storage
    COUNTER = "counter"
    CORNER_COUNTER = "corner_counter"
    CABINET = "cabinet"
    PANTRY = "pantry"

    # Seating
    ISLAND = "island"
    TABLE = "table"


@dataclass(frozen=True)
class ItemInfo:
    """
    Display metadata for an item kind.

    Attributes:
        kind: Item kind
        code: Stable numeric identifier used by the token codec (EMPTY is 0)
        label: Accessible label / alt text
        image: Display image path
    """

    kind: ItemKind
    code: int
    label: str
    image: str


def _info(kind: ItemKind, code: int, label: str, image: str = "") -> ItemInfo:
    return ItemInfo(kind, code, label, image or f"{IMAGE_ROOT}/{kind.value}.png")


# Codes are part of the shareable token format. Never renumber; append only.
ITEM_CATALOG: Dict[ItemKind, ItemInfo] = {
    ItemKind.EMPTY: _info(ItemKind.EMPTY, 0, "Empty", f"{IMAGE_ROOT}/floor.png"),
    ItemKind.FRIDGE: _info(ItemKind.FRIDGE, 1, "Fridge"),
    ItemKind.FREEZER: _info(ItemKind.FREEZER, 2, "Freezer"),
    ItemKind.OVEN: _info(ItemKind.OVEN, 3, "Oven"),
    ItemKind.STOVE: _info(ItemKind.STOVE, 4, "Stove"),
    ItemKind.COOKTOP: _info(ItemKind.COOKTOP, 5, "Cooktop"),
    ItemKind.RANGE_HOOD: _info(ItemKind.RANGE_HOOD, 6, "Range hood"),
    ItemKind.MICROWAVE: _info(ItemKind.MICROWAVE, 7, "Microwave"),
    ItemKind.SINK: _info(ItemKind.SINK, 8, "Sink"),
    ItemKind.DISHWASHER: _info(ItemKind.DISHWASHER, 9, "Dishwasher"),
    ItemKind.COUNTER: _info(ItemKind.COUNTER, 10, "Counter"),
    ItemKind.CORNER_COUNTER: _info(ItemKind.CORNER_COUNTER, 11, "Corner counter"),
    ItemKind.CABINET: _info(ItemKind.CABINET, 12, "Cabinet"),
    ItemKind.PANTRY: _info(ItemKind.PANTRY, 13, "Pantry"),
    ItemKind.ISLAND: _info(ItemKind.ISLAND, 14, "Island"),
    ItemKind.TABLE: _info(ItemKind.TABLE, 15, "Table"),
}

_BY_CODE: Dict[int, ItemKind] = {info.code: kind for kind, info in ITEM_CATALOG.items()}


# =============================================================================
# PLACEMENT
# =============================================================================

@dataclass(frozen=True)
class Placement:
    """
    Content of a room cell: an item kind and its orientation.

    Rotation belongs to the placement, not the kind. The empty placement
    never rotates, so EMPTY is the single empty value.
    """

    kind: ItemKind = ItemKind.EMPTY
    orientation: Orientation = Orientation.UP

    def __post_init__(self):
        if self.kind is ItemKind.EMPTY and self.orientation is not Orientation.UP:
            object.__setattr__(self, "orientation", Orientation.UP)

    @property
    def is_empty(self) -> bool:
        return self.kind is ItemKind.EMPTY

    @property
    def info(self) -> ItemInfo:
        return ITEM_CATALOG[self.kind]

    @property
    def code(self) -> int:
        return self.info.code

    @property
    def label(self) -> str:
        return self.info.label

    @property
    def image(self) -> str:
        return self.info.image

    @property
    def transform(self) -> str:
        return self.orientation.transform

    def rotate_right(self) -> "Placement":
        if self.is_empty:
            return self
        return Placement(self.kind, self.orientation.rotate_right())

    def rotate_left(self) -> "Placement":
        if self.is_empty:
            return self
        return Placement(self.kind, self.orientation.rotate_left())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "orientation": self.orientation.value,
            "label": self.label,
            "image": self.image,
            "transform": self.transform,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Placement":
        return cls(
            kind=ItemKind(data.get("kind", "empty")),
            orientation=Orientation(data.get("orientation", 0)),
        )

    def __str__(self) -> str:
        if self.is_empty:
            return self.label
        return f"{self.label} @ {self.orientation.value}°"


EMPTY = Placement()


def item_by_code(code: int) -> ItemKind:
    """Resolve a stable item code. Unknown codes raise UnknownSymbolError."""
    kind = _BY_CODE.get(code)
    if kind is None:
        raise UnknownSymbolError(create_codec_error(
            ErrorCode.COD_UNKNOWN_SYMBOL,
            f"Unknown item code: {code}",
            actual=code,
            expected=sorted(_BY_CODE),
            source="catalog.items",
        ))
    return kind


def item_by_slug(slug: str) -> ItemKind:
    """Resolve an item kind from its slug ('fridge') or enum name ('FRIDGE')."""
    normalized = slug.strip().lower().replace("-", "_").replace(" ", "_")
    try:
        return ItemKind(normalized)
    except ValueError:
        raise KeyError(f"Unknown item: {slug}") from None


def placeable_items() -> List[ItemInfo]:
    """All non-empty catalog entries, ordered by code."""
    return sorted(
        (info for kind, info in ITEM_CATALOG.items() if kind is not ItemKind.EMPTY),
        key=lambda info: info.code,
    )
