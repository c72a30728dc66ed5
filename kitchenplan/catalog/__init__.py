"""
catalog - Item and wall variant registry.

Provides:
- Item kinds with display metadata and stable codec identifiers
- Placements (item kind + orientation) held by room cells
- Wall types held by segment cells and derived corner shapes
"""

from kitchenplan.catalog.items import (
    Orientation,
    ItemKind,
    ItemInfo,
    ITEM_CATALOG,
    Placement,
    EMPTY,
    IMAGE_ROOT,
    FALLBACK_IMAGE,
    item_by_code,
    item_by_slug,
    placeable_items,
)
from kitchenplan.catalog.walls import (
    WallType,
    CornerShape,
    CORNER_SHAPES,
    corner_shape_for,
)

__all__ = [
    # Items
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
    # Walls
    'WallType',
    'CornerShape',
    'CORNER_SHAPES',
    'corner_shape_for',
]
