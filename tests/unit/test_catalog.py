"""
tests/unit/test_catalog.py - Tests for the item catalog and wall variants

Tests for:
- catalog/items.py - Orientation, ItemKind, Placement
- catalog/walls.py - WallType cycling, corner shape lookup
"""

import pytest


# =============================================================================
# ORIENTATION TESTS
# =============================================================================

class TestOrientation:
    """Test Orientation rotation arithmetic."""

    def test_rotate_right_sequence(self):
        from kitchenplan.catalog.items import Orientation
        o = Orientation.UP
        seen = []
        for _ in range(4):
            o = o.rotate_right()
            seen.append(o)
        assert seen == [Orientation.RIGHT, Orientation.DOWN, Orientation.LEFT, Orientation.UP]

    def test_rotate_left_wraps(self):
        from kitchenplan.catalog.items import Orientation
        assert Orientation.UP.rotate_left() == Orientation.LEFT

    def test_index(self):
        from kitchenplan.catalog.items import Orientation
        assert [o.index for o in Orientation] == [0, 1, 2, 3]
        assert Orientation.from_index(5) == Orientation.RIGHT

    def test_transform(self):
        from kitchenplan.catalog.items import Orientation
        assert Orientation.DOWN.transform == "rotate(180deg)"


# =============================================================================
# CATALOG TESTS
# =============================================================================

class TestItemCatalog:
    """Test catalog registry."""

    def test_every_kind_has_info(self):
        from kitchenplan.catalog.items import ItemKind, ITEM_CATALOG
        assert set(ITEM_CATALOG) == set(ItemKind)

    def test_codes_unique(self):
        from kitchenplan.catalog.items import ITEM_CATALOG
        codes = [info.code for info in ITEM_CATALOG.values()]
        assert len(codes) == len(set(codes))

    def test_empty_is_code_zero(self):
        from kitchenplan.catalog.items import ItemKind, ITEM_CATALOG
        assert ITEM_CATALOG[ItemKind.EMPTY].code == 0

    def test_image_paths(self):
        from kitchenplan.catalog.items import ItemKind, ITEM_CATALOG, IMAGE_ROOT
        assert ITEM_CATALOG[ItemKind.FRIDGE].image == f"{IMAGE_ROOT}/fridge.png"
        assert ITEM_CATALOG[ItemKind.EMPTY].image.endswith("floor.png")

    def test_placeable_items_excludes_empty(self):
        from kitchenplan.catalog.items import ItemKind, placeable_items
        items = placeable_items()
        assert all(info.kind is not ItemKind.EMPTY for info in items)
        assert [info.code for info in items] == sorted(info.code for info in items)

    def test_item_by_code(self):
        from kitchenplan.catalog.items import ItemKind, item_by_code
        assert item_by_code(1) is ItemKind.FRIDGE

    def test_item_by_code_unknown(self):
        from kitchenplan.catalog.items import item_by_code
        from kitchenplan.errors.taxonomy import UnknownSymbolError
        with pytest.raises(UnknownSymbolError):
            item_by_code(99)

    def test_item_by_slug(self):
        from kitchenplan.catalog.items import ItemKind, item_by_slug
        assert item_by_slug("fridge") is ItemKind.FRIDGE
        assert item_by_slug("Range-Hood") is ItemKind.RANGE_HOOD

    def test_item_by_slug_unknown(self):
        from kitchenplan.catalog.items import item_by_slug
        with pytest.raises(KeyError):
            item_by_slug("hot tub")


# =============================================================================
# PLACEMENT TESTS
# =============================================================================

class TestPlacement:
    """Test Placement value type."""

    def test_default_is_empty(self):
        from kitchenplan.catalog.items import Placement, EMPTY
        assert Placement().is_empty
        assert Placement() == EMPTY

    def test_empty_never_rotates(self):
        from kitchenplan.catalog.items import EMPTY, ItemKind, Orientation, Placement
        assert EMPTY.rotate_right() == EMPTY
        assert Placement(ItemKind.EMPTY, Orientation.LEFT) == EMPTY

    def test_rotation_keeps_kind(self, fridge):
        from kitchenplan.catalog.items import Orientation
        turned = fridge.rotate_right()
        assert turned.kind is fridge.kind
        assert turned.orientation is Orientation.RIGHT
        assert fridge.orientation is Orientation.UP

    def test_four_rotations_identity(self, sink):
        p = sink
        for _ in range(4):
            p = p.rotate_left()
        assert p == sink

    def test_dict_view(self, fridge):
        data = fridge.rotate_right().to_dict()
        assert data["kind"] == "fridge"
        assert data["orientation"] == 90
        assert data["transform"] == "rotate(90deg)"
        assert data["label"] == "Fridge"

    def test_from_dict(self):
        from kitchenplan.catalog.items import ItemKind, Orientation, Placement
        p = Placement.from_dict({"kind": "oven", "orientation": 270})
        assert p.kind is ItemKind.OVEN
        assert p.orientation is Orientation.LEFT


# =============================================================================
# WALL TESTS
# =============================================================================

class TestWallType:
    """Test wall variants."""

    def test_cycle(self):
        from kitchenplan.catalog.walls import WallType
        assert WallType.NONE.cycle() is WallType.WALL
        assert WallType.WALL.cycle() is WallType.COUNTER
        assert WallType.COUNTER.cycle() is WallType.NONE

    def test_codes_round_trip(self):
        from kitchenplan.catalog.walls import WallType
        for wall in WallType:
            assert WallType.from_code(wall.code) is wall

    def test_presence(self):
        from kitchenplan.catalog.walls import WallType
        assert not WallType.NONE.is_present
        assert WallType.WALL.is_present
        assert WallType.COUNTER.is_present

    def test_class_names(self):
        from kitchenplan.catalog.walls import WallType
        assert WallType.NONE.class_name == "wall-none"
        assert WallType.COUNTER.class_name == "counter"


class TestCornerShapes:
    """Test corner shape lookup."""

    def test_table_is_complete(self):
        from kitchenplan.catalog.walls import CORNER_SHAPES
        assert len(CORNER_SHAPES) == 16

    @pytest.mark.parametrize("arms,shape", [
        ((False, False, False, False), "none"),
        ((True, False, False, True), "vertical"),
        ((False, True, True, False), "horizontal"),
        ((True, True, False, False), "l_up_left"),
        ((False, False, True, True), "l_down_right"),
        ((False, True, True, True), "t_no_up"),
        ((True, True, True, False), "t_no_down"),
        ((True, True, True, True), "cross"),
    ])
    def test_shapes(self, arms, shape):
        from kitchenplan.catalog.walls import corner_shape_for
        assert corner_shape_for(*arms).value == shape

    def test_lone_arm_is_straight(self):
        from kitchenplan.catalog.walls import CornerShape, corner_shape_for
        assert corner_shape_for(True, False, False, False) is CornerShape.VERTICAL
        assert corner_shape_for(False, False, True, False) is CornerShape.HORIZONTAL

    def test_wall_type_of_corner(self):
        from kitchenplan.catalog.walls import CornerShape, WallType
        assert CornerShape.NONE.wall_type is WallType.NONE
        assert CornerShape.CROSS.wall_type is WallType.WALL

    def test_class_name(self):
        from kitchenplan.catalog.walls import CornerShape
        assert CornerShape.L_UP_LEFT.class_name == "corner-l-up-left"
