"""
tests/unit/test_placement_controller.py - Tests for the plan grid controller

Tests for:
- controller/placement.py - click/select, drag-swap, rotate, delete,
  palette drops, cursor text and preview
"""

import pytest


@pytest.fixture
def controller(host, fridge, sink):
    """Controller over a 3x3 layout with a fridge at (0, 0) and a sink at (2, 2)."""
    from kitchenplan.controller.placement import PlacementController
    host.layout = host.layout.set_element(0, 0, fridge).set_element(2, 2, sink)
    return PlacementController(host.get, host.publish)


# =============================================================================
# STATE MACHINE TESTS
# =============================================================================

class TestPlacementStates:
    """Test derived controller state."""

    def test_initial_idle(self, controller):
        from kitchenplan.controller.events import PlacementState
        assert controller.state is PlacementState.IDLE

    def test_hover(self, controller):
        from kitchenplan.controller.events import PlacementState
        controller.pointer_enter(0, 2)
        assert controller.state is PlacementState.HOVERING
        controller.pointer_leave()
        assert controller.state is PlacementState.IDLE

    def test_press_clicks(self, controller):
        from kitchenplan.controller.events import PlacementState
        controller.pointer_down(0, 0)
        assert controller.state is PlacementState.CLICKED
        assert controller.clicked_cell == (0, 0)

    def test_enter_while_clicked_drags(self, controller):
        from kitchenplan.controller.events import PlacementState
        controller.pointer_down(0, 0)
        controller.pointer_enter(2, 2)
        assert controller.state is PlacementState.DRAGGING_OVER
        assert controller.hovered_cell == (2, 2)

    def test_press_on_empty_ignored(self, controller):
        from kitchenplan.controller.events import PlacementState
        controller.pointer_down(4, 4)
        assert controller.state is PlacementState.IDLE

    def test_press_on_wall_cell_ignored(self, controller):
        controller.pointer_down(0, 1)
        assert controller.clicked_cell is None

    def test_second_press_keeps_first_click(self, controller):
        controller.pointer_down(0, 0)
        controller.pointer_down(2, 2)
        assert controller.clicked_cell == (0, 0)

    def test_reset(self, controller):
        from kitchenplan.controller.events import PlacementState
        controller.pointer_down(0, 0)
        controller.pointer_enter(2, 2)
        controller.reset()
        assert controller.state is PlacementState.IDLE


# =============================================================================
# SELECTION TESTS
# =============================================================================

class TestSelection:
    """Test click to select / deselect."""

    def test_click_selects(self, controller):
        from kitchenplan.controller.events import PlacementState
        controller.pointer_down(0, 0)
        controller.pointer_up()
        assert controller.selected_cell == (0, 0)
        assert controller.state is PlacementState.SELECTED

    def test_click_selected_deselects(self, controller):
        controller.pointer_down(0, 0)
        controller.pointer_up()
        controller.pointer_down(0, 0)
        controller.pointer_up()
        assert controller.selected_cell is None

    def test_click_other_moves_selection(self, controller):
        controller.pointer_down(0, 0)
        controller.pointer_up()
        controller.pointer_down(2, 2)
        controller.pointer_up()
        assert controller.selected_cell == (2, 2)

    def test_release_without_click_clears_selection(self, controller):
        controller.pointer_down(0, 0)
        controller.pointer_up()
        controller.pointer_up()
        assert controller.selected_cell is None

    def test_secondary_release_ignored(self, controller):
        from kitchenplan.controller.events import PointerButton
        controller.pointer_down(0, 0)
        controller.pointer_up(PointerButton.SECONDARY)
        assert controller.clicked_cell == (0, 0)

    def test_actions_require_selection(self, controller, host):
        assert not controller.can_rotate
        assert not controller.can_delete
        controller.rotate_right()
        controller.rotate_left()
        controller.delete()
        assert host.published == []


# =============================================================================
# DRAG SWAP TESTS
# =============================================================================

class TestDragSwap:
    """Test press, drag over, release."""

    def test_swap_occupants_and_clear_selection(self, controller, host, fridge, sink):
        from kitchenplan.controller.events import PlacementState

        controller.pointer_down(2, 2)
        controller.pointer_up()
        assert controller.selected_cell == (2, 2)

        controller.pointer_down(0, 0)
        controller.pointer_enter(2, 2)
        controller.pointer_up()

        assert host.layout.get_element(0, 0) == sink
        assert host.layout.get_element(2, 2) == fridge
        assert controller.selected_cell is None
        assert controller.state is PlacementState.HOVERING
        assert len(host.published) == 1

    def test_move_to_empty_cell(self, controller, host, fridge):
        controller.pointer_down(0, 0)
        controller.pointer_enter(4, 0)
        controller.pointer_up()
        assert host.layout.get_element(4, 0) == fridge
        assert host.layout.get_element(0, 0).is_empty

    def test_orientation_travels(self, controller, host):
        from kitchenplan.catalog.items import Orientation
        from kitchenplan.controller.events import PointerButton
        controller.pointer_down(0, 0, PointerButton.SECONDARY)
        controller.pointer_down(0, 0)
        controller.pointer_enter(0, 4)
        controller.pointer_up()
        assert host.layout.get_element(0, 4).orientation is Orientation.RIGHT

    def test_enter_wall_cell_does_not_drag(self, controller):
        from kitchenplan.controller.events import PlacementState
        controller.pointer_down(0, 0)
        controller.pointer_enter(0, 1)
        assert controller.state is PlacementState.CLICKED


# =============================================================================
# ROTATE / DELETE TESTS
# =============================================================================

class TestRotateDelete:
    """Test rotation and deletion paths."""

    def test_secondary_press_rotates(self, controller, host):
        from kitchenplan.catalog.items import Orientation
        from kitchenplan.controller.events import PlacementState, PointerButton
        controller.pointer_down(2, 2, PointerButton.SECONDARY)
        assert host.layout.get_element(2, 2).orientation is Orientation.RIGHT
        assert controller.state is PlacementState.IDLE

    def test_rotate_selected(self, controller, host):
        from kitchenplan.catalog.items import Orientation
        controller.pointer_down(0, 0)
        controller.pointer_up()
        controller.rotate_left()
        assert host.layout.get_element(0, 0).orientation is Orientation.LEFT
        controller.rotate_right()
        controller.rotate_right()
        assert host.layout.get_element(0, 0).orientation is Orientation.RIGHT
        assert controller.selected_cell == (0, 0)

    def test_delete_selected(self, controller, host):
        controller.pointer_down(0, 0)
        controller.pointer_up()
        controller.delete()
        assert host.layout.get_element(0, 0).is_empty
        assert controller.selected_cell is None

    def test_delete_key(self, controller, host):
        controller.pointer_down(0, 0)
        controller.pointer_up()
        assert controller.key_down("Backspace")
        assert host.layout.elements == [(2, 2)]

    def test_delete_key_suppressed_by_text_focus(self, controller, host):
        controller.pointer_down(0, 0)
        controller.pointer_up()
        assert not controller.key_down("Delete", text_input_in_focus=True)
        assert host.layout.item_count == 2

    def test_other_keys_ignored(self, controller):
        controller.pointer_down(0, 0)
        controller.pointer_up()
        assert not controller.key_down("Enter")

    def test_delete_key_without_selection(self, controller):
        assert not controller.key_down("Delete")

    def test_remove_all(self, controller, host):
        assert controller.can_remove_all
        controller.remove_all()
        assert host.layout.elements == []
        assert not controller.can_remove_all

    def test_remove_all_on_empty_is_noop(self, controller, host):
        controller.remove_all()
        controller.remove_all()
        assert len(host.published) == 1


# =============================================================================
# PALETTE DRAG TESTS
# =============================================================================

class TestPaletteDrag:
    """Test external drag source handling."""

    def test_drop_on_empty(self, controller, host):
        from kitchenplan.catalog.items import ItemKind, Placement
        oven = Placement(ItemKind.OVEN)
        controller.start_drag(oven)
        controller.drag_over(4, 4)
        controller.drop()
        assert host.layout.get_element(4, 4) == oven
        assert controller.dragged_item is None

    def test_drop_replaces_occupant(self, controller, host):
        from kitchenplan.catalog.items import ItemKind, Placement
        oven = Placement(ItemKind.OVEN)
        controller.drag_over(0, 0, oven)
        controller.drop()
        assert host.layout.get_element(0, 0) == oven
        assert host.layout.item_count == 2

    def test_drag_away_places_nothing(self, controller, host):
        from kitchenplan.catalog.items import ItemKind, Placement
        controller.start_drag(Placement(ItemKind.OVEN))
        controller.drag_over(4, 4)
        controller.drag_away()
        controller.drop()
        assert host.published == []

    def test_drag_over_wall_cell_ignored(self, controller):
        from kitchenplan.catalog.items import ItemKind, Placement
        controller.start_drag(Placement(ItemKind.OVEN))
        controller.drag_over(1, 1)
        assert controller.dragged_position is None

    def test_cancel_drag(self, controller):
        from kitchenplan.catalog.items import ItemKind, Placement
        controller.start_drag(Placement(ItemKind.OVEN))
        controller.drag_over(4, 4)
        controller.cancel_drag()
        assert controller.dragged_item is None
        assert controller.dragged_position is None


# =============================================================================
# VIEW STATE TESTS
# =============================================================================

class TestCursorText:
    """Test status text priority."""

    def test_default_help(self, controller):
        from kitchenplan.controller.placement import PLACEMENT_HELP
        assert controller.cursor_text() == PLACEMENT_HELP

    def test_hover_occupied(self, controller):
        controller.pointer_enter(0, 0)
        assert controller.cursor_text() == "Fridge"

    def test_hover_empty_falls_through(self, controller):
        from kitchenplan.controller.placement import PLACEMENT_HELP
        controller.pointer_enter(4, 4)
        assert controller.cursor_text() == PLACEMENT_HELP

    def test_selection(self, controller):
        controller.pointer_down(2, 2)
        controller.pointer_up()
        controller.pointer_leave()
        assert controller.cursor_text() == "Selected Sink"

    def test_hover_beats_selection(self, controller):
        controller.pointer_down(2, 2)
        controller.pointer_up()
        controller.pointer_enter(0, 0)
        assert controller.cursor_text() == "Fridge"

    def test_move_and_swap(self, controller):
        controller.pointer_down(0, 0)
        controller.pointer_enter(4, 4)
        assert controller.cursor_text() == "Move Fridge"
        controller.pointer_enter(2, 2)
        assert controller.cursor_text() == "Swap Fridge and Sink"

    def test_palette_drag_wins(self, controller):
        from kitchenplan.catalog.items import ItemKind, Placement
        controller.pointer_down(0, 0)
        controller.pointer_enter(2, 2)
        controller.drag_over(2, 2, Placement(ItemKind.OVEN))
        assert controller.cursor_text() == "Replace Sink with Oven"
        controller.drag_over(4, 4)
        assert controller.cursor_text() == "Add Oven"


class TestPreview:
    """Test per-cell preview content."""

    def test_plain_cell(self, controller, fridge):
        assert controller.preview(0, 0) == (fridge, 1.0)

    def test_drag_swap_preview(self, controller, fridge, sink):
        from kitchenplan.controller.placement import PREVIEW_OPACITY
        controller.pointer_down(0, 0)
        controller.pointer_enter(2, 2)
        assert controller.preview(2, 2) == (fridge, PREVIEW_OPACITY)
        assert controller.preview(0, 0) == (sink, PREVIEW_OPACITY)
        assert controller.preview(4, 4)[1] == 1.0

    def test_palette_preview(self, controller):
        from kitchenplan.catalog.items import ItemKind, Placement
        from kitchenplan.controller.placement import PREVIEW_OPACITY
        oven = Placement(ItemKind.OVEN)
        controller.drag_over(4, 4, oven)
        assert controller.preview(4, 4) == (oven, PREVIEW_OPACITY)
