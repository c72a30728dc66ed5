"""
Kitchen plan test configuration and fixtures.

Provides layouts, configuration and a layout host that controllers can
publish into.
"""

import logging
from typing import List

import pytest


class LayoutHost:
    """
    Minimal owner of the current layout for controller tests.

    Records every published layout so tests can assert how many replacements
    a gesture produced.
    """

    def __init__(self, layout):
        self.layout = layout
        self.published: List = []

    def get(self):
        return self.layout

    def publish(self, layout) -> None:
        self.published.append(layout)
        self.layout = layout


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handlers and level that entry points install on the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def config():
    """Default configuration, independent of environment and config files."""
    from kitchenplan.bootstrap.config import KitchenPlanConfig
    return KitchenPlanConfig()


@pytest.fixture
def empty_layout():
    """Empty layout of the default 6x4 size."""
    from kitchenplan.layout.grid import Layout
    return Layout.empty(6, 4)


@pytest.fixture
def fridge():
    from kitchenplan.catalog.items import ItemKind, Placement
    return Placement(ItemKind.FRIDGE)


@pytest.fixture
def sink():
    from kitchenplan.catalog.items import ItemKind, Placement
    return Placement(ItemKind.SINK)


@pytest.fixture
def furnished_layout(fridge, sink):
    """3x3 layout with a fridge at (0, 0), a sink at (2, 2) and one wall."""
    from kitchenplan.catalog.walls import WallType
    from kitchenplan.layout.grid import Layout
    return (
        Layout.empty(3, 3)
        .set_element(0, 0, fridge)
        .set_element(2, 2, sink)
        .set_element(1, 0, WallType.WALL)
    )


@pytest.fixture
def host():
    """LayoutHost around an empty 3x3 layout."""
    from kitchenplan.layout.grid import Layout
    return LayoutHost(Layout.empty(3, 3))


@pytest.fixture
def session(config):
    """PlanSession with default configuration."""
    from kitchenplan.shell.session import PlanSession
    return PlanSession(config=config)
