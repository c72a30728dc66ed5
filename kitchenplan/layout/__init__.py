"""
layout - Kitchen layout grid package.

Provides the value-semantics Layout and its editing operations.
"""

from kitchenplan.layout.grid import (
    CellKind,
    Cell,
    GridPosition,
    Dimensions,
    Layout,
    cell_kind,
)
from kitchenplan.layout.operations import (
    OPERATIONS,
    UnknownOperationError,
    apply_operation,
    operation_names,
)

__all__ = [
    'CellKind',
    'Cell',
    'GridPosition',
    'Dimensions',
    'Layout',
    'cell_kind',
    # Named operations
    'OPERATIONS',
    'UnknownOperationError',
    'apply_operation',
    'operation_names',
]
