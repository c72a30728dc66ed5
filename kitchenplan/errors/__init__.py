"""
errors/ - Error Taxonomy

Structured error classification for token decoding and layout
precondition failures.
"""

from .taxonomy import (
    ErrorSeverity,
    ErrorCategory,
    ErrorCode,
    KitchenPlanError,
    create_codec_error,
    create_layout_error,
    KitchenPlanException,
    TokenDecodeError,
    UnknownVersionError,
    TokenLengthError,
    UnknownSymbolError,
    CellRangeError,
    CellCategoryError,
)

from .aggregator import ErrorAggregator

__all__ = [
    # Taxonomy
    "ErrorSeverity",
    "ErrorCategory",
    "ErrorCode",
    "KitchenPlanError",
    "create_codec_error",
    "create_layout_error",
    # Exceptions
    "KitchenPlanException",
    "TokenDecodeError",
    "UnknownVersionError",
    "TokenLengthError",
    "UnknownSymbolError",
    "CellRangeError",
    "CellCategoryError",
    # Aggregator
    "ErrorAggregator",
]
