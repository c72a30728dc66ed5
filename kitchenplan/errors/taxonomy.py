"""
errors/taxonomy.py - Error classification system

Structured error records and the exception classes raised by the
layout model and the token codec.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List
from datetime import datetime, timezone
from enum import Enum
import uuid


class ErrorSeverity(Enum):
    """Error severity levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories."""
    # Token codec errors (1xxx)
    CODEC = "codec"

    # Layout precondition errors (2xxx)
    LAYOUT = "layout"

    # Input handling errors (3xxx)
    INPUT = "input"

    # Configuration errors (6xxx)
    CONFIGURATION = "configuration"


class ErrorCode(Enum):
    """Specific error codes."""

    # Codec (1xxx)
    COD_UNKNOWN_VERSION = 1001
    COD_LENGTH_MISMATCH = 1002
    COD_UNKNOWN_SYMBOL = 1003
    COD_BAD_DIMENSIONS = 1004

    # Layout (2xxx)
    LAY_OUT_OF_RANGE = 2001
    LAY_CATEGORY_MISMATCH = 2002

    # Input (3xxx)
    INP_UNKNOWN_OPERATION = 3001

    # Configuration (6xxx)
    SYS_CONFIG = 6001


@dataclass
class KitchenPlanError:
    """Structured error representation."""

    error_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    code: ErrorCode = ErrorCode.COD_UNKNOWN_VERSION
    category: ErrorCategory = ErrorCategory.CODEC
    severity: ErrorSeverity = ErrorSeverity.ERROR

    message: str = ""
    detail: str = ""

    # Context
    source: str = ""  # Module that raised

    # Values
    actual_value: Any = None
    expected_value: Any = None

    # Recovery
    recoverable: bool = True
    recovery_options: List[str] = field(default_factory=list)

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "detail": self.detail,
            "source": self.source,
            "recoverable": self.recoverable,
            "recovery_options": list(self.recovery_options),
        }


def create_codec_error(
    code: ErrorCode,
    message: str,
    actual: Any = None,
    expected: Any = None,
    source: str = "codec.token",
) -> KitchenPlanError:
    """Factory for token decode errors. Always recoverable via the default layout."""
    return KitchenPlanError(
        code=code,
        category=ErrorCategory.CODEC,
        severity=ErrorSeverity.ERROR,
        message=message,
        source=source,
        actual_value=actual,
        expected_value=expected,
        recoverable=True,
        recovery_options=["use_default_layout"],
    )


def create_layout_error(
    code: ErrorCode,
    message: str,
    actual: Any = None,
    expected: Any = None,
    source: str = "layout.grid",
) -> KitchenPlanError:
    """Factory for layout precondition violations."""
    return KitchenPlanError(
        code=code,
        category=ErrorCategory.LAYOUT,
        severity=ErrorSeverity.CRITICAL,
        message=message,
        source=source,
        actual_value=actual,
        expected_value=expected,
        recoverable=False,
    )


# =============================================================================
# EXCEPTIONS
# =============================================================================

class KitchenPlanException(Exception):
    """Base exception carrying a structured error record."""

    def __init__(self, error: KitchenPlanError):
        super().__init__(error.message)
        self.error = error


class TokenDecodeError(KitchenPlanException, ValueError):
    """A shareable token could not be decoded."""


class UnknownVersionError(TokenDecodeError):
    """Token carries a format tag this build does not understand."""


class TokenLengthError(TokenDecodeError):
    """Token length disagrees with its declared dimensions."""


class UnknownSymbolError(TokenDecodeError):
    """Token contains a symbol outside the catalog alphabet."""


class CellRangeError(KitchenPlanException, IndexError):
    """Grid coordinates outside the layout."""


class CellCategoryError(KitchenPlanException, TypeError):
    """Value category does not match the cell's parity category."""
