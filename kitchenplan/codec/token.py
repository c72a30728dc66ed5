"""
codec/token.py - Shareable layout token v1.0

Encodes a Layout into a short string that can sit after '#' in a URL
without escaping.

Token format "k1":

    k1 <W> <H> <room symbols> <segment symbols>

All symbols come from the base64url alphabet (A-Z a-z 0-9 - _).

- W, H: room counts, one symbol each (1..MAX_DIMENSION)
- room symbols: one per room cell, row-major. 0 is empty, otherwise
  1 + (item_code - 1) * 4 + quarter_turns
- segment symbols: segment cells row-major, three base-3 wall codes per
  symbol (first cell most significant), zero padded at the end

Corners are not stored; decode re-derives them from the segments.
"""

from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import logging

from kitchenplan.catalog.items import (
    EMPTY,
    ITEM_CATALOG,
    Orientation,
    Placement,
    item_by_code,
)
from kitchenplan.catalog.walls import WallType
from kitchenplan.errors.taxonomy import (
    ErrorCode,
    KitchenPlanError,
    TokenDecodeError,
    TokenLengthError,
    UnknownSymbolError,
    UnknownVersionError,
    create_codec_error,
)
from kitchenplan.layout.grid import Dimensions, Layout

__all__ = [
    'ALPHABET',
    'FORMAT_TAG',
    'MAX_DIMENSION',
    'encode_layout',
    'decode_layout',
    'decode_or_default',
    'token_length',
    'segment_count',
]

logger = logging.getLogger("codec.token")


# =============================================================================
# FORMAT CONSTANTS
# =============================================================================

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
FORMAT_TAG = "k1"
MAX_DIMENSION = 32

SEGMENTS_PER_SYMBOL = 3
_SEGMENT_BASE = 3
_MAX_SEGMENT_VALUE = _SEGMENT_BASE ** SEGMENTS_PER_SYMBOL - 1

_SYMBOL_VALUES: Dict[str, int] = {ch: i for i, ch in enumerate(ALPHABET)}

if 1 + (max(info.code for info in ITEM_CATALOG.values()) * 4) > len(ALPHABET):
    raise RuntimeError("Item catalog no longer fits a single token symbol per room")


def segment_count(width: int, height: int) -> int:
    """Number of segment cells in a width x height room layout."""
    return (width - 1) * height + width * (height - 1)


def token_length(width: int, height: int) -> int:
    """Exact token length (tag included) for the given dimensions."""
    segment_symbols = -(-segment_count(width, height) // SEGMENTS_PER_SYMBOL)
    return len(FORMAT_TAG) + 2 + width * height + segment_symbols


# =============================================================================
# ENCODE
# =============================================================================

def _room_symbol(placement: Placement) -> str:
    if placement.is_empty:
        return ALPHABET[0]
    return ALPHABET[1 + (placement.code - 1) * 4 + placement.orientation.index]


def encode_layout(layout: Layout) -> str:
    """
    Encode a layout as a URL fragment safe token.

    Args:
        layout: Layout to encode

    Returns:
        Token string starting with FORMAT_TAG

    Raises:
        ValueError: If the layout exceeds MAX_DIMENSION on either axis
    """
    width, height = layout.width, layout.height
    if width > MAX_DIMENSION or height > MAX_DIMENSION:
        raise ValueError(
            f"Layout {width}x{height} exceeds the {MAX_DIMENSION}x{MAX_DIMENSION} token limit"
        )

    parts: List[str] = [FORMAT_TAG, ALPHABET[width], ALPHABET[height]]
    parts.extend(_room_symbol(placement) for _, placement in layout.iter_rooms())

    digits = [wall.code for _, wall in layout.iter_segments()]
    while len(digits) % SEGMENTS_PER_SYMBOL:
        digits.append(WallType.NONE.code)
    for start in range(0, len(digits), SEGMENTS_PER_SYMBOL):
        value = 0
        for digit in digits[start:start + SEGMENTS_PER_SYMBOL]:
            value = value * _SEGMENT_BASE + digit
        parts.append(ALPHABET[value])

    return "".join(parts)


# =============================================================================
# DECODE
# =============================================================================

def _symbol_value(symbol: str, position: int) -> int:
    value = _SYMBOL_VALUES.get(symbol)
    if value is None:
        raise UnknownSymbolError(create_codec_error(
            ErrorCode.COD_UNKNOWN_SYMBOL,
            f"Invalid token character {symbol!r} at position {position}",
            actual=symbol,
        ))
    return value


def _decode_room(value: int) -> Placement:
    if value == 0:
        return EMPTY
    code, turns = divmod(value - 1, 4)
    return Placement(item_by_code(code + 1), Orientation.from_index(turns))


def _decode_segments(symbols: str, count: int, offset: int) -> List[WallType]:
    digits: List[int] = []
    for k, symbol in enumerate(symbols):
        value = _symbol_value(symbol, offset + k)
        if value > _MAX_SEGMENT_VALUE:
            raise UnknownSymbolError(create_codec_error(
                ErrorCode.COD_UNKNOWN_SYMBOL,
                f"Segment symbol {symbol!r} out of range at position {offset + k}",
                actual=symbol,
            ))
        chunk = []
        for _ in range(SEGMENTS_PER_SYMBOL):
            value, digit = divmod(value, _SEGMENT_BASE)
            chunk.append(digit)
        digits.extend(reversed(chunk))

    if any(digits[count:]):
        raise UnknownSymbolError(create_codec_error(
            ErrorCode.COD_UNKNOWN_SYMBOL,
            "Non-zero padding after the last segment",
        ))
    return [WallType.from_code(d) for d in digits[:count]]


def decode_layout(token: str) -> Layout:
    """
    Decode a token produced by encode_layout.

    A single leading '#' is accepted so raw URL hashes can be passed in.

    Raises:
        UnknownVersionError: Missing or unsupported format tag
        TokenLengthError: Length does not match the declared dimensions
        UnknownSymbolError: Character or item code outside the alphabet
        TokenDecodeError: Declared dimensions out of range
    """
    if token.startswith("#"):
        token = token[1:]

    if not token.startswith(FORMAT_TAG):
        raise UnknownVersionError(create_codec_error(
            ErrorCode.COD_UNKNOWN_VERSION,
            f"Unsupported token format: {token[:len(FORMAT_TAG)]!r}",
            actual=token[:len(FORMAT_TAG)],
            expected=FORMAT_TAG,
        ))

    offset = len(FORMAT_TAG)
    if len(token) < offset + 2:
        raise TokenLengthError(create_codec_error(
            ErrorCode.COD_LENGTH_MISMATCH,
            "Token too short to hold dimensions",
            actual=len(token),
        ))

    width = _symbol_value(token[offset], offset)
    height = _symbol_value(token[offset + 1], offset + 1)
    if not (1 <= width <= MAX_DIMENSION and 1 <= height <= MAX_DIMENSION):
        raise TokenDecodeError(create_codec_error(
            ErrorCode.COD_BAD_DIMENSIONS,
            f"Declared dimensions {width}x{height} outside 1..{MAX_DIMENSION}",
            actual=(width, height),
            expected=(1, MAX_DIMENSION),
        ))

    expected_length = token_length(width, height)
    if len(token) != expected_length:
        raise TokenLengthError(create_codec_error(
            ErrorCode.COD_LENGTH_MISMATCH,
            f"Token length {len(token)} does not match {width}x{height} layout",
            actual=len(token),
            expected=expected_length,
        ))

    dimensions = Dimensions(width, height)
    grid = Layout.blank_grid(dimensions)

    position = offset + 2
    for i in range(0, dimensions.rows, 2):
        for j in range(0, dimensions.cols, 2):
            grid[i][j] = _decode_room(_symbol_value(token[position], position))
            position += 1

    walls = _decode_segments(token[position:], segment_count(width, height), position)
    wall_iter = iter(walls)
    for i in range(dimensions.rows):
        for j in range((i + 1) % 2, dimensions.cols, 2):
            grid[i][j] = next(wall_iter)

    return Layout(dimensions, grid).fix_corner_walls()


def decode_or_default(
    token: Optional[str],
    width: int,
    height: int,
) -> Tuple[Layout, Optional[KitchenPlanError]]:
    """
    Decode a token, falling back to an empty layout.

    A corrupt token is never partially applied.

    Returns:
        Tuple of (layout, error). error is None when decoding succeeded or
        no token was supplied.
    """
    if not token or token == "#":
        return Layout.empty(width, height), None

    try:
        return decode_layout(token), None
    except TokenDecodeError as e:
        logger.warning(f"Falling back to empty {width}x{height} layout: {e}")
        return Layout.empty(width, height), e.error
