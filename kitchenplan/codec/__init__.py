"""
codec - Shareable layout token encoding.
"""

from kitchenplan.codec.token import (
    ALPHABET,
    FORMAT_TAG,
    MAX_DIMENSION,
    encode_layout,
    decode_layout,
    decode_or_default,
    token_length,
    segment_count,
)

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
