from __future__ import annotations

from .columns import decode_ordinals, decode_values, encode_ordinals, encode_values

__all__ = [
    "encode_ordinals",
    "decode_ordinals",
    "encode_values",
    "decode_values",
]
