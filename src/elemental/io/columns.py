from __future__ import annotations

from typing import Iterable

import numpy as np

from ..core.element import Element
from ..core.errors import IndexOutOfRangeError
from ..core.registry import Elemental, MemberKey


def _as_ordinal_array(ordinals: Iterable[int] | np.ndarray) -> np.ndarray:
    arr = np.asarray(ordinals if isinstance(ordinals, np.ndarray) else list(ordinals))
    if arr.size == 0:
        return np.zeros((0,), dtype=np.int64)
    if not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"ordinals must be integers, got dtype {arr.dtype}")
    return arr.reshape(-1)


def encode_ordinals(elemental: Elemental, keys: Iterable[MemberKey]) -> np.ndarray:
    """Resolve each key and return the ordinals as an int64 array (N,)."""

    return np.fromiter((elemental.lookup(k).ordinal for k in keys), dtype=np.int64)


def decode_ordinals(elemental: Elemental, ordinals: Iterable[int] | np.ndarray) -> list[Element]:
    """Map stored ordinals back to members.

    Negative ordinals index from the end, same as ``Elemental.lookup``. The
    whole column is range-checked up front; the first offending ordinal is
    reported.
    """

    arr = _as_ordinal_array(ordinals)
    size = elemental.size()
    # Range-check in the stored dtype so uint64 values past the int64 range never wrap.
    if np.issubdtype(arr.dtype, np.unsignedinteger):
        out_of_range = arr >= size
    else:
        out_of_range = (arr < -size) | (arr >= size)
    bad = np.flatnonzero(out_of_range)
    if bad.size:
        raise IndexOutOfRangeError(elemental.name, int(arr[bad[0]]), size)
    members = elemental.members
    return [members[int(i)] for i in arr.astype(np.int64)]


def encode_values(elemental: Elemental, keys: Iterable[MemberKey]) -> np.ndarray:
    """Member values under the elemental's persistence policy.

    int64 ordinals when the elemental persists ordinally, otherwise an object
    array of canonical names.
    """

    if elemental.value_as_ordinal:
        return encode_ordinals(elemental, keys)
    return np.asarray([elemental.lookup(k).name for k in keys], dtype=object)


def decode_values(elemental: Elemental, values: Iterable[str | int] | np.ndarray) -> list[Element]:
    if elemental.value_as_ordinal:
        return decode_ordinals(elemental, values)  # type: ignore[arg-type]
    return [elemental.lookup(str(v)) for v in values]
