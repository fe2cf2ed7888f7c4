from __future__ import annotations

import numpy as np
import pytest

from elemental import Elemental, IndexOutOfRangeError, UnknownMemberError
from elemental.io import decode_ordinals, decode_values, encode_ordinals, encode_values


def _comment_type() -> Elemental:
    return Elemental.declare("CommentType", "all", "moderated", "closed", persist_ordinally=True)


def _public_status() -> Elemental:
    return Elemental.declare("PublicStatus", "unpublished", "editor_approval", "published", "archived")


def test_encode_ordinals_accepts_any_key_shape() -> None:
    status = _public_status()
    arr = encode_ordinals(status, ["published", "EditorApproval", -1, status.first()])
    assert arr.dtype == np.int64
    assert arr.tolist() == [2, 1, 3, 0]


def test_decode_ordinals() -> None:
    status = _public_status()
    members = decode_ordinals(status, np.array([3, 0, -1], dtype=np.int32))
    assert members == [status["archived"], status["unpublished"], status["archived"]]
    assert decode_ordinals(status, []) == []


def test_decode_ordinals_range_checks_the_whole_column() -> None:
    status = _public_status()
    with pytest.raises(IndexOutOfRangeError) as info:
        decode_ordinals(status, [0, 1, 7, 9])
    assert info.value.index == 7
    assert info.value.size == 4
    with pytest.raises(TypeError):
        decode_ordinals(status, np.array([0.0, 1.0]))


def test_values_follow_the_persistence_policy() -> None:
    comments = _comment_type()
    ords = encode_values(comments, ["closed", "all"])
    assert ords.dtype == np.int64
    assert ords.tolist() == [2, 0]
    assert decode_values(comments, ords) == [comments["closed"], comments["all"]]

    status = _public_status()
    names = encode_values(status, [2, "Archived"])
    assert names.dtype == object
    assert names.tolist() == ["published", "archived"]
    assert decode_values(status, names) == [status["published"], status["archived"]]


def test_encode_propagates_unknown_members() -> None:
    with pytest.raises(UnknownMemberError):
        encode_ordinals(_public_status(), ["published", "retracted"])


def test_decode_ordinals_rejects_huge_unsigned_values() -> None:
    status = _public_status()
    with pytest.raises(IndexOutOfRangeError):
        decode_ordinals(status, np.array([2**64 - 1], dtype=np.uint64))
    with pytest.raises(IndexOutOfRangeError):
        decode_ordinals(status, np.array([1, 4], dtype=np.uint8))
    assert decode_ordinals(status, np.array([3, 0], dtype=np.uint64)) == [status["archived"], status["unpublished"]]
