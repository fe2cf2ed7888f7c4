from __future__ import annotations

import pytest

from elemental import (
    DuplicateElementalError,
    Elemental,
    ElementalCatalog,
    UnknownElementalError,
)


def test_add_and_get_by_any_spelling() -> None:
    catalog = ElementalCatalog()
    status = Elemental.declare("PublicStatus", "unpublished", "published", catalog=catalog)

    assert catalog.get("PublicStatus") is status
    assert catalog.get("public_status") is status
    assert "publicStatus" in catalog
    assert catalog.names() == ["public_status"]
    assert list(catalog) == [status]
    assert len(catalog) == 1


def test_re_adding_the_same_elemental_is_a_no_op() -> None:
    catalog = ElementalCatalog()
    status = Elemental.declare("PublicStatus", "unpublished")
    catalog.add(status)
    assert catalog.add(status) is status
    assert len(catalog) == 1


def test_name_collisions_are_rejected() -> None:
    catalog = ElementalCatalog()
    catalog.add(Elemental.declare("CommentType", "all"))
    with pytest.raises(DuplicateElementalError):
        catalog.add(Elemental.declare("comment_type", "closed"))
    with pytest.raises(ValueError):
        Elemental.declare("COMMENT-TYPE", "x", catalog=catalog)
    assert catalog.get("CommentType")["all"].ordinal == 0


def test_unknown_elemental() -> None:
    catalog = ElementalCatalog()
    with pytest.raises(UnknownElementalError):
        catalog.get("Nope")
    with pytest.raises(KeyError):
        catalog.get("")
    assert "Nope" not in catalog
    assert 3 not in catalog


def test_clear() -> None:
    catalog = ElementalCatalog()
    Elemental.declare("A", "x", catalog=catalog)
    Elemental.declare("B", "y", catalog=catalog)
    assert catalog.names() == ["a", "b"]
    catalog.clear()
    assert len(catalog) == 0
