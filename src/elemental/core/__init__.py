from __future__ import annotations

from .catalog import CATALOG, ElementalCatalog
from .element import Element
from .errors import (
    DuplicateElementalError,
    DuplicateMemberError,
    ElementalError,
    EmptyRegistryError,
    FrozenElementalError,
    IndexOutOfRangeError,
    UnknownElementalError,
    UnknownMemberError,
)
from .naming import conform_name, humanize_name
from .registry import Elemental, MemberKey, MemberSpec

__all__ = [
    "Elemental",
    "Element",
    "MemberKey",
    "MemberSpec",
    "ElementalCatalog",
    "CATALOG",
    "conform_name",
    "humanize_name",
    "ElementalError",
    "UnknownMemberError",
    "IndexOutOfRangeError",
    "EmptyRegistryError",
    "DuplicateMemberError",
    "FrozenElementalError",
    "UnknownElementalError",
    "DuplicateElementalError",
]
