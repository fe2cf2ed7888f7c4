from __future__ import annotations

__version__ = "0.2.0"

from .core.catalog import CATALOG, ElementalCatalog
from .core.element import Element
from .core.errors import (
    DuplicateElementalError,
    DuplicateMemberError,
    ElementalError,
    EmptyRegistryError,
    FrozenElementalError,
    IndexOutOfRangeError,
    UnknownElementalError,
    UnknownMemberError,
)
from .core.naming import conform_name, humanize_name
from .core.registry import Elemental

__all__ = [
    "__version__",
    "Elemental",
    "Element",
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
