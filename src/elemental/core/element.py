from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from .naming import humanize_name

if TYPE_CHECKING:
    from .registry import Elemental, MemberKey


@dataclass(frozen=True, kw_only=True, eq=False)
class Element:
    """One member of an :class:`~elemental.core.registry.Elemental`.

    Notes:
    - Elements are created by ``Elemental.member`` only and are never mutated.
    - Equality is identity. Each member exists exactly once in its elemental.
    - Ordering (``<``, ``sorted``) follows ``position``, not ``ordinal``.
    - Anything beyond the fixed fields lives in ``metadata``.
    """

    name: str
    ordinal: int
    display: str
    position: int
    default: bool = False
    metadata: Mapping[str, Any] = field(default_factory=dict)
    elemental: Elemental = field(repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def is_default(self) -> bool:
        return self.default

    @property
    def value(self) -> str | int:
        """Name or ordinal, whichever the owning elemental persists."""
        return self.elemental.value_of(self)

    def matches(self, candidate: Element | MemberKey) -> bool:
        if isinstance(candidate, Element):
            return candidate is self
        return self.elemental.lookup(candidate) is self

    def compare(self, other: Element) -> int:
        if self.position < other.position:
            return -1
        if self.position > other.position:
            return 1
        return 0

    def humanize(self) -> str:
        if self.display != self.name:
            return self.display
        return humanize_name(self.name)

    def succ(self) -> Element:
        """The following member; the last member wraps around to the first."""
        return self.elemental.succ(self.name)

    def pred(self) -> Element:
        """The preceding member; the first member wraps around to the last."""
        return self.elemental.pred(self.name)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.compare(other) >= 0

    def __index__(self) -> int:
        return self.ordinal

    def __int__(self) -> int:
        return self.ordinal

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"<Element {self.elemental.name}.{self.name} ordinal={self.ordinal} "
            f"position={self.position} display={self.display!r} default={self.default}>"
        )
