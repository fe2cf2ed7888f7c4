from __future__ import annotations

import logging
import numbers
import threading
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Mapping, Union

from .element import Element
from .errors import (
    DuplicateMemberError,
    EmptyRegistryError,
    FrozenElementalError,
    IndexOutOfRangeError,
    UnknownMemberError,
)
from .naming import conform_name

if TYPE_CHECKING:
    from .catalog import ElementalCatalog

logger = logging.getLogger(__name__)

MemberKey = Union[int, str, Element]
MemberSpec = Union[str, tuple[str, Mapping[str, Any]]]


class Elemental:
    """A closed, named enumeration.

    Members are declared once, in order, and the elemental is then frozen:

        Color = Elemental("Color")
        Color.member("blue", display="Hazel Blue", default=True)
        Color.member("red", display="Fire Engine Red")
        Color.member("yellow")
        Color.freeze()

    Lookup accepts an ordinal (negative indexing works), any spelling of a
    name or synonym, or an element of this elemental. Iteration is in
    ordinal order; ``sorted_by_position`` gives the display order.

    Once frozen the elemental is read-only and can be shared between threads
    without locking.

    Notes on ``persist_ordinally``: when values are stored as ordinals, new
    members must only ever be appended. Reordering or removing members changes
    ordinals and silently invalidates anything already stored.
    """

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("elemental name cannot be empty")
        self.name = name.strip()
        self._lock = threading.RLock()
        self._ordered: list[Element] = []
        self._by_name: dict[str, Element] = {}
        self._value_as_ordinal = False
        self._frozen = False

    @classmethod
    def declare(
        cls,
        name: str,
        *members: MemberSpec,
        synonyms: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
        persist_ordinally: bool = False,
        catalog: ElementalCatalog | None = None,
    ) -> Elemental:
        """Build, freeze and optionally catalog an elemental in one call.

        Each member is either a bare name or a ``(name, options)`` pair where
        options are the keyword arguments of :meth:`member`.
        """

        elemental = cls(name)
        if persist_ordinally:
            elemental.persist_ordinally()
        for spec in members:
            if isinstance(spec, str):
                elemental.member(spec)
            else:
                member_name, options = spec
                elemental.member(member_name, **dict(options))
        if synonyms is not None:
            pairs = synonyms.items() if isinstance(synonyms, Mapping) else synonyms
            for alias, existing in pairs:
                elemental.synonym(alias, existing)
        elemental.freeze()
        if catalog is not None:
            catalog.add(elemental)
        return elemental

    # -- declaration -------------------------------------------------------

    def member(
        self,
        name: str,
        *,
        display: str | None = None,
        position: int | None = None,
        default: bool = False,
        **metadata: Any,
    ) -> Element:
        """Append a member. Its ordinal is the number of members declared before it."""

        canonical = conform_name(name)
        with self._lock:
            self._require_open()
            if canonical in self._by_name:
                raise DuplicateMemberError(self.name, canonical)
            ordinal = len(self._ordered)
            element = Element(
                name=canonical,
                ordinal=ordinal,
                display=str(display) if display is not None else canonical,
                position=self._conform_position(position, ordinal),
                default=bool(default),
                metadata=metadata,
                elemental=self,
            )
            self._ordered.append(element)
            self._by_name[canonical] = element
        logger.debug("%s: declared member %s (ordinal %d)", self.name, canonical, ordinal)
        return element

    def synonym(self, alias: str, existing: MemberKey) -> Element:
        """Make ``alias`` resolve to an existing member without adding a new one."""

        canonical = conform_name(alias)
        with self._lock:
            self._require_open()
            element = self.lookup(existing)
            if canonical in self._by_name:
                raise DuplicateMemberError(self.name, canonical)
            self._by_name[canonical] = element
        logger.debug("%s: %s is a synonym for %s", self.name, canonical, element.name)
        return element

    def persist_ordinally(self) -> None:
        """Make member values ordinals instead of names. Cannot be undone."""

        with self._lock:
            self._require_open()
            self._value_as_ordinal = True
        logger.debug("%s: values are persisted ordinally", self.name)

    def freeze(self) -> Elemental:
        with self._lock:
            if not self._frozen:
                self._frozen = True
                logger.debug("%s: frozen with %d member(s)", self.name, len(self._ordered))
        return self

    def _conform_position(self, position: int | None, ordinal: int) -> int:
        if position is None:
            return ordinal
        if isinstance(position, bool) or not isinstance(position, numbers.Integral):
            raise TypeError(f"{self.name} member position must be an integer, got {position!r}")
        return int(position)

    def _require_open(self) -> None:
        if self._frozen:
            raise FrozenElementalError(self.name)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def value_as_ordinal(self) -> bool:
        return self._value_as_ordinal

    # -- lookup ------------------------------------------------------------

    def lookup(self, key: MemberKey) -> Element:
        if isinstance(key, Element):
            if key.elemental is not self:
                raise UnknownMemberError(self.name, key.name)
            return key
        if isinstance(key, bool):
            raise TypeError(f"{self.name} cannot look up a member by bool")
        if isinstance(key, numbers.Integral):
            return self._by_ordinal(int(key))
        if isinstance(key, str):
            return self._by_canonical_name(key)
        raise TypeError(f"{self.name} cannot look up a member by {type(key).__name__}")

    def _by_ordinal(self, index: int) -> Element:
        size = len(self._ordered)
        if not -size <= index < size:
            raise IndexOutOfRangeError(self.name, index, size)
        return self._ordered[index]

    def _by_canonical_name(self, name: str) -> Element:
        try:
            canonical = conform_name(name)
        except ValueError:
            raise UnknownMemberError(self.name, name) from None
        element = self._by_name.get(canonical)
        if element is None:
            raise UnknownMemberError(self.name, name)
        return element

    def get(self, key: MemberKey, default: Element | None = None) -> Element | None:
        try:
            return self.lookup(key)
        except (UnknownMemberError, IndexOutOfRangeError):
            return default

    def __getitem__(self, key: MemberKey) -> Element:
        return self.lookup(key)

    def __contains__(self, key: object) -> bool:
        try:
            self.lookup(key)  # type: ignore[arg-type]
        except (UnknownMemberError, IndexOutOfRangeError, TypeError):
            return False
        return True

    def first(self) -> Element:
        if not self._ordered:
            raise EmptyRegistryError(self.name)
        return self._ordered[0]

    def last(self) -> Element:
        if not self._ordered:
            raise EmptyRegistryError(self.name)
        return self._ordered[-1]

    def size(self) -> int:
        return len(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    # -- navigation --------------------------------------------------------

    def succ(self, key: MemberKey) -> Element:
        """Member after ``key``; after the last member comes the first."""
        if not self._ordered:
            raise EmptyRegistryError(self.name)
        ordinal = self.lookup(key).ordinal
        return self._ordered[(ordinal + 1) % len(self._ordered)]

    def pred(self, key: MemberKey) -> Element:
        """Member before ``key``; before the first member comes the last."""
        if not self._ordered:
            raise EmptyRegistryError(self.name)
        ordinal = self.lookup(key).ordinal
        return self._ordered[(ordinal - 1) % len(self._ordered)]

    # -- iteration and ordering --------------------------------------------

    @property
    def members(self) -> tuple[Element, ...]:
        return tuple(self._ordered)

    def __iter__(self) -> Iterator[Element]:
        return iter(tuple(self._ordered))

    def sorted_by_position(self) -> list[Element]:
        return sorted(self._ordered, key=lambda e: (e.position, e.ordinal))

    def defaults(self) -> list[Element]:
        return [e for e in self._ordered if e.default]

    def names(self) -> list[str]:
        return [e.name for e in self._ordered]

    def synonyms(self) -> dict[str, str]:
        """Alias -> canonical member name, in declaration order."""
        return {alias: e.name for alias, e in self._by_name.items() if alias != e.name}

    # -- values ------------------------------------------------------------

    def value_of(self, key: MemberKey) -> str | int:
        element = self.lookup(key)
        return element.ordinal if self._value_as_ordinal else element.name

    def __repr__(self) -> str:
        names = ", ".join(self.names())
        return f"<Elemental {self.name} [{names}]>"
