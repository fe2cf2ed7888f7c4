from __future__ import annotations


class ElementalError(Exception):
    """Base class for every error raised by elemental."""


class UnknownMemberError(ElementalError, KeyError):
    def __init__(self, elemental: str, key: object) -> None:
        super().__init__(f"{elemental} has no member {key!r}")
        self.elemental = elemental
        self.key = key

    # KeyError quotes its argument in str(); keep the plain message.
    def __str__(self) -> str:
        return str(self.args[0])


class IndexOutOfRangeError(ElementalError, IndexError):
    def __init__(self, elemental: str, index: object, size: int) -> None:
        super().__init__(f"{elemental} ordinal {index!r} is out of range for {size} member(s)")
        self.elemental = elemental
        self.index = index
        self.size = size


class EmptyRegistryError(ElementalError, LookupError):
    def __init__(self, elemental: str) -> None:
        super().__init__(f"{elemental} has no members")
        self.elemental = elemental


class DuplicateMemberError(ElementalError, ValueError):
    def __init__(self, elemental: str, name: str) -> None:
        super().__init__(f"{elemental} already defines {name!r}")
        self.elemental = elemental
        self.name = name


class FrozenElementalError(ElementalError, RuntimeError):
    def __init__(self, elemental: str) -> None:
        super().__init__(f"{elemental} is frozen; members can no longer be declared")
        self.elemental = elemental


class UnknownElementalError(ElementalError, KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(f"No elemental named {name!r}")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class DuplicateElementalError(ElementalError, ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"A different elemental named {name!r} is already cataloged")
        self.name = name
