from __future__ import annotations

import logging
import threading
from typing import Iterator

from .errors import DuplicateElementalError, UnknownElementalError
from .naming import conform_name
from .registry import Elemental

logger = logging.getLogger(__name__)


class ElementalCatalog:
    """Process-wide index of declared elementals, keyed by canonical name.

    Used by the HTTP API and anything else that needs to find an elemental
    by name at runtime. Declaration code adds to it; everything else reads.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._elementals: dict[str, Elemental] = {}

    def add(self, elemental: Elemental) -> Elemental:
        key = conform_name(elemental.name)
        with self._lock:
            existing = self._elementals.get(key)
            if existing is elemental:
                return elemental
            if existing is not None:
                raise DuplicateElementalError(elemental.name)
            self._elementals[key] = elemental
        logger.debug("cataloged elemental %s as %s", elemental.name, key)
        return elemental

    def get(self, name: str) -> Elemental:
        try:
            key = conform_name(name)
        except ValueError:
            raise UnknownElementalError(name) from None
        with self._lock:
            elemental = self._elementals.get(key)
        if elemental is None:
            raise UnknownElementalError(name)
        return elemental

    def names(self) -> list[str]:
        with self._lock:
            return list(self._elementals.keys())

    def clear(self) -> None:
        with self._lock:
            self._elementals.clear()

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            self.get(name)
        except UnknownElementalError:
            return False
        return True

    def __iter__(self) -> Iterator[Elemental]:
        with self._lock:
            return iter(list(self._elementals.values()))

    def __len__(self) -> int:
        with self._lock:
            return len(self._elementals)


CATALOG = ElementalCatalog()
