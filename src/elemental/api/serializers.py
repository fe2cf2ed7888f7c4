from __future__ import annotations

from typing import Any

from ..core.element import Element
from ..core.registry import Elemental


def element_to_item(e: Element) -> dict[str, Any]:
    return {
        "name": e.name,
        "ordinal": int(e.ordinal),
        "position": int(e.position),
        "display": e.display,
        "humanized": e.humanize(),
        "isDefault": bool(e.default),
        "value": e.value,
        "metadata": dict(e.metadata),
    }


def elemental_to_summary(el: Elemental) -> dict[str, Any]:
    return {
        "name": el.name,
        "size": el.size(),
        "persistOrdinally": bool(el.value_as_ordinal),
    }


def elemental_to_item(el: Elemental, *, order: str = "ordinal") -> dict[str, Any]:
    if order == "ordinal":
        members = list(el)
    elif order == "position":
        members = el.sorted_by_position()
    else:
        raise ValueError(f"Unsupported member order: {order!r} (use 'ordinal' or 'position')")
    return {
        **elemental_to_summary(el),
        "order": order,
        "members": [element_to_item(e) for e in members],
        "defaults": [e.name for e in el.defaults()],
        "synonyms": el.synonyms(),
    }
