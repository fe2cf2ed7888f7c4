from __future__ import annotations

import re
from typing import Any

from fastapi import FastAPI, HTTPException

from ..core.catalog import CATALOG, ElementalCatalog
from ..core.element import Element
from ..core.errors import (
    EmptyRegistryError,
    IndexOutOfRangeError,
    UnknownElementalError,
    UnknownMemberError,
)
from ..core.registry import Elemental
from .serializers import element_to_item, elemental_to_item, elemental_to_summary

_ORDINAL_KEY = re.compile(r"^-?\d+$")


def _parse_member_key(key: str) -> int | str:
    return int(key) if _ORDINAL_KEY.match(key) else key


def mount_elementals_api(
    app: FastAPI,
    catalog: ElementalCatalog = CATALOG,
    *,
    prefix: str = "/api/elementals",
) -> None:
    """Mount read-only lookup endpoints for every elemental in ``catalog``.

    Member keys in paths are ordinals when they look like integers
    (``-1`` included), names or synonyms otherwise.
    """

    def _elemental(name: str) -> Elemental:
        try:
            return catalog.get(name)
        except UnknownElementalError as ex:
            raise HTTPException(status_code=404, detail=str(ex))

    def _member(name: str, key: str) -> Element:
        el = _elemental(name)
        try:
            return el.lookup(_parse_member_key(key))
        except (UnknownMemberError, IndexOutOfRangeError) as ex:
            raise HTTPException(status_code=404, detail=str(ex))

    @app.get(prefix)
    def list_elementals() -> list[dict[str, Any]]:
        return [elemental_to_summary(el) for el in catalog]

    @app.get(prefix + "/{name}")
    def get_elemental(name: str, order: str = "ordinal") -> dict[str, Any]:
        el = _elemental(name)
        try:
            return elemental_to_item(el, order=order)
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))

    @app.get(prefix + "/{name}/defaults")
    def get_defaults(name: str) -> list[dict[str, Any]]:
        return [element_to_item(e) for e in _elemental(name).defaults()]

    @app.get(prefix + "/{name}/members/{key}")
    def get_member(name: str, key: str) -> dict[str, Any]:
        return element_to_item(_member(name, key))

    @app.get(prefix + "/{name}/members/{key}/succ")
    def get_member_succ(name: str, key: str) -> dict[str, Any]:
        el = _elemental(name)
        if el.size() == 0:
            raise HTTPException(status_code=409, detail=str(EmptyRegistryError(el.name)))
        return element_to_item(_member(name, key).succ())

    @app.get(prefix + "/{name}/members/{key}/pred")
    def get_member_pred(name: str, key: str) -> dict[str, Any]:
        el = _elemental(name)
        if el.size() == 0:
            raise HTTPException(status_code=409, detail=str(EmptyRegistryError(el.name)))
        return element_to_item(_member(name, key).pred())
