from __future__ import annotations

from fastapi import FastAPI

from ..core.catalog import CATALOG, ElementalCatalog
from .routes import mount_elementals_api
from .serializers import element_to_item, elemental_to_item, elemental_to_summary


def create_api_app(catalog: ElementalCatalog = CATALOG) -> FastAPI:
    from .. import __version__

    app = FastAPI(title="elemental", version=__version__)
    mount_elementals_api(app, catalog)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    return app


__all__ = [
    "create_api_app",
    "mount_elementals_api",
    "element_to_item",
    "elemental_to_item",
    "elemental_to_summary",
]
