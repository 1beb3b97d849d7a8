"""
Main entrypoint for the Guitars API.

This module assembles the FastAPI application, sets up logging,
registers the exception handlers and includes the versioned router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Importing the app
here makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn guitars_api.app.main:app --reload

The page at ``/`` (rendered from ``templates/index.html``) and the
browser script under ``/static`` are served by the same application,
so the script's relative requests reach the API without any
cross-origin setup.
"""

import html
import logging
from pathlib import Path
from string import Template
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.exception_handlers import register_exception_handlers
from .core.exceptions import StoreUnavailable
from .core.logging_config import setup_logging
from .services.addressing import GuitarAddressing
from .services.guitar_service import GuitarService
from .store.base import Store
from .store.factory import create_store

STATIC_DIR = Path(__file__).resolve().parent / "static"
TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

logger = logging.getLogger(__name__)


def render_index(collection_url: str) -> str:
    """Fill the index page with the address of the collection."""
    template = Template((TEMPLATES_DIR / "index.html").read_text(encoding="utf-8"))
    return template.substitute(collection_url=html.escape(collection_url, quote=True))


def create_app(settings: Optional[Settings] = None, store: Optional[Store] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the environment-derived defaults.
    store : Optional[Store]
        Store to use instead of the one ``settings.storage_backend``
        names.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  Its
        ``state.guitar_service`` is loaded from the store on startup.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that imports below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.guitar_service = GuitarService(
        store if store is not None else create_store(settings),
        GuitarAddressing(settings.api_prefix),
    )

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix.rstrip("/"))
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    index_html = render_index(app.state.guitar_service.addressing.base)

    @app.get("/", include_in_schema=False, response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        return HTMLResponse(index_html)

    # The store is the source of truth; the service's list is only a
    # cache of it, rebuilt every time the application starts.  An
    # unreadable store must not stop the process: requests answer 503
    # until a later read succeeds.
    @app.on_event("startup")
    async def startup_event() -> None:
        try:
            await app.state.guitar_service.load()
        except StoreUnavailable as exc:
            logger.error("Guitars not loaded at startup: %s", exc.detail)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
