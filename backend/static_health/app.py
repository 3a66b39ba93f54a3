"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from . import __version__
from .api.router import api_router
from .core.config import Settings, get_settings
from .services.clock import ProcessClock
from .services.static_files import StaticFileResolver


def create_app(settings: Settings | None = None, clock: ProcessClock | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        # Every non-health path belongs to the static root.
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.clock = clock or ProcessClock()
    app.state.static_files = StaticFileResolver(
        settings.static_root,
        index_file=settings.index_file,
        serve_dotfiles=settings.serve_dotfiles,
    )

    app.include_router(api_router)
    return app


app = create_app()
