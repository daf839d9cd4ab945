"""FastAPI application entry point: API routers, client pages and static assets."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from showcase.config import Settings, settings as default_settings
from showcase.responses import not_found
from showcase.routers import contact, content, fallback, pages
from showcase.store import ResourceStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown events."""
    logger.info(f"Server running at http://localhost:{app.state.settings.PORT}")
    yield
    logger.info("Server stopped; in-memory records discarded.")


async def _not_found_handler(request: Request, exc: StarletteHTTPException):
    # Unknown routes and unwired methods both read as "not found"
    if exc.status_code in (404, 405):
        return not_found()
    return await http_exception_handler(request, exc)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[ResourceStore] = None,
) -> FastAPI:
    """Build the application around its own settings and seeded store."""
    settings = settings or default_settings

    app = FastAPI(
        title="Showcase Site API",
        description=(
            "In-memory REST API for the showcase site's banners, products, "
            "events, testimonials and contact submissions, plus the client pages."
        ),
        version="1.0.0",
        lifespan=lifespan,
        # Every non-API path belongs to the client directory
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else ResourceStore()

    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.BACKEND_CORS_ORIGINS,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(StarletteHTTPException, _not_found_handler)

    # Register API routers; the /api fallback must come after all of them
    for router in content.routers:
        app.include_router(router)
    app.include_router(contact.router)
    app.include_router(fallback.router)

    # Client pages and the static catch-all go last
    app.include_router(pages.router)

    return app


app = create_app()


def run():
    """Serve the application with uvicorn on the configured host and port."""
    logging.basicConfig(
        level=default_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    run()
