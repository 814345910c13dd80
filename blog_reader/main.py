"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from blog_reader.application.interfaces import ArticleGateway
from blog_reader.application.services import ArticleQueries, QueryCache
from blog_reader.config import get_settings
from blog_reader.infrastructure.blog_api import BlogApiClient
from blog_reader.infrastructure.logging.log_config import setup_logging
from blog_reader.presentation.api.router import router as api_router
from blog_reader.presentation.web.pages import STATIC_DIR, router as pages_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup; release the HTTP pool on shutdown."""
    setup_logging()
    settings = get_settings()
    logger.info("Serving %s against blog API at %s", settings.app_title, settings.blog_api_base_url)

    yield

    gateway = app.state.article_gateway
    if isinstance(gateway, BlogApiClient):
        await gateway.aclose()
    app.state.query_cache.clear()


def create_app(gateway: ArticleGateway | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    The query cache is created here, once, and shared by every request
    through ``app.state``.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    if gateway is None:
        gateway = BlogApiClient(base_url=settings.blog_api_base_url)
    cache = QueryCache()

    app.state.article_gateway = gateway
    app.state.query_cache = cache
    app.state.article_queries = ArticleQueries(gateway, cache)

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
    app.include_router(api_router)
    app.include_router(pages_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "blog_reader.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
