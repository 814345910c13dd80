"""Health check endpoint. Never calls the blog API."""

from fastapi import APIRouter, Depends

from blog_reader.application.services import QueryCache
from blog_reader.config import get_settings
from blog_reader.infrastructure.dependencies import get_query_cache

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(cache: QueryCache = Depends(get_query_cache)) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "blog_api": settings.blog_api_base_url,
        "cached_queries": len(cache),
    }
