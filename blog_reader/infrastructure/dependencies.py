"""FastAPI dependency providers for the app-wide services."""

from fastapi import Request

from blog_reader.application.services import ArticleQueries, QueryCache


def get_query_cache(request: Request) -> QueryCache:
    """The single QueryCache created by the application factory."""
    return request.app.state.query_cache


def get_article_queries(request: Request) -> ArticleQueries:
    """ArticleQueries bound to the shared gateway and cache."""
    return request.app.state.article_queries
