from .query_cache import QueryCache
from .article_queries import (
    ARTICLES_KEY,
    ArticleQueries,
    CreateArticleMutation,
    QueryResult,
    article_key,
)

__all__ = [
    "QueryCache",
    "ARTICLES_KEY",
    "ArticleQueries",
    "CreateArticleMutation",
    "QueryResult",
    "article_key",
]
