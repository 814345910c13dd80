"""Application service for article reads and writes, bound to the query cache."""

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from blog_reader.application.interfaces import ArticleGateway
from blog_reader.application.schemas import ArticleCreate
from blog_reader.application.services.query_cache import QueryCache
from blog_reader.domain.entities import Article, Failed, Loading, QueryState, Ready
from blog_reader.domain.exceptions import RequestFailedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

ARTICLES_KEY = ("articles",)
ARTICLE_KEY = "article"


def article_key(article_id: str) -> tuple[str, str]:
    return (ARTICLE_KEY, article_id)


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Snapshot of one query. ``state`` is ``None`` when the query is disabled."""

    state: QueryState | None

    @property
    def enabled(self) -> bool:
        return self.state is not None

    @property
    def is_loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def error(self) -> str | None:
        return self.state.message if isinstance(self.state, Failed) else None

    @property
    def data(self) -> T | None:
        return self.state.value if isinstance(self.state, Ready) else None


class CreateArticleMutation:
    """One create operation with its pending/success/error flags.

    On success the cached article list is invalidated so the next read
    refetches it. Nothing is inserted into the cache optimistically.
    """

    def __init__(self, gateway: ArticleGateway, cache: QueryCache):
        self._gateway = gateway
        self._cache = cache
        self.is_pending = False
        self.is_success = False
        self.is_error = False
        self.data: Article | None = None
        self.error: RequestFailedError | None = None

    async def mutate_async(self, data: ArticleCreate) -> Article:
        self.is_pending = True
        self.is_success = False
        self.is_error = False
        self.error = None
        try:
            article = await self._gateway.create(data)
        except RequestFailedError as exc:
            self.is_error = True
            self.error = exc
            raise
        finally:
            self.is_pending = False

        self.is_success = True
        self.data = article
        self._cache.invalidate(ARTICLES_KEY)
        return article


class ArticleQueries:
    """Orchestrates article queries. Depends on the gateway port and a shared cache (DI)."""

    def __init__(self, gateway: ArticleGateway, cache: QueryCache):
        self._gateway = gateway
        self._cache = cache

    @property
    def cache(self) -> QueryCache:
        return self._cache

    def peek_articles(self) -> QueryResult[list[Article]]:
        """Cached list state; starts the fetch when nothing is cached yet."""
        return QueryResult(self._cache.prefetch(ARTICLES_KEY, self._gateway.list_all))

    async def articles(self) -> QueryResult[list[Article]]:
        return QueryResult(await self._cache.fetch(ARTICLES_KEY, self._gateway.list_all))

    async def article(self, article_id: str | None) -> QueryResult[Article]:
        if not article_id:
            return QueryResult(None)
        state = await self._cache.fetch(
            article_key(article_id), lambda: self._gateway.get_by_id(article_id)
        )
        return QueryResult(state)

    def create_mutation(self) -> CreateArticleMutation:
        return CreateArticleMutation(self._gateway, self._cache)
