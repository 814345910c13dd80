"""Blog API client — implements the ArticleGateway interface.

Talks to the external blog service over three endpoints using httpx:

    GET  /blogs        list every article
    GET  /blogs/{id}   fetch one article
    POST /blogs        publish a new article

Each call is a single attempt. Any failure (non-2xx status, transport
error, unusable payload) surfaces as ``RequestFailedError``.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from blog_reader.application.interfaces import ArticleGateway
from blog_reader.application.schemas import ArticleCreate, ArticleResponse
from blog_reader.domain.entities import Article
from blog_reader.domain.exceptions import RequestFailedError

logger = logging.getLogger(__name__)

LIST_FAILED = "Failed to fetch blogs"
GET_FAILED = "Failed to fetch blog"
CREATE_FAILED = "Failed to create blog"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BlogApiClient(ArticleGateway):
    """Infrastructure adapter — connects to the blog API.

    An injected ``httpx.AsyncClient`` is used as-is and left open. Without
    one, a pooled client is created on first use and closed by ``aclose()``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3001",
        http_client: httpx.AsyncClient | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._owned_client: httpx.AsyncClient | None = None
        self._clock = clock

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or the lazily created pooled one."""
        if self._http_client is not None:
            return self._http_client
        if self._owned_client is None or self._owned_client.is_closed:
            self._owned_client = httpx.AsyncClient()
        return self._owned_client

    async def aclose(self) -> None:
        """Close the pooled client if this adapter created it."""
        if self._owned_client is not None and not self._owned_client.is_closed:
            await self._owned_client.aclose()
        self._owned_client = None

    async def list_all(self) -> list[Article]:
        payload = await self._request("GET", "/blogs", failure=LIST_FAILED)
        if not isinstance(payload, list):
            logger.warning("GET /blogs returned %s instead of a list", type(payload).__name__)
            raise RequestFailedError(LIST_FAILED)
        return [self._to_article(item, failure=LIST_FAILED) for item in payload]

    async def get_by_id(self, article_id: str) -> Article:
        payload = await self._request(
            "GET", f"/blogs/{quote(article_id, safe='')}", failure=GET_FAILED
        )
        return self._to_article(payload, failure=GET_FAILED)

    async def create(self, data: ArticleCreate) -> Article:
        body = data.model_dump(by_alias=True)
        body["date"] = self._clock().isoformat()
        payload = await self._request("POST", "/blogs", failure=CREATE_FAILED, json=body)
        article = self._to_article(payload, failure=CREATE_FAILED)
        logger.info("Created article %s (%r)", article.id, article.title)
        return article

    async def _request(
        self,
        method: str,
        path: str,
        *,
        failure: str,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Issue one request and return the decoded JSON body."""
        url = f"{self._base_url}{path}"
        client = self._get_client()

        try:
            response = await client.request(method, url, json=json)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise RequestFailedError(failure) from exc

        if not response.is_success:
            logger.warning("%s %s returned HTTP %d", method, path, response.status_code)
            raise RequestFailedError(failure, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("%s %s returned a non-JSON body", method, path)
            raise RequestFailedError(failure, status_code=response.status_code) from exc

    @staticmethod
    def _to_article(item: Any, *, failure: str) -> Article:
        try:
            return ArticleResponse.model_validate(item).to_entity()
        except ValidationError as exc:
            logger.warning("Blog API returned an unreadable article: %s", exc.errors()[:1])
            raise RequestFailedError(failure) from exc
