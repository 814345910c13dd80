"""In-memory stand-in for the external blog API, served through httpx.MockTransport."""

import json

import httpx


def make_article(article_id: str, **overrides) -> dict:
    """JSON representation of an article as the blog API delivers it."""
    article = {
        "id": article_id,
        "title": f"Article {article_id}",
        "category": ["FINANCE", "TAX", "AUDIT"],
        "description": f"Summary of article {article_id}",
        "coverImage": f"https://images.example.com/{article_id}.jpg",
        "content": "First paragraph.\n\nSecond paragraph.",
        "date": "2026-10-01T09:30:00.000Z",
    }
    article.update(overrides)
    return article


class FakeBlogApi:
    """Serves GET /blogs, GET /blogs/{id} and POST /blogs from a list.

    ``fail_with`` forces every response to that status code. ``calls``
    records ``(method, path)`` for each request received.
    """

    def __init__(self, articles: list[dict] | None = None):
        self.articles: list[dict] = list(articles or [])
        self.fail_with: int | None = None
        self.calls: list[tuple[str, str]] = []
        self.created: list[dict] = []

    def count(self, method: str, path: str) -> int:
        return self.calls.count((method, path))

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append((request.method, path))

        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"error": "forced failure"})

        if path == "/blogs" and request.method == "GET":
            return httpx.Response(200, json=self.articles)

        if path == "/blogs" and request.method == "POST":
            body = json.loads(request.content)
            created = {"id": str(len(self.articles) + 1), **body}
            self.articles.append(created)
            self.created.append(body)
            return httpx.Response(201, json=created)

        if path.startswith("/blogs/") and request.method == "GET":
            article_id = path.removeprefix("/blogs/")
            for article in self.articles:
                if str(article["id"]) == article_id:
                    return httpx.Response(200, json=article)
            return httpx.Response(404, json={})

        return httpx.Response(405)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport())
