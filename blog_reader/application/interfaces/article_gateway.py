"""Abstract gateway interface (port) — defines the contract, not the implementation."""

from abc import ABC, abstractmethod

from blog_reader.application.schemas import ArticleCreate
from blog_reader.domain.entities import Article


class ArticleGateway(ABC):
    """Port for the remote article store — implemented in the infrastructure layer.

    Every method raises ``RequestFailedError`` when the remote call fails.
    """

    @abstractmethod
    async def list_all(self) -> list[Article]:
        """Retrieve all articles in the order the store delivers them."""
        ...

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def create(self, data: ArticleCreate) -> Article:
        """Publish a new article stamped with the current time."""
        ...
