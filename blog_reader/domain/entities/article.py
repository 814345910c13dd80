"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime

PARAGRAPH_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class Article:
    """A published blog article as delivered by the blog API.

    Articles are only ever created or read, so instances are immutable.
    """

    id: str
    title: str
    description: str
    cover_image: str
    content: str
    date: datetime
    category: list[str] = field(default_factory=list)

    @property
    def paragraphs(self) -> list[str]:
        """Body split into one block per paragraph."""
        return self.content.split(PARAGRAPH_SEPARATOR)
