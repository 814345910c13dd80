"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog_reader.domain.entities import Article

CATEGORY_SEPARATOR = ","


def parse_categories(raw: str) -> list[str]:
    """Turn a comma-separated category string into upper-cased labels.

    Pieces are trimmed and upper-cased; empty pieces are dropped and the
    original order is kept.
    """
    labels = (piece.strip().upper() for piece in raw.split(CATEGORY_SEPARATOR))
    return [label for label in labels if label]


class ArticleCreate(BaseModel):
    """Schema for creating a new article. The publication date is attached by the client."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., examples=["Understanding Deferred Tax"])
    category: list[str] = Field(default_factory=list, examples=[["FINANCE", "TAX"]])
    description: str
    cover_image: str = Field(..., alias="coverImage")
    content: str


class ArticleResponse(BaseModel):
    """Article representation returned by the blog API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    category: list[str] = Field(default_factory=list)
    description: str
    cover_image: str = Field(..., alias="coverImage")
    content: str = ""
    date: datetime

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        # Some backends hand out numeric ids; they are opaque to us.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("category", mode="before")
    @classmethod
    def _default_category(cls, value: object) -> object:
        return [] if value is None else value

    def to_entity(self) -> Article:
        return Article(
            id=self.id,
            title=self.title,
            category=list(self.category),
            description=self.description,
            cover_image=self.cover_image,
            content=self.content,
            date=self.date,
        )


class ArticleForm(BaseModel):
    """Raw values of the create form, exactly as typed."""

    title: str = ""
    category: str = ""
    description: str = ""
    cover_image: str = ""
    content: str = ""

    def missing_fields(self) -> list[str]:
        """Names of required fields left blank, in form order."""
        return [name for name, value in self if not value.strip()]

    def to_create(self) -> ArticleCreate:
        return ArticleCreate(
            title=self.title,
            category=parse_categories(self.category),
            description=self.description,
            cover_image=self.cover_image,
            content=self.content,
        )
