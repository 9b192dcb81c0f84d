"""Data models for ingestion."""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..config.models import DEFAULT_PLACEHOLDER_IMAGE

UNSELECTED_LABEL = "Select Category"


class Category(str, Enum):
    """Closed set of headline categories."""

    GENERAL = "General"
    ENTERTAINMENT = "Entertainment"
    SCIENCE = "Science"
    TECHNOLOGY = "Technology"
    SPORTS = "Sports"
    BUSINESS = "Business"
    HEALTH = "Health"

    @property
    def query_value(self) -> str:
        """Value sent upstream."""
        return self.value.lower()

    @classmethod
    def coerce(cls, value: Union["Category", str]) -> "Category":
        """Resolve a category from an enum member or a case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown category {value!r}, expected one of: {choices}")


def category_label(category: Optional[Category]) -> str:
    """Label shown in the selector, including the unselected sentinel."""
    return category.value if category is not None else UNSELECTED_LABEL


class ArticleSource(BaseModel):
    """Publisher of an article."""

    name: str = Field("Unknown", description="Source name")
    url: str = Field("#", description="Source homepage")


class Article(BaseModel):
    """Normalized article, ready for display."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Position in the current result set")
    title: str = Field("", description="Article title")
    description: str = Field("", description="Article description")
    content: str = Field("", description="Article content snippet")
    url: str = Field("", description="Canonical article URL")
    image: str = Field(DEFAULT_PLACEHOLDER_IMAGE, description="Display image URL")
    published_at: Optional[str] = Field(
        None, alias="publishedAt", description="Timestamp as supplied upstream"
    )
    source: ArticleSource = Field(default_factory=ArticleSource)


class FetchResult(BaseModel):
    """Result of one headline fetch."""

    category: Optional[Category] = Field(None, description="Requested category")
    success: bool = Field(..., description="Whether fetch was successful")
    articles: List[Article] = Field(default_factory=list, description="Normalized articles")
    error: Optional[str] = Field(None, description="Error message if failed")
    status_code: Optional[int] = Field(None, description="Upstream HTTP status if any")
    article_count: int = Field(0, description="Number of articles fetched")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def normalize_article(
    index: int,
    raw: Dict[str, Any],
    placeholder_image: str = DEFAULT_PLACEHOLDER_IMAGE,
) -> Article:
    """Map one upstream item onto the Article shape."""
    source = raw.get("source")
    if not isinstance(source, dict):
        source = {}

    published_at = raw.get("publishedAt")

    return Article(
        id=index,
        title=_text(raw.get("title")),
        description=_text(raw.get("description")),
        content=_text(raw.get("content")),
        url=_text(raw.get("url")),
        image=_text(raw.get("image")) or placeholder_image,
        published_at=_text(published_at) if published_at is not None else None,
        source=ArticleSource(
            name=_text(source.get("name")) or "Unknown",
            url=_text(source.get("url")) or "#",
        ),
    )
