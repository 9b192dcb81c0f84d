"""Headline fetching and normalization."""

from .errors import FetchError, MalformedResponseError
from .gnews_client import GNewsClient, articles_to_json
from .models import (
    UNSELECTED_LABEL,
    Article,
    ArticleSource,
    Category,
    FetchResult,
    category_label,
    normalize_article,
)

__all__ = [
    "GNewsClient",
    "Article",
    "ArticleSource",
    "Category",
    "FetchResult",
    "FetchError",
    "MalformedResponseError",
    "UNSELECTED_LABEL",
    "articles_to_json",
    "category_label",
    "normalize_article",
]
