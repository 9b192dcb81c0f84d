"""GNews top-headlines client."""

import asyncio
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..config import Config
from ..utils.logging import get_logger
from .errors import FetchError, MalformedResponseError
from .models import Article, Category, FetchResult, normalize_article

logger = get_logger(__name__)


class GNewsClient:
    """Fetch and normalize top headlines for one category at a time.

    The client holds configuration only. Every call opens its own HTTP
    client, sends exactly one GET and never retries.
    """

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize client."""
        self.config = config
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.config.config.gnews.base_url}/top-headlines"

    def build_params(self, category: Optional[Category]) -> Dict[str, str]:
        """Build query parameters for a request."""
        gnews = self.config.config.gnews
        api_key = self.config.get_api_key()
        if not api_key:
            logger.warning(
                "No GNews API key configured (set %s)", gnews.api_key_env or "gnews.api_key"
            )

        params = {}
        if category is not None:
            params["category"] = category.query_value
        params["apikey"] = api_key or ""
        params["country"] = gnews.country
        return params

    def _parse_articles(self, response: httpx.Response) -> List[Article]:
        """Parse and normalize a listing body."""
        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Response is not valid JSON: {e}", status_code=response.status_code
            )

        if not isinstance(data, dict) or not isinstance(data.get("articles"), list):
            raise MalformedResponseError(
                "Response has no 'articles' list", status_code=response.status_code
            )

        placeholder = self.config.config.ui.placeholder_image
        articles = []
        for index, raw in enumerate(data["articles"]):
            if not isinstance(raw, dict):
                raise MalformedResponseError(
                    f"Article {index} is not an object", status_code=response.status_code
                )
            try:
                articles.append(normalize_article(index, raw, placeholder))
            except ValidationError as e:
                raise MalformedResponseError(
                    f"Article {index} has invalid fields: {e}", status_code=response.status_code
                )
        return articles

    async def fetch_articles(self, category: Optional[Category] = None) -> List[Article]:
        """Fetch headlines, raising on any failure."""
        params = self.build_params(category)
        logger.debug("Requesting %s (category=%s)", self.endpoint, params.get("category"))

        async with httpx.AsyncClient(
            timeout=self.config.config.gnews.timeout,
            transport=self.transport,
        ) as client:
            response = await client.get(self.endpoint, params=params)

        if response.is_error:
            raise FetchError(
                f"HTTP error! Status: {response.status_code}",
                status_code=response.status_code,
            )

        return self._parse_articles(response)

    async def fetch(self, category: Optional[Category] = None) -> FetchResult:
        """Fetch headlines and collapse every failure into an empty result."""
        try:
            articles = await self.fetch_articles(category)
        except FetchError as e:
            logger.warning("Error fetching news: %s", e)
            return FetchResult(
                category=category,
                success=False,
                error=str(e),
                status_code=e.status_code,
            )
        except httpx.HTTPError as e:
            logger.warning("Error fetching news: %s", e)
            return FetchResult(
                category=category,
                success=False,
                error=f"HTTP error: {e}",
            )

        logger.info(
            "Fetched %d articles (category=%s)",
            len(articles),
            category.query_value if category else "-",
        )
        return FetchResult(
            category=category,
            success=True,
            articles=articles,
            article_count=len(articles),
        )

    def fetch_sync(self, category: Optional[Category] = None) -> FetchResult:
        """Synchronous wrapper for fetch."""
        return asyncio.run(self.fetch(category))


def articles_to_json(articles: List[Article]) -> List[Dict[str, Any]]:
    """Dump articles using the upstream field names."""
    return [article.model_dump(by_alias=True) for article in articles]
