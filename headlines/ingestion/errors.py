"""Errors raised while fetching headlines."""

from typing import Optional


class FetchError(Exception):
    """Upstream request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(FetchError):
    """Upstream body could not be read as a headline listing."""
