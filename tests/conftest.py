"""Shared fixtures for the test suite."""

from typing import Any, Dict, List, Optional

import httpx
import pytest

from headlines.config import Config, ConfigModel
from headlines.ingestion import GNewsClient


class StubApi:
    """Records requests and answers each one with a fixed response."""

    def __init__(self, payload: Any = None, status_code: int = 200, content: Optional[bytes] = None) -> None:
        self.payload = {"articles": []} if payload is None else payload
        self.status_code = status_code
        self.content = content
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def params(self, index: int = -1) -> Dict[str, str]:
        return dict(self.requests[index].url.params)


def make_config(**gnews: Any) -> Config:
    settings = {"api_key": "test-key", "api_key_env": None, "country": "in"}
    settings.update(gnews)
    return Config.from_model(ConfigModel(gnews=settings))


@pytest.fixture
def config() -> Config:
    return make_config()


@pytest.fixture
def stub_api() -> StubApi:
    return StubApi()


@pytest.fixture
def client(config: Config, stub_api: StubApi) -> GNewsClient:
    return GNewsClient(config, transport=stub_api.transport)
