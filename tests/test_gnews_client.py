import httpx
import pytest

from headlines.config import DEFAULT_PLACEHOLDER_IMAGE
from headlines.ingestion import ArticleSource, Category, FetchError, GNewsClient, MalformedResponseError

from conftest import StubApi, make_config


@pytest.mark.asyncio
@pytest.mark.parametrize("category", list(Category))
async def test_one_request_per_category_lower_cased(category, client, stub_api):
    await client.fetch(category)

    assert len(stub_api.requests) == 1
    request = stub_api.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/api/v4/top-headlines"
    assert stub_api.params() == {
        "category": category.value.lower(),
        "apikey": "test-key",
        "country": "in",
    }


@pytest.mark.asyncio
async def test_unselected_category_omits_parameter(client, stub_api):
    await client.fetch(None)

    assert "category" not in stub_api.params()
    assert stub_api.params()["country"] == "in"


@pytest.mark.asyncio
async def test_defaults_applied_to_sparse_items(client, stub_api):
    stub_api.payload = {
        "articles": [
            {"title": "A", "url": "u"},
            {"title": None, "image": None, "source": {"name": None, "url": "https://src"}},
            {"title": "C", "image": "https://img/c.png", "source": {"name": "Wire"}},
        ]
    }

    result = await client.fetch(Category.SCIENCE)

    assert result.success
    first, second, third = result.articles
    assert first.image == DEFAULT_PLACEHOLDER_IMAGE
    assert first.source.name == "Unknown"
    assert first.source.url == "#"
    assert second.title == ""
    assert second.image == DEFAULT_PLACEHOLDER_IMAGE
    assert second.source.name == "Unknown"
    assert second.source.url == "https://src"
    assert third.image == "https://img/c.png"
    assert third.source.name == "Wire"
    assert third.source.url == "#"


@pytest.mark.asyncio
@pytest.mark.parametrize("size", [0, 1, 5])
async def test_ids_follow_upstream_order(size, client, stub_api):
    stub_api.payload = {"articles": [{"title": f"t{i}"} for i in range(size)]}

    result = await client.fetch(Category.GENERAL)

    assert result.success
    assert result.article_count == size
    assert [a.id for a in result.articles] == list(range(size))
    assert [a.title for a in result.articles] == [f"t{i}" for i in range(size)]


@pytest.mark.asyncio
async def test_published_at_kept_verbatim(client, stub_api):
    stub_api.payload = {"articles": [{"title": "A", "publishedAt": "2025-03-01T10:20:30Z"}]}

    result = await client.fetch(Category.BUSINESS)

    assert result.articles[0].published_at == "2025-03-01T10:20:30Z"


@pytest.mark.asyncio
async def test_server_error_collapses_to_empty_result():
    stub = StubApi(payload={"errors": ["boom"]}, status_code=500)
    client = GNewsClient(make_config(), transport=stub.transport)

    result = await client.fetch(Category.HEALTH)

    assert not result.success
    assert result.articles == []
    assert result.status_code == 500
    assert "500" in result.error
    assert len(stub.requests) == 1


@pytest.mark.asyncio
async def test_fetch_articles_raises_with_status_code():
    stub = StubApi(status_code=403)
    client = GNewsClient(make_config(), transport=stub.transport)

    with pytest.raises(FetchError) as exc_info:
        await client.fetch_articles(Category.SPORTS)

    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "stub",
    [
        StubApi(content=b"<html>not json</html>"),
        StubApi(payload={"totalArticles": 3}),
        StubApi(payload=["not", "an", "object"]),
        StubApi(payload={"articles": ["oops"]}),
    ],
)
async def test_malformed_body(stub):
    client = GNewsClient(make_config(), transport=stub.transport)

    with pytest.raises(MalformedResponseError):
        await client.fetch_articles(Category.GENERAL)

    result = await client.fetch(Category.GENERAL)
    assert not result.success
    assert result.articles == []


@pytest.mark.asyncio
async def test_wrongly_typed_fields_are_coerced(client, stub_api):
    stub_api.payload = {
        "articles": [
            {"title": 7, "image": 123, "source": {"name": 42, "url": ["x"]}},
            {"title": "B", "image": 0, "source": {"name": "", "url": None}},
        ]
    }

    result = await client.fetch(Category.GENERAL)

    assert result.success
    first, second = result.articles
    assert first.title == "7"
    assert first.image == "123"
    assert first.source.name == "42"
    assert first.source.url == "['x']"
    assert second.image == "0"
    assert second.source.name == "Unknown"
    assert second.source.url == "#"


@pytest.mark.asyncio
async def test_item_validation_error_is_malformed(monkeypatch, client, stub_api):
    def reject(index, raw, placeholder):
        return ArticleSource(name=raw["title"])

    stub_api.payload = {"articles": [{"title": 42}]}
    monkeypatch.setattr("headlines.ingestion.gnews_client.normalize_article", reject)

    with pytest.raises(MalformedResponseError, match="Article 0"):
        await client.fetch_articles(Category.GENERAL)

    result = await client.fetch(Category.GENERAL)
    assert not result.success
    assert result.articles == []


@pytest.mark.asyncio
async def test_transport_error_collapses_to_empty_result():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = GNewsClient(make_config(), transport=httpx.MockTransport(handler))

    result = await client.fetch(Category.SCIENCE)

    assert not result.success
    assert result.articles == []
    assert "connection refused" in result.error


@pytest.mark.asyncio
async def test_api_key_read_from_environment_at_request_time(monkeypatch, stub_api):
    client = GNewsClient(make_config(api_key=None, api_key_env="GNEWS_TEST_KEY"), transport=stub_api.transport)

    monkeypatch.setenv("GNEWS_TEST_KEY", "first")
    await client.fetch(Category.GENERAL)
    monkeypatch.setenv("GNEWS_TEST_KEY", "second")
    await client.fetch(Category.GENERAL)

    assert stub_api.params(0)["apikey"] == "first"
    assert stub_api.params(1)["apikey"] == "second"


def test_fetch_sync(client, stub_api):
    stub_api.payload = {"articles": [{"title": "A"}]}

    result = client.fetch_sync(Category.TECHNOLOGY)

    assert result.success
    assert result.articles[0].title == "A"
