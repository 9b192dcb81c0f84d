import pytest

from headlines.ingestion import UNSELECTED_LABEL, Category, category_label, normalize_article


def test_category_set_is_closed_and_ordered():
    assert [c.value for c in Category] == [
        "General",
        "Entertainment",
        "Science",
        "Technology",
        "Sports",
        "Business",
        "Health",
    ]


@pytest.mark.parametrize("raw", ["technology", "Technology", " TECHNOLOGY "])
def test_coerce_is_case_insensitive(raw):
    assert Category.coerce(raw) is Category.TECHNOLOGY


def test_coerce_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown category"):
        Category.coerce("weather")


def test_category_label_for_sentinel():
    assert category_label(None) == UNSELECTED_LABEL == "Select Category"
    assert category_label(Category.SPORTS) == "Sports"


def test_normalize_article_custom_placeholder():
    article = normalize_article(3, {"title": "T", "source": "not-a-dict"}, placeholder_image="/p.png")

    assert article.id == 3
    assert article.image == "/p.png"
    assert article.source.name == "Unknown"
    assert article.source.url == "#"
    assert article.description == ""
    assert article.content == ""
    assert article.published_at is None


def test_article_dumps_upstream_field_names():
    article = normalize_article(0, {"title": "T", "publishedAt": "2025-01-01T00:00:00Z"})

    dumped = article.model_dump(by_alias=True)

    assert dumped["publishedAt"] == "2025-01-01T00:00:00Z"
    assert dumped["source"] == {"name": "Unknown", "url": "#"}
