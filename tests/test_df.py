import pytest

pl = pytest.importorskip("polars")

from textcraft.df import transform_column, word_count_column  # noqa: E402
from textcraft.errors import UnknownTransformError  # noqa: E402
from textcraft.text import count_words  # noqa: E402


@pytest.fixture
def titles():
    return pl.DataFrame({"title": ["Café Déjà Vu!", None, "the lord OF the rings"]})


def test_transform_column_by_name(titles):
    result = transform_column(titles, "title", "to_slug", "slug")
    assert result.columns == ["title", "slug"]
    assert result["slug"].to_list() == ["cafe-deja-vu", None, "the-lord-of-the-rings"]


def test_transform_column_overwrites_by_default(titles):
    result = transform_column(titles, "title", "title_smart")
    assert result.columns == ["title"]
    assert result["title"].to_list() == ["Café Déjà Vu!", None, "The Lord of the Rings"]


def test_transform_column_with_callable(titles):
    result = transform_column(titles, "title", lambda s: s[:4], "short")
    assert result["short"].to_list() == ["Café", None, "the "]


def test_transform_column_counting_is_integer(titles):
    result = transform_column(titles, "title", "count_words", "words")
    assert result["words"].dtype == pl.Int64
    assert result["words"].to_list() == [3, None, 5]


def test_transform_column_missing_column(titles):
    assert transform_column(titles, "missing", "to_slug") is titles


def test_transform_column_unknown_transform(titles):
    with pytest.raises(UnknownTransformError):
        transform_column(titles, "title", "shout")


def test_word_count_column(titles):
    result = word_count_column(titles, "title")
    assert result.columns == ["title", "title_words"]
    assert result["title_words"].dtype == pl.Int64
    assert result["title_words"].to_list() == [3, None, 5]


def test_transform_column_counting_function_is_integer(titles):
    result = transform_column(titles, "title", count_words, "words")
    assert result["words"].dtype == pl.Int64
    assert result["words"].to_list() == [3, None, 5]
