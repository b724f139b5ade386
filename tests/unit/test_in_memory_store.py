"""Unit tests for the InMemoryRecordStore."""

import pytest

from article_cms.domain.entities import Article, ArticleStatus, Category
from article_cms.infrastructure.memory import (
    InMemoryRecordStore,
    coerce_id,
    seed_articles,
    seed_categories,
)


@pytest.fixture
def articles() -> InMemoryRecordStore[Article]:
    return InMemoryRecordStore("articles", seed_articles)


def test_store_is_seeded_lazily_and_once():
    calls = []

    def seed():
        calls.append(1)
        return seed_categories()

    store = InMemoryRecordStore("categories", seed)
    assert store.is_initialized is False
    assert calls == []

    store.list_all()
    store.get_by_id(1)
    assert store.is_initialized is True
    assert len(calls) == 1


def test_seed_fixtures(articles):
    rows = articles.list_all()
    assert [a.id for a in rows] == list(range(1, 13))
    assert rows[0].title == "The Future of AI"
    assert rows[0].related_articles == [6, 4]
    assert {c.name: c.article_count for c in seed_categories()} == {
        "Technology": 3,
        "Business": 3,
        "Health": 2,
        "Science": 2,
        "Entertainment": 2,
    }


def test_insert_assigns_max_plus_one(articles):
    stored = articles.insert(Article(title="X"))
    assert stored.id == 13
    assert articles.list_all()[-1].id == 13


def test_insert_ignores_caller_supplied_id(articles):
    stored = articles.insert(Article(title="X", id=3))
    assert stored.id == 13
    assert articles.get_by_id(3).title == "Mental Health in the Digital Age"


def test_insert_into_empty_store_starts_at_one():
    store = InMemoryRecordStore("categories", lambda: [])
    assert store.insert(Category(name="First")).id == 1
    assert store.insert(Category(name="Second")).id == 2


def test_insert_after_removing_highest_reuses_id(articles):
    articles.remove(12)
    assert articles.insert(Article(title="X")).id == 12


def test_get_by_id_coerces_numeric_strings(articles):
    assert articles.get_by_id("4").title == "Quantum Computing Breakthroughs"
    assert articles.get_by_id(" 4 ").id == 4


@pytest.mark.parametrize("missing", [0, 99, "99", "abc", None])
def test_get_by_id_missing_returns_none(articles, missing):
    assert articles.get_by_id(missing) is None


def test_replace_overwrites_in_place(articles):
    echoed = articles.replace("2", Article(title="Rewritten", status=ArticleStatus.DRAFT))

    assert echoed.id == 2
    rows = articles.list_all()
    assert rows[1].id == 2
    assert rows[1].title == "Rewritten"
    # Full replace: fields not supplied are gone.
    assert rows[1].author is None
    assert len(rows) == 12


def test_replace_missing_id_echoes_without_storing(articles):
    before = articles.list_all()

    echoed = articles.replace(99, Article(title="Ghost"))

    assert echoed.id == 99
    assert echoed.title == "Ghost"
    assert articles.get_by_id(99) is None
    assert articles.list_all() == before


def test_replace_with_non_numeric_id_echoes_without_id(articles):
    before = articles.list_all()

    echoed = articles.replace("abc", Article(title="X"))

    assert echoed.id is None
    assert echoed.title == "X"
    assert articles.list_all() == before


def test_remove_is_idempotent(articles):
    first = articles.remove(5)
    second = articles.remove(5)

    assert first.success is True
    assert second.success is True
    assert second.id == 5
    ids = [a.id for a in articles.list_all()]
    assert 5 not in ids
    assert len(ids) == 11


def test_remove_missing_id_reports_success(articles):
    ack = articles.remove("nope")
    assert ack.success is True
    assert ack.id == "nope"
    assert len(articles.list_all()) == 12


def test_records_handed_out_are_copies(articles):
    listed = articles.list_all()
    listed[0].title = "Mutated outside the store"
    listed[0].related_articles.append(999)

    fetched = articles.get_by_id(1)
    assert fetched.title == "The Future of AI"
    assert fetched.related_articles == [6, 4]


def test_separate_stores_do_not_share_state():
    first = InMemoryRecordStore("articles", seed_articles)
    second = InMemoryRecordStore("articles", seed_articles)
    first.remove(1)
    assert second.get_by_id(1) is not None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (7, 7),
        ("7", 7),
        (" 7 ", 7),
        ("7.0", 7),
        (7.0, 7),
        (7.5, None),
        ("7.5", None),
        ("seven", None),
        (True, None),
        (None, None),
    ],
)
def test_coerce_id(raw, expected):
    assert coerce_id(raw) == expected
