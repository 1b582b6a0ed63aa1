"""Tests for category extraction and category filtering."""

from __future__ import annotations

from conftest import make_entity

from rankboard.view import ALL, extract_categories, filter_by_category


def test_extract_categories_keeps_first_seen_order() -> None:
    entities = [
        make_entity(1, 10, "osaka"),
        make_entity(2, 20, "tokyo"),
        make_entity(3, 30, "osaka"),
        make_entity(4, 40, "kyoto"),
    ]

    categories = extract_categories(entities)

    assert categories == (ALL, "osaka", "tokyo", "kyoto")
    assert list(categories[1:]) != sorted(categories[1:])


def test_extract_categories_skips_uncategorized_entities() -> None:
    entities = [
        make_entity(1, 10, None),
        make_entity(2, 20, ""),
        make_entity(3, 30, "nagoya"),
        make_entity(4, 40, ALL),
    ]

    assert extract_categories(entities) == (ALL, "nagoya")


def test_extract_categories_of_empty_collection() -> None:
    assert extract_categories([]) == (ALL,)


def test_extract_categories_appends_new_category_at_the_end() -> None:
    before = [make_entity(1, 10, "tokyo"), make_entity(2, 20, "osaka")]
    after = before + [make_entity(3, 99, "akita")]

    assert extract_categories(after) == extract_categories(before) + ("akita",)


def test_filter_all_returns_input_unchanged(twelve_accounts) -> None:
    filtered = filter_by_category(twelve_accounts, ALL)

    assert filtered == tuple(twelve_accounts)
    assert filter_by_category(twelve_accounts, None) == tuple(twelve_accounts)


def test_filter_keeps_every_match_in_source_order() -> None:
    entities = [
        make_entity(1, 10, "osaka"),
        make_entity(2, 50, "tokyo"),
        make_entity(3, 30, "osaka"),
        make_entity(4, 40, None),
        make_entity(5, 20, "osaka"),
    ]

    filtered = filter_by_category(entities, "osaka")

    assert [entity.id for entity in filtered] == [1, 3, 5]
    assert all(entity.category == "osaka" for entity in filtered)


def test_filter_with_unknown_category_is_empty() -> None:
    entities = [make_entity(1, 10, "osaka")]

    assert filter_by_category(entities, "hokkaido") == ()


def test_filter_does_not_mutate_source() -> None:
    entities = [make_entity(1, 10, "osaka"), make_entity(2, 20, "tokyo")]
    original = list(entities)

    filter_by_category(entities, "tokyo")

    assert entities == original
