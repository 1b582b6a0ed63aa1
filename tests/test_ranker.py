"""Tests for follower-count ordering."""

from __future__ import annotations

from conftest import make_entity

from rankboard.view import rank_entities


def test_rank_entities_orders_by_metric_descending(twelve_accounts) -> None:
    ranked = rank_entities(twelve_accounts)

    values = [entity.metric_value for entity in ranked]
    assert values == sorted(values, reverse=True)
    assert ranked[0].display_name == "tanaka_misaki"
    assert ranked[-1].display_name == "matsumoto_daisuke"


def test_rank_entities_keeps_input_order_for_ties() -> None:
    entities = [
        make_entity("c", 100),
        make_entity("a", 300),
        make_entity("b", 100),
        make_entity("d", 300),
        make_entity("e", 100),
    ]

    ranked = rank_entities(entities)

    assert [entity.id for entity in ranked] == ["a", "d", "c", "b", "e"]


def test_rank_entities_is_reproducible() -> None:
    entities = [make_entity(i, (i * 7) % 3) for i in range(20)]

    assert rank_entities(entities) == rank_entities(entities)
    assert rank_entities(rank_entities(entities)) == rank_entities(entities)


def test_rank_entities_returns_new_sequence() -> None:
    entities = [make_entity(1, 5), make_entity(2, 50)]

    ranked = rank_entities(entities)

    assert [entity.id for entity in entities] == [1, 2]
    assert [entity.id for entity in ranked] == [2, 1]


def test_rank_entities_of_empty_input() -> None:
    assert rank_entities([]) == ()
