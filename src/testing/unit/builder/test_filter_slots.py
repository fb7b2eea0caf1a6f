import logging

import pytest

from esquery import BoolClause, BuilderConfig, QueryBuilder, UnknownSlotPolicy


def test_bool_clause_slots():
    """Test that enum members and plain strings land in the same slot."""
    builder = (
        QueryBuilder()
        .filter(BoolClause.MUST, {"term": {"a": 1}})
        .filter("must", {"term": {"b": 2}})
        .filter(BoolClause.MUST_NOT, {"term": {"c": 3}})
    )
    tree = builder.filter_tree
    assert tree == {
        "bool": {
            "must": [{"term": {"a": 1}}, {"term": {"b": 2}}],
            "must_not": [{"term": {"c": 3}}],
        }
    }
    # Keys are stored as plain strings
    assert all(type(slot) is str for slot in tree["bool"])


def test_slot_insertion_order():
    builder = (
        QueryBuilder()
        .filter("must", {"x": 1})
        .filter("should", {"y": 1})
        .filter("should", {"z": 1})
        .filter("must_not", {"w": 1})
    )
    assert list(builder.filter_tree["bool"]) == ["must", "should", "must_not"]
    assert builder.filter_tree["bool"]["should"] == [{"y": 1}, {"z": 1}]


def test_unknown_slot_allowed_by_default(caplog):
    with caplog.at_level(logging.WARNING, logger="esquery"):
        result = QueryBuilder().filter("filter", {"term": {"a": 1}}).to_query()

    assert result["body"]["query"]["filtered"]["filter"] == {
        "bool": {"filter": [{"term": {"a": 1}}]}
    }
    assert "Unknown filter slot" not in caplog.text


def test_unknown_slot_warn(caplog):
    config = BuilderConfig(unknown_slot_policy=UnknownSlotPolicy.Warn)
    builder = QueryBuilder(config=config)

    with caplog.at_level(logging.WARNING, logger="esquery"):
        builder.filter("minimum_should_match", 1)

    assert "Unknown filter slot 'minimum_should_match'" in caplog.text
    assert builder.filter_tree == {"bool": {"minimum_should_match": [1]}}


def test_unknown_slot_reject():
    config = BuilderConfig(unknown_slot_policy=UnknownSlotPolicy.Reject)
    builder = QueryBuilder(config=config).filter("must", {"term": {"a": 1}})

    with pytest.raises(ValueError, match="Unknown filter slot 'mustnot'"):
        builder.filter("mustnot", {"term": {"b": 2}})

    # The filter tree is left as it was
    assert builder.filter_tree == {"bool": {"must": [{"term": {"a": 1}}]}}


def test_reject_policy_accepts_known_slots():
    config = BuilderConfig(unknown_slot_policy=UnknownSlotPolicy.Reject)
    builder = QueryBuilder(config=config)
    for slot in BoolClause:
        builder.filter(slot, {"term": {slot.value: True}})
    assert set(builder.filter_tree["bool"]) == {"must", "should", "must_not"}


def test_default_index_from_config():
    result = QueryBuilder(config=BuilderConfig(default_index="logs-*")).to_query()
    assert result == {"index": "logs-*", "body": {}}

    # An explicit index always wins over the configured default
    result = QueryBuilder(
        {"index": "tweets"}, config=BuilderConfig(default_index="logs-*")
    ).to_query()
    assert result["index"] == "tweets"
