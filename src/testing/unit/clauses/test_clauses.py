import pydantic
import pytest

from esquery import (
    ClauseProtocol,
    Exists,
    Match,
    MatchPhrase,
    QueryBuilder,
    Range,
    Term,
    Terms,
)


def test_clause_rendering():
    assert Match("tweet", "full text search").to_dict() == {
        "match": {"tweet": "full text search"}
    }
    assert MatchPhrase("tweet", "full text").to_dict() == {
        "match_phrase": {"tweet": "full text"}
    }
    assert Term("featured", True).to_dict() == {"term": {"featured": True}}
    assert Terms("tag", ["a", "b"]).to_dict() == {"terms": {"tag": ["a", "b"]}}
    assert Exists("user").to_dict() == {"exists": {"field": "user"}}


def test_range_renders_only_given_bounds():
    assert Range("created", gte="now-1d/d").to_dict() == {
        "range": {"created": {"gte": "now-1d/d"}}
    }
    assert Range("likes", gt=10, lte=100).to_dict() == {
        "range": {"likes": {"gt": 10, "lte": 100}}
    }


def test_range_without_bounds():
    with pytest.raises(pydantic.ValidationError, match="needs at least one of"):
        Range("created")


def test_unknown_argument_rejected():
    with pytest.raises(pydantic.ValidationError):
        Range("created", gte=1, from_=0)


def test_clauses_are_frozen():
    clause = Term("featured", True)
    with pytest.raises(pydantic.ValidationError):
        clause.value = False


def test_protocol_conformance():
    assert isinstance(Term("a", 1), ClauseProtocol)
    assert not isinstance({"term": {"a": 1}}, ClauseProtocol)


def test_helpers_match_raw_documents():
    """Test that typed helpers and raw mappings build identical documents."""
    typed = (
        QueryBuilder({"index": "myindex"})
        .query(Match("tweet", "full text search"))
        .filter("must", Range("created", gte="now-1d/d"))
        .filter("should", Term("featured", True))
        .filter("must_not", Term("deleted", False))
        .to_query()
    )
    raw = (
        QueryBuilder({"index": "myindex"})
        .query({"match": {"tweet": "full text search"}})
        .filter("must", {"range": {"created": {"gte": "now-1d/d"}}})
        .filter("should", {"term": {"featured": True}})
        .filter("must_not", {"term": {"deleted": False}})
        .to_query()
    )
    assert typed == raw


def test_custom_clause_object():
    class GeoDistance:
        def __init__(self, field, lat, lon, distance):
            self.field = field
            self.lat = lat
            self.lon = lon
            self.distance = distance

        def to_dict(self):
            return {
                "geo_distance": {
                    "distance": self.distance,
                    self.field: {"lat": self.lat, "lon": self.lon},
                }
            }

    result = (
        QueryBuilder().filter("must", GeoDistance("pin", 40.0, -70.0, "12km")).to_query()
    )
    assert result["body"]["query"]["filtered"]["filter"]["bool"]["must"] == [
        {"geo_distance": {"distance": "12km", "pin": {"lat": 40.0, "lon": -70.0}}}
    ]
