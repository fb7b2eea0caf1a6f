"""
Typed helpers for the most common clause shapes of the query language.

Raw dictionaries are always accepted by the
[`QueryBuilder`][esquery.builder.QueryBuilder] and passed through untouched;
these models are an opt-in alternative that checks the arguments when the
clause is created and renders the exact same nested structure.

| Helper | Rendered clause |
| --- | --- |
| `Match("tweet", "full text")` | `{"match": {"tweet": "full text"}}` |
| `MatchPhrase("tweet", "full text")` | `{"match_phrase": {"tweet": "full text"}}` |
| `Term("featured", True)` | `{"term": {"featured": True}}` |
| `Terms("tag", ["a", "b"])` | `{"terms": {"tag": ["a", "b"]}}` |
| `Range("created", gte="now-1d/d")` | `{"range": {"created": {"gte": "now-1d/d"}}}` |
| `Exists("user")` | `{"exists": {"field": "user"}}` |
"""

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class _Clause(BaseModel):
    """
    Base class of the clause helpers.

    Subclasses set `__clause_type__` to the top-level key of the clause and
    implement `_clause_body()`; `to_dict()` wraps the two together.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    __clause_type__: ClassVar[str]

    def _clause_body(self) -> Dict[str, Any]:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """
        Converts the clause into its final dictionary format.

        Example:
            `{"term": {"featured": True}}`
        """
        return {self.__clause_type__: self._clause_body()}


class _FieldValueClause(_Clause):
    """Clauses shaped as `{type: {field: value}}`."""

    field: str

    def _value(self) -> Any:
        raise NotImplementedError

    def _clause_body(self) -> Dict[str, Any]:
        return {self.field: self._value()}


class Match(_FieldValueClause):
    """Full-text match of `query` against `field`."""

    __clause_type__ = "match"

    query: Any

    def __init__(self, field: str, query: Any, **kwargs: Any):
        super().__init__(field=field, query=query, **kwargs)

    def _value(self) -> Any:
        return self.query


class MatchPhrase(_FieldValueClause):
    """Full-text match of `query` as an exact phrase."""

    __clause_type__ = "match_phrase"

    query: Any

    def __init__(self, field: str, query: Any, **kwargs: Any):
        super().__init__(field=field, query=query, **kwargs)

    def _value(self) -> Any:
        return self.query


class Term(_FieldValueClause):
    """Exact (non-analyzed) equality on `field`."""

    __clause_type__ = "term"

    value: Any

    def __init__(self, field: str, value: Any, **kwargs: Any):
        super().__init__(field=field, value=value, **kwargs)

    def _value(self) -> Any:
        return self.value


class Terms(_FieldValueClause):
    """Exact equality on `field` against any of `values`."""

    __clause_type__ = "terms"

    values: List[Any]

    def __init__(self, field: str, values: List[Any], **kwargs: Any):
        super().__init__(field=field, values=values, **kwargs)

    def _value(self) -> Any:
        return list(self.values)


class Range(_FieldValueClause):
    """
    Bounded comparison on `field`.

    Only the bounds that are set are rendered, e.g.
    `Range("created", gte="now-1d/d")` gives
    `{"range": {"created": {"gte": "now-1d/d"}}}`.

    Raises:
        pydantic.ValidationError: If no bound is given.
    """

    __clause_type__ = "range"

    gt: Optional[Any] = None
    gte: Optional[Any] = None
    lt: Optional[Any] = None
    lte: Optional[Any] = None

    def __init__(self, field: str, **bounds: Any):
        super().__init__(field=field, **bounds)

    @model_validator(mode="after")
    def _check_bounds(self) -> "Range":
        if all(bound is None for bound in (self.gt, self.gte, self.lt, self.lte)):
            raise ValueError(
                f"Range on '{self.field}' needs at least one of 'gt', 'gte', 'lt', 'lte'"
            )
        return self

    def _value(self) -> Any:
        bounds = {"gt": self.gt, "gte": self.gte, "lt": self.lt, "lte": self.lte}
        return {op: bound for op, bound in bounds.items() if bound is not None}


class Exists(_Clause):
    """Matches documents where `field` holds any non-null value."""

    __clause_type__ = "exists"

    field: str

    def __init__(self, field: str, **kwargs: Any):
        super().__init__(field=field, **kwargs)

    def _clause_body(self) -> Dict[str, Any]:
        return {"field": self.field}
