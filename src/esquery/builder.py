"""
This module provides the "Fluent" API for assembling Elasticsearch-style search documents.

A [`QueryBuilder`][esquery.builder.QueryBuilder] accumulates body options
(`sort`, `size`), free-form query clauses, boolean filter clauses and
aggregation clauses through chained calls, and only composes them into the
final nested document when [`to_query()`][esquery.builder.QueryBuilder.to_query]
is called.

Example:
    ```python
    from esquery import QueryBuilder, Match, Range, Term

    document = (
        QueryBuilder({"index": "myindex"})
        .sort("asc")
        .size(25)
        .query(Match("tweet", "full text search"))
        .filter("must", Range("created", gte="now-1d/d"))
        .filter("should", Term("featured", True))
        .filter("should", Term("starred", True))
        .filter("must_not", {"term": {"deleted": False}})
        .to_query()
    )
    ```
"""

import json
from copy import deepcopy
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import BODY_KEY, INDEX_KEY, BuilderConfig
from .enum import BoolClause, UnknownSlotPolicy
from .logging_config import get_logger
from .protocols import ClauseLike, ClauseProtocol

# Set the hierarchical logger
logger = get_logger(__name__)

_BOOL_KEY = "bool"
_KNOWN_SLOTS = frozenset(slot.value for slot in BoolClause)
_JSON_KEY_TYPES = (str, int, float, bool, type(None))


def _as_document(clause: ClauseLike) -> Any:
    """
    Returns the plain clause document for `clause`.

    Objects implementing `ClauseProtocol` are rendered via `to_dict()`;
    everything else is returned as-is, without inspection.
    """
    if isinstance(clause, ClauseProtocol):
        return clause.to_dict()
    return clause


def _json_safe(value: Any) -> Any:
    """Recursively renders mapping keys that JSON cannot encode through `repr()`."""
    if isinstance(value, Mapping):
        return {
            key if isinstance(key, _JSON_KEY_TYPES) else repr(key): _json_safe(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def _merge(documents: List[Any]) -> Dict[str, Any]:
    """Shallow union of `documents`; on shared top-level keys the later one wins."""
    merged: Dict[str, Any] = {}
    for doc in documents:
        merged.update(doc)
    return merged


class QueryBuilder:
    """
    Incrementally assembles a search document through a fluent interface.

    The builder holds five pieces of state:

    * the top-level **options** (e.g. the target `index`), fixed at construction;
    * the **body options**, one single-key mapping per `sort()`/`size()` call;
    * the **query clauses** added with `query()`;
    * the **filter tree**, `{}` until the first `filter()` call and
      `{"bool": {slot: [...]}}` afterwards;
    * the **aggregation clauses** added with `aggregation()`.

    Every mutator returns the builder itself, so calls can be chained in any
    order. [`to_query()`][esquery.builder.QueryBuilder.to_query] can be called
    any number of times; it never alters the accumulated state.
    """

    def __init__(
        self,
        options: Optional[Mapping[str, Any]] = None,
        *,
        config: Optional[BuilderConfig] = None,
    ):
        """
        Initializes an empty builder.

        Args:
            options: Top-level options of the final document. Every key is
                passed through verbatim; `index` defaults to
                `config.default_index` (`"*"`) when missing. The mapping is
                copied, never modified.
            config: Builder settings. Defaults to `BuilderConfig()`.
        """
        self._config = config or BuilderConfig()

        # Index-level properties
        self._opts: Dict[str, Any] = dict(options or {})
        self._opts.setdefault(INDEX_KEY, self._config.default_index)

        # Body-level properties
        self._body_opts: List[Dict[str, Any]] = []

        # Query-level properties
        self._queries: List[Any] = []
        self._filters: Dict[str, Any] = {}
        self._aggs: List[Any] = []

    @property
    def options(self) -> Dict[str, Any]:
        """A copy of the top-level options, without the assembled `body`."""
        return dict(self._opts)

    @property
    def filter_tree(self) -> Dict[str, Any]:
        """A copy of the current filter tree: `{}` or `{"bool": {slot: [...]}}`."""
        if not self._filters:
            return {}
        return deepcopy(self._filters)

    # --- Mutators --

    def sort(self, value: Any) -> "QueryBuilder":
        """
        Adds a sort option to the body.

        Args:
            value: Typically `'asc'` or `'desc'`, or any sort specification
                of the query language.

        Returns:
            The `QueryBuilder` instance for method chaining.
        """
        self._body_opts.append({"sort": value})
        return self

    def size(self, value: Any) -> "QueryBuilder":
        """
        Adds a size option (maximum number of hits) to the body.

        Returns:
            The `QueryBuilder` instance for method chaining.
        """
        self._body_opts.append({"size": value})
        return self

    def query(self, clause: ClauseLike) -> "QueryBuilder":
        """
        Adds a fully formed query clause.

        All query clauses are merged into a single mapping at assembly time;
        clauses sharing a top-level key (e.g. two `match` clauses) overwrite
        each other, the last one winning.

        Args:
            clause: A raw clause mapping, e.g. `{"match": {"tweet": "search"}}`,
                or any object implementing `ClauseProtocol`.

        Returns:
            The `QueryBuilder` instance for method chaining.
        """
        self._queries.append(_as_document(clause))
        return self

    def filter(self, slot: Union[BoolClause, str], clause: ClauseLike) -> "QueryBuilder":
        """
        Adds a filter clause to a slot of the boolean filter tree.

        Filters are always expressed through a `bool` container, which covers
        the most general case. Clauses are appended to their slot in call
        order; a slot never overwrites earlier clauses.

        Example:
            ```python
            builder.filter("must", {"term": {"user": "kimchy"}})
            builder.filter(BoolClause.SHOULD, Term("featured", True))
            # filter tree:
            # {"bool": {"must": [{"term": {"user": "kimchy"}}],
            #           "should": [{"term": {"featured": True}}]}}
            ```

        Args:
            slot: `'must'`, `'should'`, `'must_not'` or the matching
                `BoolClause` member. Other names are handled according to
                `BuilderConfig.unknown_slot_policy`.
            clause: A raw clause mapping or any object implementing
                `ClauseProtocol`.

        Returns:
            The `QueryBuilder` instance for method chaining.

        Raises:
            ValueError: If `slot` is unknown and the policy is
                `UnknownSlotPolicy.Reject`.
        """
        slot_name = slot.value if isinstance(slot, BoolClause) else slot
        if slot_name not in _KNOWN_SLOTS:
            policy = self._config.unknown_slot_policy
            if policy == UnknownSlotPolicy.Reject:
                raise ValueError(
                    f"Unknown filter slot '{slot_name}': expected one of {sorted(_KNOWN_SLOTS)}."
                )
            if policy == UnknownSlotPolicy.Warn:
                logger.warning(
                    f"Unknown filter slot '{slot_name}' added to the bool filter."
                )

        if not self._filters:
            logger.debug("Creating bool filter tree.")
            self._filters = {_BOOL_KEY: {}}
        self._filters[_BOOL_KEY].setdefault(slot_name, []).append(_as_document(clause))
        return self

    def aggregation(self, clause: ClauseLike) -> "QueryBuilder":
        """
        Adds an aggregation clause, e.g. `{"by_user": {"terms": {"field": "user"}}}`.

        Aggregation clauses are merged like query clauses (shallow, last wins)
        and rendered under `filtered.aggs`.

        Returns:
            The `QueryBuilder` instance for method chaining.
        """
        self._aggs.append(_as_document(clause))
        return self

    # --- Assembly --

    def _query_body(self) -> Dict[str, Any]:
        """
        Composes the query body from query clauses, filters and aggregations.

        Returns `{}` when all three are empty, so that an untouched builder
        does not emit a `query` key at all.
        """
        queries = _merge(self._queries)
        aggs = _merge(self._aggs)
        filters = self.filter_tree

        if not queries and not filters and not aggs:
            return {}

        return {
            "filtered": {
                "query": queries,
                "filter": filters,
                "aggs": aggs,
            }
        }

    def _body(self) -> Dict[str, Any]:
        """Returns the body: the query body (if any) plus the flattened body options."""
        query_body = self._query_body()
        body: Dict[str, Any] = {"query": query_body} if query_body else {}

        for opt in self._body_opts:
            body.update(opt)
        return body

    def to_query(self) -> Dict[str, Any]:
        """
        Materializes the accumulated state into the final search document.

        Example Output:
            ```python
            {
                "index": "myindex",
                "body": {
                    "sort": "asc",
                    "size": 25,
                    "query": {
                        "filtered": {
                            "query": {"match": {"tweet": "full text search"}},
                            "filter": {"bool": {"must": [...], "should": [...]}},
                            "aggs": {},
                        }
                    },
                },
            }
            ```

        Returns:
            A new, fully independent dictionary holding the top-level options
            and the `body` key.
            A builder without any mutator call yields an empty `body`.
        """
        document = dict(self._opts)
        document[BODY_KEY] = self._body()
        return deepcopy(document)

    def to_string(self, indent: Optional[int] = 2) -> str:
        """
        Renders the assembled document as JSON text, for display purposes.

        Values and mapping keys that JSON cannot encode are rendered through
        `repr()` rather than raising.
        """
        return json.dumps(_json_safe(self.to_query()), indent=indent, default=repr)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        slots = list(self._filters.get(_BOOL_KEY, {}))
        return (
            f"QueryBuilder(index={self._opts[INDEX_KEY]!r}, "
            f"body_opts={len(self._body_opts)}, queries={len(self._queries)}, "
            f"filter_slots={slots}, aggs={len(self._aggs)})"
        )
