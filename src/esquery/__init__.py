"""
esquery - fluent builder for Elasticsearch-style search documents.

This module provides the main entry points:

- **QueryBuilder**: Accumulates sort/size options, query clauses, boolean
  filters and aggregations, and materializes them with `to_query()`.
- **Clauses**: Typed helpers (`Match`, `Term`, `Range`, ...) for common clause shapes.
- **Configuration**: `BuilderConfig` and the enums it relies on.

Example:
    >>> from esquery import QueryBuilder
    >>> QueryBuilder({"index": "tweets"}).size(10).to_query()
    {'index': 'tweets', 'body': {'size': 10}}
"""

# --- Builder ---
from .builder import QueryBuilder as QueryBuilder

# --- Clauses ---
from .clauses import (
    Match as Match,
    MatchPhrase as MatchPhrase,
    Term as Term,
    Terms as Terms,
    Range as Range,
    Exists as Exists,
)
from .protocols import ClauseProtocol as ClauseProtocol

# --- Configuration ---
from .config import BuilderConfig as BuilderConfig

# --- Enums ---
from .enum import (
    BoolClause as BoolClause,
    UnknownSlotPolicy as UnknownSlotPolicy,
)

from .logging_config import (
    get_logger as get_logger,
    setup_logging as setup_logging,
)

__all__ = [
    # Builder
    "QueryBuilder",
    # Logging
    "get_logger",
    "setup_logging",
    # Clauses
    "Match",
    "MatchPhrase",
    "Term",
    "Terms",
    "Range",
    "Exists",
    "ClauseProtocol",
    # Configuration
    "BuilderConfig",
    # Enums
    "BoolClause",
    "UnknownSlotPolicy",
]


# --- Set up the top-level logger for the package ---

from logging import NullHandler

_package_logger = get_logger()
_package_logger.addHandler(NullHandler())
