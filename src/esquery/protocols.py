from typing import Any, Dict, Mapping, Protocol, Union, runtime_checkable


@runtime_checkable
class ClauseProtocol(Protocol):
    """
    Structural protocol for objects that can stand in for a raw clause document.

    A class implicitly satisfies this protocol if it provides a `to_dict()`
    method returning the clause in its final nested form. The
    [`QueryBuilder`][esquery.builder.QueryBuilder] calls `to_dict()` when the
    clause is added, so the builder never stores anything but plain mappings.

    ### Reference Implementations
    The helpers in [`esquery.clauses`][esquery.clauses] (`Match`, `Term`,
    `Range`, ...) are standard examples of this protocol.
    """

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializes the clause into a query-language compatible dictionary.
        """
        ...


ClauseLike = Union[Mapping[str, Any], ClauseProtocol]
"""Anything accepted where a clause document is expected."""
