from enum import StrEnum


class BoolClause(StrEnum):
    """
    Occurrence types of a boolean filter, i.e. the named slots of the filter tree.

    Members compare equal to their plain string value, so
    `builder.filter(BoolClause.MUST, ...)` and `builder.filter("must", ...)`
    land in the same slot.
    """

    MUST = "must"
    """Clauses that every matching document has to satisfy."""

    SHOULD = "should"
    """Clauses of which a matching document should satisfy at least one."""

    MUST_NOT = "must_not"
    """Clauses that no matching document may satisfy."""
