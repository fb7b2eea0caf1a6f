from enum import Enum


class UnknownSlotPolicy(Enum):
    """
    Defines what `QueryBuilder.filter` does with a slot name outside `BoolClause`.
    """

    Allow = "allow"  # Create the slot silently.
    Warn = "warn"  # Create the slot and log a warning.
    Reject = "reject"  # Raise a ValueError, leaving the filter tree untouched.
