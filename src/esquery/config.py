"""
Configuration Module.

This module defines the settings that control how a
[`QueryBuilder`][esquery.builder.QueryBuilder] seeds the top-level options
and how strictly it treats filter slot names.
"""

from dataclasses import dataclass

from .enum import UnknownSlotPolicy

INDEX_KEY = "index"
BODY_KEY = "body"
DEFAULT_INDEX = "*"


@dataclass
class BuilderConfig:
    """
    Configuration settings for [`QueryBuilder`][esquery.builder.QueryBuilder].

    A builder created without an explicit config uses the defaults below,
    which reproduce the plain "accept anything, search everywhere" behavior.
    """

    default_index: str = DEFAULT_INDEX
    """
    Value seeded into the top-level `index` option when the caller does not
    supply one. The default `"*"` targets every index.
    """

    unknown_slot_policy: UnknownSlotPolicy = UnknownSlotPolicy.Allow
    """
    Determines how `filter()` handles a slot name that is not one of
    `must`, `should` or `must_not`.

    * [`UnknownSlotPolicy.Allow`][esquery.enum.UnknownSlotPolicy.Allow] creates
        the slot under `bool` as given.
    * [`UnknownSlotPolicy.Warn`][esquery.enum.UnknownSlotPolicy.Warn] creates
        the slot and logs a warning.
    * [`UnknownSlotPolicy.Reject`][esquery.enum.UnknownSlotPolicy.Reject] raises
        a `ValueError`.
    """
