"""Scope of a group permission override."""

from enum import StrEnum


class OverrideScope(StrEnum):
    """Whether an override applies to every instance or to listed ids only."""

    ALL = "all"
    SPECIFIC = "specific"
