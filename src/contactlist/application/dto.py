"""Result types for input validation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Valid:
    """Input accepted; value is trimmed."""

    value: str


@dataclass(frozen=True)
class Invalid:
    """Input rejected (e.g. empty required field, unknown menu choice)."""

    reason: str
