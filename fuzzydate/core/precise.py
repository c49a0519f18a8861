"""PreciseDateOptions: one concrete point in time.

This module provides the fully specified counterpart of FuzzyDate, returned
by the padding operations.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, asdict


@dataclass(frozen=True)
class PreciseDateOptions:
    """A fully specified date and time, all seven fields present.

    Attributes:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day of the month (1-31).
        hour: The hour (0-23).
        minute: The minute (0-59).
        second: The second (0-59).
        millisecond: The millisecond (0-999).

    Examples:
        >>> p = PreciseDateOptions(2023, 5, 1, 0, 0, 0, 0)
        >>> p.as_tuple()
        (2023, 5, 1, 0, 0, 0, 0)
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int

    def as_tuple(self) -> tuple[int, int, int, int, int, int, int]:
        """Return the fields as a (year, ..., millisecond) tuple."""
        return astuple(self)

    def as_dict(self) -> dict[str, int]:
        """Return the fields as a dictionary keyed by field name."""
        return asdict(self)


__all__ = ["PreciseDateOptions"]
