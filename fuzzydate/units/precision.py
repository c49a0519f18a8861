"""Precision enumerations for fuzzy dates and fuzzy durations.

This module provides the Precision enum naming the finest specified field
of a FuzzyDate, and the DurationUnit enum naming the finest specified unit
of a FuzzyDuration.
"""

from __future__ import annotations

from enum import Enum


class Precision(Enum):
    """Fields of a FuzzyDate, from coarsest to finest.

    The precision of a FuzzyDate is the finest field that is defined.
    Members are declared in hierarchy order, so ``list(Precision)`` is
    the order in which fields must be filled.

    Examples:
        >>> Precision.DAY.value
        'day'

        >>> Precision.MONTH < Precision.HOUR
        True

        >>> Precision.from_index(0)
        <Precision.YEAR: 'year'>
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    @property
    def index(self) -> int:
        """Return the position of this field in hierarchy order.

        Returns:
            0 for YEAR through 6 for MILLISECOND.
        """
        return _PRECISION_ORDER.index(self)

    @classmethod
    def from_index(cls, index: int) -> Precision:
        """Return the field at the given hierarchy position."""
        return _PRECISION_ORDER[index]

    def __lt__(self, other: object) -> bool:
        """Coarser fields compare lower than finer fields."""
        if not isinstance(other, Precision):
            return NotImplemented
        return self.index < other.index

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Precision):
            return NotImplemented
        return self.index <= other.index

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Precision):
            return NotImplemented
        return self.index > other.index

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Precision):
            return NotImplemented
        return self.index >= other.index


_PRECISION_ORDER: tuple[Precision, ...] = tuple(Precision)


class DurationUnit(Enum):
    """Units of a FuzzyDuration, from coarsest to finest.

    Examples:
        >>> DurationUnit.SECONDS.value
        'seconds'
    """

    YEARS = "years"
    MONTHS = "months"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


__all__ = ["Precision", "DurationUnit"]
