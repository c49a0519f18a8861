"""Era enumeration for BCE/CE designation.

This module provides the Era enum for distinguishing between
Before Common Era (BCE) and Common Era (CE) fuzzy dates.
"""

from __future__ import annotations

from enum import Enum


class Era(Enum):
    """Historical era designation.

    Fuzzy dates use astronomical year numbering: year 0 exists, equals
    1 BCE, and is considered BCE. Year -44 is 45 BCE.

    Examples:
        >>> Era.for_year(2024)
        <Era.CE: 'CE'>

        >>> Era.for_year(0).is_before_common_era
        True
    """

    BCE = "BCE"  # Before Common Era
    CE = "CE"  # Common Era

    @classmethod
    def for_year(cls, year: int) -> Era:
        """Return the era of an astronomical year number."""
        return cls.BCE if year <= 0 else cls.CE

    @property
    def is_before_common_era(self) -> bool:
        """Return True if this era is Before Common Era.

        Returns:
            True if this is Era.BCE, False if Era.CE.
        """
        return self == Era.BCE


__all__ = ["Era"]
