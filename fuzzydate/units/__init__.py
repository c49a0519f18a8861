"""Fuzzy date units and enumerations.

This module provides:
    - Precision: Fields of a FuzzyDate (YEAR through MILLISECOND)
    - DurationUnit: Units of a FuzzyDuration (YEARS through MILLISECONDS)
    - Era: BCE/CE era designation enum
"""

from __future__ import annotations

from fuzzydate.units.era import Era
from fuzzydate.units.precision import DurationUnit, Precision

__all__: list[str] = [
    "DurationUnit",
    "Era",
    "Precision",
]
