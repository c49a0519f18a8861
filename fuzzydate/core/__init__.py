"""Core fuzzy value types.

This module provides the fundamental types:
    - FuzzyDate: Date and time known down to some precision
    - FuzzyDuration: Duration in years through milliseconds with a precision
    - PreciseDateOptions: Fully specified instant returned by padding
"""

from __future__ import annotations

from fuzzydate.core.fuzzy_date import FuzzyDate, FuzzyDateOptions
from fuzzydate.core.fuzzy_duration import FuzzyDuration, FuzzyDurationOptions
from fuzzydate.core.precise import PreciseDateOptions

__all__: list[str] = [
    "FuzzyDate",
    "FuzzyDateOptions",
    "FuzzyDuration",
    "FuzzyDurationOptions",
    "PreciseDateOptions",
]
