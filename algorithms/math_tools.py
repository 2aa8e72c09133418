import math
from typing import Iterable

import numpy as np


class MathTools:
    """Provides essential mathematical utilities for lift calculations."""

    @staticmethod
    def round_half_up(value: float) -> int:
        """Round ``value`` to the nearest integer with halves rounded up."""
        return int(math.floor(value + 0.5))

    @staticmethod
    def clamp(value: float, min_value: float, max_value: float) -> float:
        """Clamp ``value`` to the inclusive range [min_value, max_value]."""
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value")
        return max(min_value, min(value, max_value))

    @staticmethod
    def round_to_increment(value: float, increment: float) -> float:
        """Round ``value`` to the nearest multiple of ``increment``."""
        if increment <= 0:
            return value
        steps = MathTools.round_half_up(value / increment)
        result = steps * increment
        return int(result) if float(result).is_integer() else result

    @staticmethod
    def volume(sets: Iterable[tuple[float, int]]) -> float:
        """Compute training volume as the sum of weight times reps."""
        vol = 0.0
        for weight, reps in sets:
            vol += weight * reps
        return vol

    @staticmethod
    def overall_percentile(percentiles: Iterable[float]) -> int:
        """Return the rounded mean of the strictly positive ``percentiles``."""
        values = np.array([p for p in percentiles if p > 0], dtype=float)
        if values.size == 0:
            return 0
        return MathTools.round_half_up(float(np.mean(values)))

    @staticmethod
    def ordinal_suffix(value: int) -> str:
        """Return the English ordinal suffix for ``value`` (``st``, ``nd``...)."""
        if 11 <= value % 100 <= 13:
            return "th"
        return {1: "st", 2: "nd", 3: "rd"}.get(value % 10, "th")
