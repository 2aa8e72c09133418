from __future__ import annotations

import numpy as np
import structlog

from .strength_standards import DEFAULT_STANDARDS, StandardsTable

logger = structlog.get_logger(__name__)


class PercentileCalculator:
    """Convert a lift into a 0-99 percentile against strength standards.

    The standards table is injected so that callers can rank against other
    populations or custom lift catalogues.
    """

    BAND_SCORES: tuple[float, ...] = (10.0, 25.0, 50.0, 75.0, 90.0)
    NEUTRAL_PERCENTILE: float = 50.0
    MAX_PERCENTILE: float = 99.0
    TOP_SPAN_FACTOR: float = 0.2

    def __init__(self, standards: StandardsTable | None = None) -> None:
        self.standards = standards or DEFAULT_STANDARDS

    def ratio(
        self, lift_weight: float, body_weight: float, age: float | None = None
    ) -> float:
        """Return the age-normalised lift to body weight ratio."""
        return (lift_weight / body_weight) / self.standards.age_factor(age)

    def calculate(
        self,
        lift_weight: float,
        body_weight: float,
        gender: str,
        exercise: str,
        age: float | None = None,
    ) -> float:
        """Return the percentile of ``lift_weight`` for ``exercise``."""
        if body_weight <= 0 or lift_weight <= 0:
            return 0.0
        standard = self.standards.get(exercise, gender)
        if standard is None:
            logger.info("no strength standard", exercise=exercise, gender=gender)
            return self.NEUTRAL_PERCENTILE
        ratio = self.ratio(lift_weight, body_weight, age)
        thresholds = standard.thresholds
        band = int(np.searchsorted(thresholds, ratio, side="left"))
        if band == 0:
            if thresholds[0] <= 0:
                return 0.0
            return max(0.0, (ratio / thresholds[0]) * self.BAND_SCORES[0])
        if band < len(thresholds):
            low, high = thresholds[band - 1], thresholds[band]
            base = self.BAND_SCORES[band - 1]
            span = self.BAND_SCORES[band] - base
            progress = (ratio - low) / (high - low)
            return base + progress * span
        god = standard.god
        top_span = self.MAX_PERCENTILE - self.BAND_SCORES[-1]
        overage = (ratio - god) / (god * self.TOP_SPAN_FACTOR)
        return min(self.MAX_PERCENTILE, self.BAND_SCORES[-1] + overage * top_span)


_DEFAULT_CALCULATOR = PercentileCalculator()


def calculate_strength_percentile(
    lift_weight: float,
    body_weight: float,
    gender: str,
    exercise: str,
    age: float | None = None,
) -> float:
    """Return the percentile of a lift using the built-in standards."""
    return _DEFAULT_CALCULATOR.calculate(lift_weight, body_weight, gender, exercise, age)
