"""Body-weight-ratio strength standards and the lift catalogue they cover.

Ratios come from drug-tested, unequipped powerlifting competition data
(van den Hoek et al. 2024) for the main barbell lifts and from estimates
for the accessory lifts. Each standard lists the ratio reached at the
10th, 25th, 50th, 75th and 90th percentile.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class StrengthStandard:
    """Ascending body-weight ratios for one lift."""

    beginner: float
    intermediate: float
    advanced: float
    elite: float
    god: float

    def __post_init__(self) -> None:
        values = self.thresholds
        if values[0] < 0:
            raise ValueError("strength standard ratios must be non-negative")
        if any(lo >= hi for lo, hi in zip(values, values[1:])):
            raise ValueError(f"strength standard ratios must be strictly increasing: {values}")

    @property
    def thresholds(self) -> tuple[float, float, float, float, float]:
        return (self.beginner, self.intermediate, self.advanced, self.elite, self.god)


MAIN_LIFTS: tuple[str, ...] = (
    "squat-barbell",
    "bench-press-barbell",
    "deadlift-barbell",
    "overhead-press-barbell",
)

FEATURED_SECONDARY_LIFTS: tuple[str, ...] = (
    "bench-press-dumbbells",
    "bicep-curl-dumbbells",
    "bicep-curl-barbell",
    "leg-press-machine",
    "row-barbell",
    "incline-bench-press-barbell",
    "lat-pulldown-cables",
    "leg-extension-machine",
    "romanian-deadlift-barbell",
    "incline-bench-press-dumbbells",
    "shoulder-press-dumbbells",
    "front-squat-barbell",
    "hip-thrust-barbell",
    "lateral-raise-dumbbells",
    "row-cables",
    "hack-squat-machine",
    "preacher-curl-dumbbells",
    "overhead-press-machine",
    "tricep-pushdown-cables",
    "hammer-curl-dumbbells",
    "bicep-curl-cables",
    "tricep-extension-dumbbells",
    "skull-crushers-dumbbells",
    "overhead-tricep-extension-cables",
    "rear-delt-fly-dumbbells",
    "rear-delt-fly-cables",
    "arnold-press-dumbbells",
    "lateral-raise-cables",
)

FEATURED_LIFTS: tuple[str, ...] = MAIN_LIFTS + FEATURED_SECONDARY_LIFTS

# short ids used by older profiles
LIFT_ALIASES: dict[str, str] = {
    "squat": "squat-barbell",
    "bench-press": "bench-press-barbell",
    "deadlift": "deadlift-barbell",
    "overhead-press": "overhead-press-barbell",
}


def canonical_lift_id(lift_id: str) -> str:
    return LIFT_ALIASES.get(lift_id, lift_id)


def is_main_lift(lift_id: str) -> bool:
    return canonical_lift_id(lift_id) in MAIN_LIFTS


def is_featured_lift(lift_id: str) -> bool:
    return canonical_lift_id(lift_id) in FEATURED_LIFTS


MALE_STANDARDS: dict[str, StrengthStandard] = {
    "squat-barbell": StrengthStandard(0.75, 1.25, 1.5, 2.2, 2.8),
    "bench-press-barbell": StrengthStandard(0.671, 0.75, 1.201, 1.532, 2.169),
    "deadlift-barbell": StrengthStandard(1.069, 1.415, 1.832, 2.504, 3.227),
    "overhead-press-barbell": StrengthStandard(0.414, 0.580, 0.783, 1.018, 1.463),
    "bench-press-dumbbells": StrengthStandard(0.225, 0.348, 0.507, 0.695, 0.904),
    "bicep-curl-dumbbells": StrengthStandard(0.091, 0.175, 0.292, 0.439, 0.699),
    "bicep-curl-barbell": StrengthStandard(0.108, 0.213, 0.362, 0.550, 0.884),
    "leg-press-machine": StrengthStandard(1.0, 1.75, 2.75, 4.0, 5.25),
    "row-barbell": StrengthStandard(0.5, 0.75, 1.0, 1.50, 1.75),
    "incline-bench-press-barbell": StrengthStandard(0.5, 0.75, 1.0, 1.50, 1.75),
    "lat-pulldown-cables": StrengthStandard(0.5, 0.75, 1.0, 1.50, 1.75),
    "leg-extension-machine": StrengthStandard(0.5, 0.75, 1.25, 1.75, 2.50),
    "romanian-deadlift-barbell": StrengthStandard(0.75, 1.00, 1.50, 2.00, 2.75),
    "incline-bench-press-dumbbells": StrengthStandard(0.25, 0.35, 0.50, 0.65, 0.85),
    "shoulder-press-dumbbells": StrengthStandard(0.15, 0.25, 0.40, 0.60, 0.75),
    "front-squat-barbell": StrengthStandard(0.75, 1.0, 1.25, 1.75, 2.25),
    "hip-thrust-barbell": StrengthStandard(0.5, 1.0, 1.75, 2.50, 3.50),
    "lateral-raise-dumbbells": StrengthStandard(0.05, 0.10, 0.20, 0.30, 0.45),
    "row-cables": StrengthStandard(0.50, 0.75, 1.00, 1.50, 2.00),
    "hack-squat-machine": StrengthStandard(0.75, 1.25, 2.00, 2.75, 4.00),
    "preacher-curl-dumbbells": StrengthStandard(0.20, 0.35, 0.60, 0.85, 1.10),
    "overhead-press-machine": StrengthStandard(0.25, 0.5, 1.00, 1.50, 2.00),
    "tricep-pushdown-cables": StrengthStandard(0.25, 0.50, 0.75, 1.00, 1.50),
    "hammer-curl-dumbbells": StrengthStandard(0.10, 0.20, 0.30, 0.45, 0.60),
    "bicep-curl-cables": StrengthStandard(0.15, 0.35, 0.65, 1.05, 1.50),
    "row-dumbbells": StrengthStandard(0.20, 0.35, 0.55, 0.80, 1.05),
    "seated-row-machine": StrengthStandard(0.50, 0.75, 1.00, 1.50, 2.00),
    "leg-curl-machine": StrengthStandard(0.50, 0.75, 1.00, 1.50, 2.00),
    "calf-raise-machine": StrengthStandard(0.50, 1.00, 1.75, 2.75, 4.00),
    "chest-fly-cables": StrengthStandard(0.05, 0.25, 0.50, 0.85, 1.35),
    "flyes-dumbbells": StrengthStandard(0.10, 0.15, 0.30, 0.50, 0.70),
    "sumo-deadlift-barbell": StrengthStandard(1.25, 1.50, 2.25, 2.75, 3.50),
    "bench-press-machine": StrengthStandard(0.50, 0.75, 1.25, 1.75, 2.25),
    "bench-press-smith-machine": StrengthStandard(0.50, 1.00, 1.25, 1.75, 2.25),
    "squat-smith-machine": StrengthStandard(0.75, 1.00, 1.50, 2.25, 3.00),
    "tricep-extension-dumbbells": StrengthStandard(0.15, 0.35, 0.65, 1.00, 1.40),
    "walking-lunge-dumbbells": StrengthStandard(0.10, 0.20, 0.40, 0.60, 0.85),
    "lunges-barbell": StrengthStandard(0.50, 0.75, 1.00, 1.50, 2.00),
    "romanian-deadlift-dumbbells": StrengthStandard(0.15, 0.30, 0.55, 0.80, 1.10),
    "goblet-squat-dumbbells": StrengthStandard(0.20, 0.35, 0.55, 0.85, 1.15),
    "goblet-squat-kettlebell": StrengthStandard(0.20, 0.35, 0.55, 0.85, 1.15),
    "bulgarian-split-squat-dumbbells": StrengthStandard(0.25, 0.50, 0.75, 1.25, 1.75),
    "rear-delt-fly-dumbbells": StrengthStandard(0.05, 0.10, 0.25, 0.40, 0.60),
    "rear-delt-fly-cables": StrengthStandard(0.05, 0.10, 0.25, 0.40, 0.60),
    "arnold-press-dumbbells": StrengthStandard(0.10, 0.20, 0.30, 0.45, 0.65),
    "lateral-raise-cables": StrengthStandard(0.00, 0.10, 0.25, 0.45, 0.75),
    "skull-crushers-dumbbells": StrengthStandard(0.20, 0.35, 0.55, 0.80, 1.10),
    "overhead-tricep-extension-cables": StrengthStandard(0.15, 0.35, 0.65, 1.00, 1.40),
    "crossover-cables": StrengthStandard(0.05, 0.25, 0.50, 0.85, 1.35),
    "chest-fly-machine": StrengthStandard(0.25, 0.50, 0.85, 1.25, 1.75),
    "hip-thrust-machine": StrengthStandard(0.50, 1.00, 1.75, 2.50, 3.50),
}

FEMALE_STANDARDS: dict[str, StrengthStandard] = {
    "squat-barbell": StrengthStandard(0.5, 0.75, 1.25, 1.50, 2.00),
    "bench-press-barbell": StrengthStandard(0.25, 0.5, 0.8, 1.0, 1.50),
    "deadlift-barbell": StrengthStandard(0.594, 0.887, 1.261, 1.698, 2.504),
    "overhead-press-barbell": StrengthStandard(0.204, 0.328, 0.490, 0.686, 1.040),
    "bench-press-dumbbells": StrengthStandard(0.095, 0.183, 0.305, 0.461, 0.641),
    "bicep-curl-dumbbells": StrengthStandard(0.058, 0.116, 0.200, 0.306, 0.494),
    "bicep-curl-barbell": StrengthStandard(0.108, 0.213, 0.362, 0.550, 0.884),
    "leg-press-machine": StrengthStandard(0.5, 1.25, 2.0, 3.25, 4.5),
    "row-barbell": StrengthStandard(0.25, 0.4, 0.65, 0.9, 1.2),
    "incline-bench-press-barbell": StrengthStandard(0.2, 0.4, 0.65, 1.00, 1.40),
    "lat-pulldown-cables": StrengthStandard(0.3, 0.45, 0.70, 0.95, 1.30),
    "leg-extension-machine": StrengthStandard(0.25, 0.50, 1.00, 1.25, 2.00),
    "romanian-deadlift-barbell": StrengthStandard(0.50, 0.75, 1.00, 1.50, 1.75),
    "incline-bench-press-dumbbells": StrengthStandard(0.1, 0.2, 0.30, 0.45, 0.60),
    "shoulder-press-dumbbells": StrengthStandard(0.10, 0.15, 0.25, 0.35, 0.50),
    "front-squat-barbell": StrengthStandard(0.50, 0.75, 1.0, 1.25, 1.50),
    "hip-thrust-barbell": StrengthStandard(0.50, 1.00, 1.5, 2.25, 3.00),
    "lateral-raise-dumbbells": StrengthStandard(0.05, 0.10, 0.15, 0.20, 0.30),
    "row-cables": StrengthStandard(0.30, 0.50, 0.75, 1.00, 1.35),
    "hack-squat-machine": StrengthStandard(0.25, 0.75, 1.50, 2.25, 3.25),
    "preacher-curl-dumbbells": StrengthStandard(0.10, 0.20, 0.40, 0.60, 0.85),
    "overhead-press-machine": StrengthStandard(0.10, 0.25, 0.50, 0.85, 1.20),
    "tricep-pushdown-cables": StrengthStandard(0.15, 0.25, 0.50, 0.75, 1.05),
    "hammer-curl-dumbbells": StrengthStandard(0.05, 0.15, 0.20, 0.30, 0.40),
    "bicep-curl-cables": StrengthStandard(0.10, 0.20, 0.40, 0.70, 1.00),
    "row-dumbbells": StrengthStandard(0.10, 0.20, 0.35, 0.50, 0.65),
    "seated-row-machine": StrengthStandard(0.30, 0.50, 0.75, 1.00, 1.35),
    "leg-curl-machine": StrengthStandard(0.25, 0.45, 0.75, 1.05, 1.45),
    "calf-raise-machine": StrengthStandard(0.25, 0.75, 1.25, 2.25, 3.25),
    "chest-fly-cables": StrengthStandard(0.05, 0.15, 0.30, 0.55, 0.80),
    "flyes-dumbbells": StrengthStandard(0.05, 0.10, 0.20, 0.30, 0.45),
    "sumo-deadlift-barbell": StrengthStandard(0.75, 1.00, 1.50, 2.00, 2.50),
    "bench-press-machine": StrengthStandard(0.15, 0.30, 0.55, 0.90, 1.25),
    "bench-press-smith-machine": StrengthStandard(0.25, 0.50, 0.75, 1.25, 1.50),
    "squat-smith-machine": StrengthStandard(0.25, 0.75, 1.00, 1.50, 2.25),
    "tricep-extension-dumbbells": StrengthStandard(0.05, 0.20, 0.35, 0.60, 0.85),
    "walking-lunge-dumbbells": StrengthStandard(0.10, 0.20, 0.30, 0.45, 0.65),
    "lunges-barbell": StrengthStandard(0.25, 0.50, 0.75, 1.25, 1.50),
    "romanian-deadlift-dumbbells": StrengthStandard(0.15, 0.25, 0.40, 0.60, 0.80),
    "goblet-squat-dumbbells": StrengthStandard(0.15, 0.25, 0.40, 0.60, 0.85),
    "goblet-squat-kettlebell": StrengthStandard(0.15, 0.25, 0.40, 0.60, 0.85),
    "bulgarian-split-squat-dumbbells": StrengthStandard(0.15, 0.30, 0.55, 0.85, 1.25),
    "rear-delt-fly-dumbbells": StrengthStandard(0.05, 0.10, 0.15, 0.25, 0.40),
    "rear-delt-fly-cables": StrengthStandard(0.05, 0.10, 0.15, 0.25, 0.40),
    "arnold-press-dumbbells": StrengthStandard(0.10, 0.15, 0.20, 0.30, 0.35),
    "lateral-raise-cables": StrengthStandard(0.05, 0.10, 0.15, 0.25, 0.35),
    "skull-crushers-dumbbells": StrengthStandard(0.10, 0.20, 0.35, 0.55, 0.75),
    "overhead-tricep-extension-cables": StrengthStandard(0.05, 0.20, 0.35, 0.60, 0.85),
    "crossover-cables": StrengthStandard(0.05, 0.15, 0.30, 0.55, 0.80),
    "chest-fly-machine": StrengthStandard(0.10, 0.25, 0.50, 0.80, 1.15),
    "hip-thrust-machine": StrengthStandard(0.50, 1.00, 1.50, 2.25, 3.00),
}

AGE_ADJUSTMENT_FACTORS: dict[str, float] = {
    "18-25": 1.0,
    "26-35": 1.0,
    "36-45": 0.95,
    "46-55": 0.90,
    "56-65": 0.85,
    "65+": 0.80,
}

# (upper bound inclusive, category) for ages 18 and over
_AGE_BRACKETS: tuple[tuple[int, str], ...] = (
    (25, "18-25"),
    (35, "26-35"),
    (45, "36-45"),
    (55, "46-55"),
    (65, "56-65"),
)


def age_category(age: float) -> str:
    """Return the age bracket label for ``age`` in whole years.

    Ages outside 18-65 share the ``65+`` bracket.
    """
    years = int(age)
    if years >= 18:
        for upper, label in _AGE_BRACKETS:
            if years <= upper:
                return label
    return "65+"


class StandardsTable:
    """Lookup of strength standards by gender and lift id."""

    def __init__(
        self,
        male: Mapping[str, StrengthStandard] | None = None,
        female: Mapping[str, StrengthStandard] | None = None,
        age_factors: Mapping[str, float] | None = None,
    ) -> None:
        self.male = dict(MALE_STANDARDS if male is None else male)
        self.female = dict(FEMALE_STANDARDS if female is None else female)
        self.age_factors = dict(AGE_ADJUSTMENT_FACTORS if age_factors is None else age_factors)
        for label in AGE_ADJUSTMENT_FACTORS:
            factor = self.age_factors.get(label)
            if factor is None or factor <= 0:
                raise ValueError(f"missing or invalid age factor for {label}")

    def get(self, exercise: str, gender: str) -> StrengthStandard | None:
        """Return the standard for ``exercise`` or ``None`` when not covered."""
        table = self.male if gender == "male" else self.female
        return table.get(canonical_lift_id(exercise))

    def age_factor(self, age: float | None) -> float:
        """Return the adjustment factor for ``age``; 1.0 when age is unknown."""
        if not age:
            return 1.0
        return self.age_factors[age_category(age)]

    def exercises(self, gender: str) -> list[str]:
        table = self.male if gender == "male" else self.female
        return sorted(table)


DEFAULT_STANDARDS = StandardsTable()
