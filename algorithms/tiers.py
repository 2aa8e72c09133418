from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class StrengthTier(str, Enum):
    E_MINUS = "E-"
    E = "E"
    E_PLUS = "E+"
    D_MINUS = "D-"
    D = "D"
    D_PLUS = "D+"
    C_MINUS = "C-"
    C = "C"
    C_PLUS = "C+"
    B_MINUS = "B-"
    B = "B"
    B_PLUS = "B+"
    A_MINUS = "A-"
    A = "A"
    A_PLUS = "A+"
    S_MINUS = "S-"
    S = "S"
    S_PLUS = "S+"
    S_PLUS_PLUS = "S++"

    @property
    def base(self) -> str:
        """Return the tier letter without its modifier."""
        return self.value[0]

    def __str__(self) -> str:
        return self.value


# Ascending lower bounds; each tier covers [threshold, next threshold).
TIER_THRESHOLDS: tuple[tuple[StrengthTier, int], ...] = (
    (StrengthTier.E_MINUS, 0),
    (StrengthTier.E, 1),
    (StrengthTier.E_PLUS, 3),
    (StrengthTier.D_MINUS, 6),
    (StrengthTier.D, 11),
    (StrengthTier.D_PLUS, 17),
    (StrengthTier.C_MINUS, 23),
    (StrengthTier.C, 31),
    (StrengthTier.C_PLUS, 39),
    (StrengthTier.B_MINUS, 47),
    (StrengthTier.B, 55),
    (StrengthTier.B_PLUS, 63),
    (StrengthTier.A_MINUS, 70),
    (StrengthTier.A, 75),
    (StrengthTier.A_PLUS, 80),
    (StrengthTier.S_MINUS, 85),
    (StrengthTier.S, 90),
    (StrengthTier.S_PLUS, 95),
    (StrengthTier.S_PLUS_PLUS, 99),
)

RADAR_TIER_THRESHOLDS: tuple[tuple[str, int], ...] = (
    ("E", 0),
    ("D", 6),
    ("C", 23),
    ("B", 47),
    ("A", 70),
    ("S", 85),
)

TIER_COLORS: dict[str, str] = {
    "S": "#FFD700",
    "A": "#9932CC",
    "B": "#3558C0",
    "C": "#2E8B57",
    "D": "#808080",
    "E": "#808080",
}

LEVEL_NAMES: tuple[tuple[str, int], ...] = (
    ("Untrained", 0),
    ("Beginner", 10),
    ("Intermediate", 25),
    ("Advanced", 50),
    ("Elite", 75),
    ("God", 90),
)


@dataclass(frozen=True)
class TierInfo:
    tier: StrengthTier
    base_tier: str
    color: str
    label: str


@dataclass(frozen=True)
class NextTierInfo:
    current: StrengthTier
    next: StrengthTier | None
    needed: int


def get_strength_tier(percentile: float) -> StrengthTier:
    """Return the tier whose range contains ``percentile``."""
    for tier, threshold in reversed(TIER_THRESHOLDS):
        if percentile >= threshold:
            return tier
    return StrengthTier.E_MINUS


def get_next_tier_info(percentile: float) -> NextTierInfo:
    """Return the current tier, the next one up and the points still needed."""
    current = get_strength_tier(percentile)
    for tier, threshold in TIER_THRESHOLDS:
        if threshold > percentile:
            return NextTierInfo(current, tier, threshold - math.floor(percentile))
    return NextTierInfo(current, None, 0)


def get_tier_color(tier: StrengthTier | str) -> str:
    return TIER_COLORS[StrengthTier(tier).base]


def get_tier_info(percentile: float) -> TierInfo:
    tier = get_strength_tier(percentile)
    return TierInfo(tier, tier.base, TIER_COLORS[tier.base], f"{tier.value} Tier")


def get_radar_tier(percentile: float) -> str:
    """Return the base tier letter used for radar chart rings."""
    for label, threshold in reversed(RADAR_TIER_THRESHOLDS):
        if percentile >= threshold:
            return label
    return "E"


def get_strength_level_name(percentile: float) -> str:
    """Return the descriptive strength level for ``percentile``."""
    for name, threshold in reversed(LEVEL_NAMES):
        if percentile >= threshold:
            return name
    return "Untrained"
