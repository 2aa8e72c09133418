from __future__ import annotations

from typing import Iterable, Protocol

import structlog

from algorithms.math_tools import MathTools
from algorithms.one_rm import OneRMCalculator
from algorithms.percentile import PercentileCalculator
from algorithms.strength_standards import (
    FEATURED_SECONDARY_LIFTS,
    MAIN_LIFTS,
    canonical_lift_id,
    is_main_lift,
)
from algorithms.tiers import get_strength_tier
from algorithms.weight_converter import WeightConverter
from models import UserLift, UserProfile, UserProgress

logger = structlog.get_logger(__name__)


class ProgressStore(Protocol):
    """Read-only access to the lifter's profile and derived progress."""

    async def get_profile(self) -> UserProfile | None: ...

    async def get_top_lift_by_id(self, lift_id: str) -> UserProgress | None: ...

    async def get_all_featured_lifts(self) -> list[UserProgress]: ...


class ProfileProgressService:
    """Derive per-lift progress from the lifts recorded on a profile."""

    def __init__(
        self,
        profile: UserProfile | None = None,
        percentile_calculator: PercentileCalculator | None = None,
    ) -> None:
        self.profile = profile
        self.percentiles = percentile_calculator or PercentileCalculator()

    def set_profile(self, profile: UserProfile | None) -> None:
        self.profile = profile

    async def get_profile(self) -> UserProfile | None:
        return self.profile

    def _body_weight_lbs(self, profile: UserProfile) -> float:
        return WeightConverter.as_lbs(profile.weight, profile.weight_unit)

    @staticmethod
    def _estimate_lbs(lift: UserLift) -> float:
        return OneRMCalculator.estimate(WeightConverter.to_lbs(lift.weight, lift.unit), lift.reps)

    def _best_lift(self, lift_id: str, lifts: Iterable[UserLift]) -> UserLift | None:
        best: UserLift | None = None
        best_estimate = 0.0
        for lift in lifts:
            if canonical_lift_id(lift.id) != lift_id or lift.weight <= 0:
                continue
            estimate = self._estimate_lbs(lift)
            if best is None or estimate > best_estimate:
                best, best_estimate = lift, estimate
        return best

    def build_progress(
        self, profile: UserProfile, lift_id: str, lift: UserLift | None
    ) -> UserProgress:
        """Return progress for ``lift_id`` from its best recorded ``lift``."""
        personal_record = self._estimate_lbs(lift) if lift is not None else 0
        percentile = self.percentiles.calculate(
            personal_record,
            self._body_weight_lbs(profile),
            profile.gender,
            lift_id,
            profile.age,
        )
        return UserProgress(
            workout_id=lift_id,
            personal_record=personal_record,
            percentile_ranking=MathTools.round_half_up(percentile),
            strength_level=get_strength_tier(percentile),
            last_updated=lift.date_recorded if lift is not None else None,
        )

    async def get_top_lift_by_id(self, lift_id: str) -> UserProgress | None:
        """Return progress for one lift; main lifts always have an entry."""
        profile = self.profile
        if profile is None:
            return None
        lift_id = canonical_lift_id(lift_id)
        if is_main_lift(lift_id):
            return self.build_progress(profile, lift_id, self._best_lift(lift_id, profile.lifts))
        lift = self._best_lift(lift_id, profile.secondary_lifts)
        if lift is None:
            return None
        return self.build_progress(profile, lift_id, lift)

    async def get_all_featured_lifts(self) -> list[UserProgress]:
        if self.profile is None:
            return []
        progress: list[UserProgress] = []
        for lift_id in MAIN_LIFTS + FEATURED_SECONDARY_LIFTS:
            entry = await self.get_top_lift_by_id(lift_id)
            if entry is not None:
                progress.append(entry)
        return progress

    async def calculate_user_progress(self) -> list[UserProgress]:
        """Return progress for every lift id recorded on the profile."""
        profile = self.profile
        if profile is None:
            return []
        all_lifts = list(profile.lifts) + list(profile.secondary_lifts)
        lift_ids = sorted({canonical_lift_id(l.id) for l in all_lifts if l.weight > 0})
        result = [
            self.build_progress(profile, lift_id, self._best_lift(lift_id, all_lifts))
            for lift_id in lift_ids
        ]
        logger.debug("derived user progress", lifts=len(result))
        return result

    async def overall_percentile(self) -> int:
        progress = await self.get_all_featured_lifts()
        return MathTools.overall_percentile(p.percentile_ranking for p in progress)
