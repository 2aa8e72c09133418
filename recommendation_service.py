from __future__ import annotations

import re

import structlog

from algorithms.math_tools import MathTools
from algorithms.one_rm import OneRMCalculator
from algorithms.weight_converter import WeightConverter
from progress_service import ProgressStore

logger = structlog.get_logger(__name__)

_LEADING_INT = re.compile(r"\s*(\d+)")


def parse_target_reps(target_reps: int | str | None) -> int | None:
    """Return the leading rep count of ``target_reps`` (``"8-12"`` -> 8)."""
    if target_reps is None:
        return None
    if isinstance(target_reps, int):
        return target_reps
    match = _LEADING_INT.match(str(target_reps))
    return int(match.group(1)) if match else None


class RecommendationService:
    """Suggest training weights from the lifter's current one-rep max."""

    def __init__(self, progress_store: ProgressStore, increment: float = 5.0) -> None:
        self.progress = progress_store
        self.increment = increment

    async def get_recommended_weight(
        self, lift_id: str, target_reps: int | str | None, unit: str = "lbs"
    ) -> float:
        """Return a weight for ``target_reps`` of ``lift_id`` or 0 for no suggestion.

        Lookup failures are logged and treated as "no suggestion" so that
        logging a set never waits on a recommendation.
        """
        try:
            progress = await self.progress.get_top_lift_by_id(lift_id)
        except Exception as exc:
            logger.warning("recommendation lookup failed", lift_id=lift_id, error=str(exc))
            return 0
        if progress is None or progress.personal_record <= 0:
            return 0
        percentage = OneRMCalculator.get_percentage_for(parse_target_reps(target_reps))
        weight = OneRMCalculator.get_weight_for_percentage(progress.personal_record, percentage)
        if unit != "lbs":
            weight = WeightConverter.for_preference(weight, "lbs", unit)
        return MathTools.round_to_increment(weight, self.increment)
