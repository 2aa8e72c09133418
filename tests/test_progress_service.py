import datetime
import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms.tiers import StrengthTier
from models import UserLift, UserProfile
from progress_service import ProfileProgressService

RECORDED = datetime.datetime(2024, 4, 2, tzinfo=datetime.timezone.utc)


def make_profile(**kwargs) -> UserProfile:
    data = {
        "weight": 180,
        "gender": "male",
        "lifts": [
            UserLift(id="squat", weight=200, reps=5),
            UserLift(id="squat-barbell", weight=225, reps=1, date_recorded=RECORDED),
            UserLift(id="bench-press-barbell", weight=0, reps=0),
        ],
        "secondary_lifts": [UserLift(id="crossover-cables", weight=45, reps=1)],
    }
    data.update(kwargs)
    return UserProfile(**data)


@pytest.mark.asyncio
async def test_main_lift_uses_best_estimate():
    service = ProfileProgressService(make_profile())
    progress = await service.get_top_lift_by_id("squat-barbell")
    # 200 x 5 -> 231 beats a 225 single
    assert progress.personal_record == 231
    assert progress.last_updated is None
    assert progress.strength_level == StrengthTier.C_MINUS


@pytest.mark.asyncio
async def test_main_lift_without_record_still_listed():
    service = ProfileProgressService(make_profile())
    progress = await service.get_top_lift_by_id("bench-press-barbell")
    assert progress.personal_record == 0
    assert progress.percentile_ranking == 0
    assert progress.strength_level == StrengthTier.E_MINUS


@pytest.mark.asyncio
async def test_secondary_lifts():
    service = ProfileProgressService(make_profile())
    progress = await service.get_top_lift_by_id("crossover-cables")
    assert progress.personal_record == 45
    # ratio 0.25 is the intermediate threshold
    assert progress.percentile_ranking == 25
    assert await service.get_top_lift_by_id("hip-thrust-machine") is None


@pytest.mark.asyncio
async def test_kilogram_profile():
    profile = UserProfile(
        weight=81.6,
        weight_unit="kg",
        lifts=[UserLift(id="squat-barbell", weight=102, reps=1, unit="kg")],
    )
    progress = await ProfileProgressService(profile).get_top_lift_by_id("squat")
    assert progress.personal_record == 225
    assert progress.percentile_ranking == 25


@pytest.mark.asyncio
async def test_featured_lifts_and_overall():
    service = ProfileProgressService(make_profile())
    featured = await service.get_all_featured_lifts()
    ids = [p.workout_id for p in featured]
    assert ids[:4] == [
        "squat-barbell",
        "bench-press-barbell",
        "deadlift-barbell",
        "overhead-press-barbell",
    ]
    assert "crossover-cables" not in ids
    assert await service.overall_percentile() == 28


@pytest.mark.asyncio
async def test_calculate_user_progress_groups_aliases():
    service = ProfileProgressService(make_profile())
    progress = await service.calculate_user_progress()
    assert [p.workout_id for p in progress] == ["crossover-cables", "squat-barbell"]


@pytest.mark.asyncio
async def test_no_profile():
    service = ProfileProgressService()
    assert await service.get_top_lift_by_id("squat-barbell") is None
    assert await service.get_all_featured_lifts() == []
    assert await service.overall_percentile() == 0
