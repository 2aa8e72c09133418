import os
import sys

import pytest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from models import UserLift, UserProfile
from progress_service import ProfileProgressService
from recommendation_service import RecommendationService, parse_target_reps


class FailingStore:
    async def get_top_lift_by_id(self, lift_id):
        raise TimeoutError("profile lookup timed out")


def profile_with_squat(weight: float, reps: int) -> UserProfile:
    return UserProfile(weight=180, lifts=[UserLift(id="squat-barbell", weight=weight, reps=reps)])


def test_parse_target_reps():
    assert parse_target_reps(8) == 8
    assert parse_target_reps("8-12") == 8
    assert parse_target_reps(" 5 ") == 5
    assert parse_target_reps("AMRAP") is None
    assert parse_target_reps(None) is None


@pytest.mark.asyncio
async def test_no_personal_record_means_no_suggestion():
    service = RecommendationService(ProfileProgressService(UserProfile(weight=180)))
    assert await service.get_recommended_weight("squat-barbell", 8) == 0
    assert await service.get_recommended_weight("crossover-cables", 8) == 0


@pytest.mark.asyncio
async def test_no_profile_means_no_suggestion():
    service = RecommendationService(ProfileProgressService())
    assert await service.get_recommended_weight("squat-barbell", 8) == 0


@pytest.mark.asyncio
async def test_lookup_failure_means_no_suggestion():
    service = RecommendationService(FailingStore())
    assert await service.get_recommended_weight("squat-barbell", 8) == 0


@pytest.mark.asyncio
async def test_weight_rounded_to_increment():
    # 225 x 5 -> 1RM 260; 5 reps -> 87% = 226 -> 225
    service = RecommendationService(ProfileProgressService(profile_with_squat(225, 5)))
    assert await service.get_recommended_weight("squat-barbell", 5) == 225
    assert await service.get_recommended_weight("squat", "8-12") == 210
    # unknown rep counts fall back to 70%
    assert await service.get_recommended_weight("squat-barbell", "AMRAP") == 180


@pytest.mark.asyncio
async def test_kilogram_preference():
    service = RecommendationService(
        ProfileProgressService(profile_with_squat(225, 5)), increment=2.5
    )
    # 208 lbs -> 94 kg -> 95
    assert await service.get_recommended_weight("squat-barbell", 8, "kg") == 95
