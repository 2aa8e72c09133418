import dataclasses
from typing import Optional

import structlog
from fastapi import Body, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from algorithms.math_tools import MathTools
from algorithms.one_rm import OneRMCalculator
from algorithms.tiers import get_next_tier_info, get_strength_level_name, get_tier_info
from algorithms.weight_converter import WeightConverter
from config import APP_VERSION, load_settings
from exceptions import (
    ExerciseIndexError,
    InvalidSetError,
    SessionError,
    SessionFinishError,
    SetIndexError,
    WorkoutNotFoundError,
)
from logging_config import configure_logging
from models import UserProfile, WeightUnit, WorkoutTemplate
from progress_service import ProfileProgressService
from recommendation_service import RecommendationService
from rest_timer import RestTimer
from session_service import WorkoutSessionService
from settings_schema import SettingsSchema

logger = structlog.get_logger(__name__)


class SetRequest(BaseModel):
    weight: float
    reps: int
    unit: Optional[WeightUnit] = None


class StartSessionRequest(BaseModel):
    workout: Optional[WorkoutTemplate] = None
    workout_id: Optional[str] = None


class TemplateRegistry:
    """Workout templates known to the API, looked up by id."""

    def __init__(self) -> None:
        self.templates: dict[str, WorkoutTemplate] = {}

    def add(self, template: WorkoutTemplate) -> None:
        self.templates[template.id] = template

    async def get_workout(self, workout_id: str) -> WorkoutTemplate | None:
        return self.templates.get(workout_id)


def _status_for(exc: SessionError) -> int:
    if isinstance(exc, InvalidSetError):
        return 400
    if isinstance(exc, (SetIndexError, ExerciseIndexError, WorkoutNotFoundError)):
        return 404
    if isinstance(exc, SessionFinishError):
        return 503
    return 409


class LiftAPI:
    """Provides REST endpoints for strength ranking and guided workouts."""

    def __init__(
        self,
        settings: SettingsSchema | None = None,
        profile: UserProfile | None = None,
    ) -> None:
        self.settings = settings or SettingsSchema()
        self.progress = ProfileProgressService(profile)
        self.percentiles = self.progress.percentiles
        self.recommender = RecommendationService(
            self.progress, increment=self.settings.weight_increment
        )
        self.templates = TemplateRegistry()
        self.rest_timer = RestTimer(default_duration=self.settings.rest_timer_seconds)
        self.sessions = WorkoutSessionService(
            self.progress,
            recommender=self.recommender,
            templates=self.templates,
            rest_timer=self.rest_timer,
            rest_seconds=self.settings.rest_timer_seconds,
            weight_unit=self.settings.weight_unit,
        )
        self.app = FastAPI(
            title="LiftRank API",
            description="Strength percentiles, tiers and guided workout sessions",
            version=APP_VERSION,
        )
        self._setup_routes()

    def _session_payload(self) -> dict:
        state = self.sessions.state
        session = None
        if state.session is not None:
            session = dataclasses.asdict(state.session)
            for data, exercise in zip(session["exercises"], state.session.exercises):
                data["status"] = exercise.status.value
                data["name"] = self.sessions.exercise_name(exercise.id)
        return {
            "status": state.status.value,
            "session": session,
            "editing_set_index": state.editing_set_index,
            "suggested_weight": state.suggested_weight,
            "rest_seconds_remaining": self.rest_timer.remaining(),
        }

    def _setup_routes(self) -> None:
        @self.app.exception_handler(SessionError)
        async def session_error_handler(request: Request, exc: SessionError):
            logger.info("session request rejected", path=request.url.path, error=str(exc))
            return JSONResponse(status_code=_status_for(exc), content={"detail": str(exc)})

        @self.app.get("/health", summary="Health check")
        def health():
            return {"status": "ok", "version": APP_VERSION}

        @self.app.get("/one_rm")
        def one_rm(weight: float, reps: int):
            if weight < 0 or reps < 1:
                raise HTTPException(status_code=400, detail="weight must be >= 0 and reps >= 1")
            return {
                "one_rm": OneRMCalculator.estimate(weight, reps),
                "epley": OneRMCalculator.epley(weight, reps),
                "brzycki": OneRMCalculator.brzycki(weight, reps),
                "lombardi": OneRMCalculator.lombardi(weight, reps),
            }

        @self.app.get("/one_rm/percentage")
        def one_rm_percentage(one_rm: float, reps: int):
            percentage = OneRMCalculator.get_percentage_for(reps)
            return {
                "percentage": percentage,
                "weight": OneRMCalculator.get_weight_for_percentage(one_rm, percentage),
            }

        @self.app.get("/percentile")
        def percentile(
            lift_weight: float,
            body_weight: float,
            exercise: str,
            gender: str = "male",
            age: Optional[int] = None,
            unit: WeightUnit = "lbs",
        ):
            value = self.percentiles.calculate(
                WeightConverter.as_lbs(lift_weight, unit),
                WeightConverter.as_lbs(body_weight, unit),
                gender,
                exercise,
                age,
            )
            rounded = MathTools.round_half_up(value)
            return {
                "percentile": value,
                "rounded": rounded,
                "ordinal": f"{rounded}{MathTools.ordinal_suffix(rounded)}",
                "tier": get_tier_info(value).tier.value,
            }

        @self.app.get("/tiers/{percentile}")
        def tier(percentile: float):
            if not 0 <= percentile <= 100:
                raise HTTPException(status_code=400, detail="percentile must be within 0-100")
            info = get_tier_info(percentile)
            upcoming = get_next_tier_info(percentile)
            return {
                "tier": info.tier.value,
                "base_tier": info.base_tier,
                "color": info.color,
                "label": info.label,
                "level": get_strength_level_name(percentile),
                "next_tier": upcoming.next.value if upcoming.next else None,
                "needed": upcoming.needed,
            }

        @self.app.put("/profile")
        async def put_profile(profile: UserProfile):
            self.progress.set_profile(profile)
            return {"status": "updated"}

        @self.app.get("/progress")
        async def progress():
            featured = await self.progress.get_all_featured_lifts()
            return {
                "lifts": [p.model_dump(mode="json") for p in featured],
                "overall_percentile": await self.progress.overall_percentile(),
            }

        @self.app.get("/recommendations/{lift_id}")
        async def recommendation(lift_id: str, target_reps: str = "8", unit: Optional[WeightUnit] = None):
            weight = await self.recommender.get_recommended_weight(
                lift_id, target_reps, unit or self.settings.weight_unit
            )
            return {"lift_id": lift_id, "weight": weight}

        @self.app.post("/session")
        async def start_session(request: StartSessionRequest):
            if request.workout is not None:
                self.templates.add(request.workout)
                target = request.workout
            elif request.workout_id is not None:
                target = request.workout_id
            else:
                raise HTTPException(status_code=400, detail="workout or workout_id required")
            await self.sessions.initialize_workout(target)
            return self._session_payload()

        @self.app.get("/session")
        def get_session():
            return self._session_payload()

        @self.app.post("/session/sets")
        async def complete_set(request: SetRequest):
            self.sessions.complete_set(request.weight, request.reps, request.unit)
            return self._session_payload()

        @self.app.post("/session/sets/skip")
        async def skip_set():
            self.sessions.skip_set()
            return self._session_payload()

        @self.app.put("/session/sets/{index}")
        async def update_set(index: int, request: SetRequest):
            self.sessions.update_set(index, request.weight, request.reps, request.unit)
            return self._session_payload()

        @self.app.delete("/session/sets/{index}")
        async def delete_set(index: int):
            self.sessions.delete_set(index)
            return self._session_payload()

        @self.app.post("/session/exercises")
        async def add_exercise(exercise_id: str = Body(...), sets: int = Body(3), reps: str = Body("8")):
            self.sessions.add_exercise(exercise_id, sets, reps)
            return self._session_payload()

        @self.app.post("/session/exercises/{index}/jump")
        async def jump(index: int):
            await self.sessions.jump_to_exercise(index)
            return self._session_payload()

        @self.app.post("/session/next")
        async def next_exercise():
            moved = await self.sessions.next_exercise()
            return {"moved": moved, **self._session_payload()}

        @self.app.post("/session/finish")
        async def finish():
            result = await self.sessions.finish_workout()
            return {
                "status": self.sessions.state.status.value,
                "stats": dataclasses.asdict(result.stats),
                "personal_records": [dataclasses.asdict(r) for r in result.personal_records],
            }

        @self.app.post("/session/cancel")
        async def cancel():
            self.sessions.cancel_workout()
            return self._session_payload()


def create_app(settings_path: str | None = None) -> FastAPI:
    settings = load_settings(settings_path)
    configure_logging(settings)
    return LiftAPI(settings).app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app())
