from __future__ import annotations

import threading
import uuid
from typing import Any, Protocol

import structlog

from algorithms.strength_standards import is_main_lift
from exceptions import SessionFinishError, WorkoutNotFoundError
from models import (
    ActiveWorkoutSession,
    ExerciseProgress,
    FinishResult,
    PersonalRecord,
    WorkoutSetCompletion,
    WorkoutTemplate,
)
from progress_service import ProgressStore
from recommendation_service import RecommendationService
from rest_timer import Clock, RestTimer, WorkoutTimer, utc_now
from session_state import (
    EditCancelled,
    EditStarted,
    ExerciseAdded,
    ExerciseDeleted,
    ExerciseJumped,
    FinishAborted,
    FinishStarted,
    MovedToNextExercise,
    SessionEvent,
    SessionState,
    SetAdded,
    SetCompleted,
    SetDeleted,
    SetSkipped,
    SetUpdated,
    SuggestionUpdated,
    WorkoutCancelled,
    WorkoutFinished,
    WorkoutStarted,
    apply_event,
    best_set,
    compute_stats,
)

logger = structlog.get_logger(__name__)


class TemplateProvider(Protocol):
    async def get_workout(self, workout_id: str) -> WorkoutTemplate | None: ...


class ExerciseCatalog(Protocol):
    def get_workout_by_id(self, exercise_id: str) -> dict[str, Any] | None: ...


class WorkoutSessionService:
    """Run one guided workout from start to finish.

    All state lives in ``self.state`` and changes only through
    ``session_state.apply_event``; this class adds the I/O around it:
    weight recommendations when the current exercise changes, the rest
    timer after each set and personal record lookups on finish.
    """

    def __init__(
        self,
        progress_store: ProgressStore,
        recommender: RecommendationService | None = None,
        templates: TemplateProvider | None = None,
        catalog: ExerciseCatalog | None = None,
        rest_timer: RestTimer | None = None,
        clock: Clock = utc_now,
        rest_seconds: int | None = None,
        weight_unit: str = "lbs",
    ) -> None:
        self.progress = progress_store
        self.recommender = recommender or RecommendationService(progress_store)
        self.templates = templates
        self.catalog = catalog
        self.rest_timer = rest_timer
        self.clock = clock
        self.rest_seconds = rest_seconds
        self.weight_unit = weight_unit
        self.state = SessionState()
        # one writer at a time; never held across an await
        self._lock = threading.RLock()

    def _dispatch(self, event: SessionEvent) -> SessionState:
        with self._lock:
            self.state = apply_event(self.state, event)
            return self.state

    @property
    def session(self) -> ActiveWorkoutSession | None:
        return self.state.session

    @property
    def editing_set_index(self) -> int | None:
        return self.state.editing_set_index

    @property
    def suggested_weight(self) -> float:
        return self.state.suggested_weight

    async def _resolve(self, workout: WorkoutTemplate | str) -> WorkoutTemplate:
        if isinstance(workout, WorkoutTemplate):
            return workout
        if self.templates is None:
            raise WorkoutNotFoundError(workout)
        template = await self.templates.get_workout(workout)
        if template is None:
            raise WorkoutNotFoundError(workout)
        return template

    async def initialize_workout(self, workout: WorkoutTemplate | str) -> ActiveWorkoutSession:
        """Start a session from ``workout`` or from a workout id.

        Resolution errors propagate before any state changes.
        """
        template = await self._resolve(workout)
        session = ActiveWorkoutSession(
            id=f"session_{uuid.uuid4().hex}",
            workout_id=template.id,
            title=template.title,
            start_time=self.clock(),
            exercises=tuple(ExerciseProgress.from_template(e) for e in template.exercises),
        )
        self._dispatch(WorkoutStarted(session))
        logger.info(
            "workout started",
            session_id=session.id,
            workout_id=session.workout_id,
            exercises=len(session.exercises),
        )
        await self.refresh_recommendation()
        return self.state.session

    async def refresh_recommendation(self) -> float:
        """Look up a suggested weight for the current exercise."""
        if not self.state.is_active:
            return 0
        exercise = self.state.session.current_exercise
        weight = await self.recommender.get_recommended_weight(
            exercise.id, exercise.target_reps, self.weight_unit
        )
        self._dispatch(SuggestionUpdated(exercise.id, weight))
        return weight

    def _current_sets(self) -> tuple[WorkoutSetCompletion, ...]:
        return self.state.session.current_exercise.completed_sets

    def complete_set(self, weight: float, reps: int, unit: str | None = None) -> WorkoutSetCompletion:
        with self._lock:
            self._dispatch(SetCompleted(weight, reps, unit or self.weight_unit, self.clock()))
            if self.rest_timer is not None:
                self.rest_timer.start(self.rest_seconds)
            return self._current_sets()[-1]

    def skip_set(self) -> WorkoutSetCompletion:
        with self._lock:
            self._dispatch(SetSkipped(unit=self.weight_unit, at=self.clock()))
            return self._current_sets()[-1]

    def begin_edit(self, set_index: int) -> None:
        self._dispatch(EditStarted(set_index))

    def cancel_edit(self) -> None:
        self._dispatch(EditCancelled())

    def update_set(
        self, set_index: int, weight: float, reps: int, unit: str | None = None
    ) -> WorkoutSetCompletion:
        with self._lock:
            self._dispatch(SetUpdated(set_index, weight, reps, unit))
            return self._current_sets()[set_index]

    async def jump_to_exercise(self, exercise_index: int) -> ActiveWorkoutSession:
        with self._lock:
            before = self.state.session.current_exercise_index if self.state.session else None
            self._dispatch(ExerciseJumped(exercise_index))
            moved = self.state.session.current_exercise_index != before
        if moved:
            await self.refresh_recommendation()
        return self.state.session

    async def next_exercise(self) -> bool:
        """Advance to the next exercise; ``False`` when already on the last one."""
        with self._lock:
            before = self.state.session.current_exercise_index if self.state.session else None
            self._dispatch(MovedToNextExercise())
            moved = self.state.session.current_exercise_index != before
        if not moved:
            return False
        await self.refresh_recommendation()
        return True

    def add_set(self, exercise_index: int | None = None) -> ExerciseProgress:
        with self._lock:
            index = self._index_or_current(exercise_index)
            self._dispatch(SetAdded(index))
            return self.state.session.exercises[index]

    def delete_set(self, set_index: int, exercise_index: int | None = None) -> ExerciseProgress:
        with self._lock:
            index = self._index_or_current(exercise_index)
            self._dispatch(SetDeleted(index, set_index))
            return self.state.session.exercises[index]

    def add_exercise(
        self, exercise_id: str, sets: int = 3, reps: int | str = "8"
    ) -> ExerciseProgress:
        with self._lock:
            self._dispatch(ExerciseAdded(ExerciseProgress(exercise_id, sets, reps)))
            return self.state.session.exercises[-1]

    async def delete_exercise(self, exercise_index: int) -> ActiveWorkoutSession:
        with self._lock:
            before = self.state.session.current_exercise.id if self.state.session else None
            self._dispatch(ExerciseDeleted(exercise_index))
            moved = self.state.session.current_exercise.id != before
        if moved:
            await self.refresh_recommendation()
        return self.state.session

    def _index_or_current(self, exercise_index: int | None) -> int:
        if exercise_index is not None:
            return exercise_index
        if self.state.session is None:
            return 0
        return self.state.session.current_exercise_index

    async def _personal_records(self, session: ActiveWorkoutSession) -> list[PersonalRecord]:
        records: list[PersonalRecord] = []
        for exercise in session.exercises:
            best = best_set(exercise)
            if best is None:
                continue
            top_set, estimate = best
            prior = await self.progress.get_top_lift_by_id(exercise.id)
            previous = prior.personal_record if prior is not None else None
            if previous is not None and previous > 0 and estimate <= previous:
                continue
            records.append(
                PersonalRecord(
                    exercise_id=exercise.id,
                    weight=top_set.weight,
                    reps=top_set.reps,
                    unit=top_set.unit,
                    estimated_one_rm=estimate,
                    previous_record=previous,
                    lift_type="main" if is_main_lift(exercise.id) else "secondary",
                )
            )
        return records

    async def finish_workout(self) -> FinishResult:
        """Close the session and summarise it.

        Mutations are refused while personal records are looked up. If a
        lookup fails the session returns to in progress and
        ``SessionFinishError`` is raised; a cancelled finish also returns
        it to in progress before the cancellation propagates.
        """
        self._dispatch(FinishStarted())
        session = self.state.session
        try:
            records = await self._personal_records(session)
        except Exception as exc:
            self._dispatch(FinishAborted())
            logger.error("finishing workout failed", session_id=session.id, error=str(exc))
            raise SessionFinishError(f"could not finish workout {session.id}") from exc
        except BaseException:
            # cancelled while awaiting lookups
            self._dispatch(FinishAborted())
            logger.warning("finishing workout interrupted", session_id=session.id)
            raise
        stats = compute_stats(session, self.clock(), len(records))
        self._dispatch(WorkoutFinished())
        if self.rest_timer is not None:
            self.rest_timer.skip()
        logger.info(
            "workout finished",
            session_id=session.id,
            total_sets=stats.total_sets,
            total_volume=stats.total_volume,
            progress_updates=stats.progress_updates,
        )
        return FinishResult(session=session, stats=stats, personal_records=tuple(records))

    def cancel_workout(self) -> None:
        """Discard the session without stats or progress lookups."""
        session_id = self.state.session.id if self.state.session else None
        self._dispatch(WorkoutCancelled())
        if self.rest_timer is not None:
            self.rest_timer.skip()
        logger.info("workout cancelled", session_id=session_id)

    def exercise_name(self, exercise_id: str) -> str:
        """Return the display name of ``exercise_id`` from the catalog."""
        if self.catalog is not None:
            entry = self.catalog.get_workout_by_id(exercise_id)
            if entry and entry.get("name"):
                return entry["name"]
        return exercise_id

    def elapsed_time(self) -> str:
        if self.state.session is None:
            return "0:00"
        return WorkoutTimer(self.state.session.start_time, self.clock).formatted_time()
