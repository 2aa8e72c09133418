"""Pure state transitions for one guided workout session.

``apply_event(state, event)`` never mutates its input; it validates the
event against the current state and returns the next state. Invalid
events raise one of the ``exceptions.SessionError`` subclasses and leave
the previous state untouched.
"""
from __future__ import annotations

import datetime
from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

from algorithms.math_tools import MathTools
from algorithms.one_rm import OneRMCalculator
from algorithms.weight_converter import WeightConverter
from exceptions import (
    ExerciseIndexError,
    InvalidSetError,
    SessionStateError,
    SetIndexError,
)
from models import (
    ActiveWorkoutSession,
    ExerciseProgress,
    SessionStats,
    SessionStatus,
    WorkoutSetCompletion,
)


@dataclass(frozen=True)
class SessionState:
    status: SessionStatus = SessionStatus.NOT_STARTED
    session: Optional[ActiveWorkoutSession] = None
    editing_set_index: Optional[int] = None
    suggested_weight: float = 0

    @property
    def is_active(self) -> bool:
        return self.status == SessionStatus.IN_PROGRESS


@dataclass(frozen=True)
class WorkoutStarted:
    session: ActiveWorkoutSession


@dataclass(frozen=True)
class SetCompleted:
    weight: float
    reps: int
    unit: str = "lbs"
    at: Optional[datetime.datetime] = None


@dataclass(frozen=True)
class SetSkipped:
    weight: float = 0
    reps: int = 0
    unit: str = "lbs"
    at: Optional[datetime.datetime] = None


@dataclass(frozen=True)
class EditStarted:
    set_index: int


@dataclass(frozen=True)
class EditCancelled:
    pass


@dataclass(frozen=True)
class SetUpdated:
    set_index: int
    weight: float
    reps: int
    unit: Optional[str] = None


@dataclass(frozen=True)
class ExerciseJumped:
    exercise_index: int


@dataclass(frozen=True)
class MovedToNextExercise:
    pass


@dataclass(frozen=True)
class SuggestionUpdated:
    exercise_id: str
    weight: float


@dataclass(frozen=True)
class SetAdded:
    exercise_index: int


@dataclass(frozen=True)
class SetDeleted:
    exercise_index: int
    set_index: int


@dataclass(frozen=True)
class ExerciseAdded:
    exercise: ExerciseProgress


@dataclass(frozen=True)
class ExerciseDeleted:
    exercise_index: int


@dataclass(frozen=True)
class FinishStarted:
    pass


@dataclass(frozen=True)
class FinishAborted:
    pass


@dataclass(frozen=True)
class WorkoutFinished:
    pass


@dataclass(frozen=True)
class WorkoutCancelled:
    pass


SessionEvent = Union[
    WorkoutStarted,
    SetCompleted,
    SetSkipped,
    EditStarted,
    EditCancelled,
    SetUpdated,
    ExerciseJumped,
    MovedToNextExercise,
    SuggestionUpdated,
    SetAdded,
    SetDeleted,
    ExerciseAdded,
    ExerciseDeleted,
    FinishStarted,
    FinishAborted,
    WorkoutFinished,
    WorkoutCancelled,
]


def _require_active(state: SessionState) -> ActiveWorkoutSession:
    if state.status != SessionStatus.IN_PROGRESS or state.session is None:
        raise SessionStateError(f"no workout in progress (status: {state.status.value})")
    return state.session


def _validate_set(weight: float, reps: int) -> None:
    if weight <= 0 or reps <= 0:
        raise InvalidSetError(weight, reps)


def _exercise_at(session: ActiveWorkoutSession, index: int) -> ExerciseProgress:
    if not 0 <= index < len(session.exercises):
        raise ExerciseIndexError(index, len(session.exercises))
    return session.exercises[index]


def _replace_exercise(
    session: ActiveWorkoutSession, index: int, exercise: ExerciseProgress
) -> ActiveWorkoutSession:
    exercises = list(session.exercises)
    exercises[index] = exercise
    return replace(session, exercises=tuple(exercises))


def _append_set(
    state: SessionState, weight: float, reps: int, unit: str, completed: bool, at
) -> SessionState:
    session = state.session
    exercise = session.current_exercise
    new_set = WorkoutSetCompletion(
        set_number=len(exercise.completed_sets) + 1,
        weight=weight,
        reps=reps,
        unit=unit,
        completed=completed,
        rest_start_time=at,
    )
    exercise = replace(exercise, completed_sets=exercise.completed_sets + (new_set,))
    return replace(
        state, session=_replace_exercise(session, session.current_exercise_index, exercise)
    )


def _move_to(state: SessionState, index: int) -> SessionState:
    session = replace(state.session, current_exercise_index=index)
    return replace(state, session=session, editing_set_index=None, suggested_weight=0)


def _on_started(state: SessionState, event: WorkoutStarted) -> SessionState:
    if state.status in (SessionStatus.IN_PROGRESS, SessionStatus.FINISHING):
        raise SessionStateError("a workout is already in progress")
    if not event.session.exercises:
        raise SessionStateError("a workout needs at least one exercise")
    return SessionState(status=SessionStatus.IN_PROGRESS, session=event.session)


def _on_set_completed(state: SessionState, event: SetCompleted) -> SessionState:
    _require_active(state)
    _validate_set(event.weight, event.reps)
    if state.editing_set_index is not None:
        raise SessionStateError("finish editing before completing a new set")
    return _append_set(state, event.weight, event.reps, event.unit, True, event.at)


def _on_set_skipped(state: SessionState, event: SetSkipped) -> SessionState:
    _require_active(state)
    if state.editing_set_index is not None:
        raise SessionStateError("finish editing before skipping a set")
    return _append_set(state, event.weight, event.reps, event.unit, False, event.at)


def _on_edit_started(state: SessionState, event: EditStarted) -> SessionState:
    session = _require_active(state)
    size = len(session.current_exercise.completed_sets)
    if not 0 <= event.set_index < size:
        raise SetIndexError(event.set_index, size)
    return replace(state, editing_set_index=event.set_index)


def _on_edit_cancelled(state: SessionState, event: EditCancelled) -> SessionState:
    _require_active(state)
    return replace(state, editing_set_index=None)


def _on_set_updated(state: SessionState, event: SetUpdated) -> SessionState:
    session = _require_active(state)
    exercise = session.current_exercise
    size = len(exercise.completed_sets)
    if not 0 <= event.set_index < size:
        raise SetIndexError(event.set_index, size)
    _validate_set(event.weight, event.reps)
    sets = list(exercise.completed_sets)
    current = sets[event.set_index]
    sets[event.set_index] = replace(
        current,
        weight=event.weight,
        reps=event.reps,
        unit=event.unit or current.unit,
        completed=True,
    )
    exercise = replace(exercise, completed_sets=tuple(sets))
    session = _replace_exercise(session, session.current_exercise_index, exercise)
    return replace(state, session=session, editing_set_index=None)


def _on_jumped(state: SessionState, event: ExerciseJumped) -> SessionState:
    session = _require_active(state)
    _exercise_at(session, event.exercise_index)
    if event.exercise_index == session.current_exercise_index:
        return state
    return _move_to(state, event.exercise_index)


def _on_next(state: SessionState, event: MovedToNextExercise) -> SessionState:
    session = _require_active(state)
    if session.is_last_exercise:
        return state
    return _move_to(state, session.current_exercise_index + 1)


def _on_suggestion(state: SessionState, event: SuggestionUpdated) -> SessionState:
    # recommendations resolve asynchronously; drop ones for an exercise we left
    if not state.is_active or state.session.current_exercise.id != event.exercise_id:
        return state
    return replace(state, suggested_weight=event.weight)


def _on_set_added(state: SessionState, event: SetAdded) -> SessionState:
    session = _require_active(state)
    exercise = _exercise_at(session, event.exercise_index)
    exercise = replace(exercise, target_sets=exercise.target_sets + 1)
    return replace(state, session=_replace_exercise(session, event.exercise_index, exercise))


def _on_set_deleted(state: SessionState, event: SetDeleted) -> SessionState:
    session = _require_active(state)
    exercise = _exercise_at(session, event.exercise_index)
    size = len(exercise.completed_sets)
    if not 0 <= event.set_index < size:
        raise SetIndexError(event.set_index, size)
    remaining = [s for i, s in enumerate(exercise.completed_sets) if i != event.set_index]
    renumbered = tuple(replace(s, set_number=i + 1) for i, s in enumerate(remaining))
    exercise = replace(
        exercise,
        completed_sets=renumbered,
        target_sets=max(1, exercise.target_sets - 1),
    )
    session = _replace_exercise(session, event.exercise_index, exercise)
    return replace(state, session=session, editing_set_index=None)


def _on_exercise_added(state: SessionState, event: ExerciseAdded) -> SessionState:
    session = _require_active(state)
    session = replace(session, exercises=session.exercises + (event.exercise,))
    return replace(state, session=session)


def _on_exercise_deleted(state: SessionState, event: ExerciseDeleted) -> SessionState:
    session = _require_active(state)
    _exercise_at(session, event.exercise_index)
    if len(session.exercises) == 1:
        raise SessionStateError("cannot remove the only exercise of a workout")
    exercises = tuple(
        ex for i, ex in enumerate(session.exercises) if i != event.exercise_index
    )
    current = session.current_exercise_index
    if event.exercise_index < current:
        current -= 1
    current = min(current, len(exercises) - 1)
    changed = event.exercise_index == session.current_exercise_index
    session = replace(session, exercises=exercises, current_exercise_index=current)
    if changed:
        return replace(state, session=session, editing_set_index=None, suggested_weight=0)
    return replace(state, session=session)


def _on_finish_started(state: SessionState, event: FinishStarted) -> SessionState:
    _require_active(state)
    return replace(state, status=SessionStatus.FINISHING, editing_set_index=None)


def _on_finish_aborted(state: SessionState, event: FinishAborted) -> SessionState:
    if state.status != SessionStatus.FINISHING:
        raise SessionStateError("workout is not finishing")
    return replace(state, status=SessionStatus.IN_PROGRESS)


def _on_finished(state: SessionState, event: WorkoutFinished) -> SessionState:
    if state.status != SessionStatus.FINISHING:
        raise SessionStateError("workout is not finishing")
    return replace(state, status=SessionStatus.FINISHED)


def _on_cancelled(state: SessionState, event: WorkoutCancelled) -> SessionState:
    _require_active(state)
    return SessionState(status=SessionStatus.CANCELLED)


_HANDLERS: dict[type, Callable[[SessionState, object], SessionState]] = {
    WorkoutStarted: _on_started,
    SetCompleted: _on_set_completed,
    SetSkipped: _on_set_skipped,
    EditStarted: _on_edit_started,
    EditCancelled: _on_edit_cancelled,
    SetUpdated: _on_set_updated,
    ExerciseJumped: _on_jumped,
    MovedToNextExercise: _on_next,
    SuggestionUpdated: _on_suggestion,
    SetAdded: _on_set_added,
    SetDeleted: _on_set_deleted,
    ExerciseAdded: _on_exercise_added,
    ExerciseDeleted: _on_exercise_deleted,
    FinishStarted: _on_finish_started,
    FinishAborted: _on_finish_aborted,
    WorkoutFinished: _on_finished,
    WorkoutCancelled: _on_cancelled,
}


def apply_event(state: SessionState, event: SessionEvent) -> SessionState:
    """Return the state that results from applying ``event`` to ``state``."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"unknown session event: {event!r}")
    return handler(state, event)


def best_set(exercise: ExerciseProgress) -> Optional[tuple[WorkoutSetCompletion, float]]:
    """Return the strongest completed set of ``exercise`` with its 1RM in lbs.

    Sets are ranked by estimated one-rep max, then by ``weight * reps`` in
    pounds; a full tie keeps the earlier set.
    """
    best: Optional[tuple[WorkoutSetCompletion, float]] = None
    best_key: tuple[float, float] = (0.0, 0.0)
    for s in exercise.completed_sets:
        if not s.completed or s.weight <= 0 or s.reps <= 0:
            continue
        estimate = OneRMCalculator.estimate(WeightConverter.to_lbs(s.weight, s.unit), s.reps)
        key = (estimate, WeightConverter.as_lbs(s.weight, s.unit) * s.reps)
        if best is None or key > best_key:
            best, best_key = (s, estimate), key
    return best


def compute_stats(
    session: ActiveWorkoutSession, now: datetime.datetime, progress_updates: int = 0
) -> SessionStats:
    """Aggregate the finished ``session``; skipped sets add no volume."""
    elapsed = max(0.0, (now - session.start_time).total_seconds())
    total_sets = sum(len(ex.completed_sets) for ex in session.exercises)
    total_volume = MathTools.volume(
        (s.weight, s.reps)
        for ex in session.exercises
        for s in ex.completed_sets
        if s.completed
    )
    return SessionStats(
        duration=MathTools.round_half_up(elapsed / 60),
        duration_seconds=elapsed,
        total_sets=total_sets,
        total_volume=total_volume,
        progress_updates=progress_updates,
    )
