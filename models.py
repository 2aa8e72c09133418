"""Domain types shared by the calculators, the session and the API.

Boundary data (profiles, templates, progress) are pydantic models so they
are validated once when they enter the system. Session data are frozen
dataclasses so that every state transition produces a new value.
"""
from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from algorithms.tiers import StrengthTier

WeightUnit = Literal["lbs", "kg"]


class LiftAttempt(BaseModel):
    model_config = ConfigDict(frozen=True)

    weight: float = Field(ge=0)
    unit: WeightUnit = "lbs"
    reps: int = Field(ge=1)


class UserLift(BaseModel):
    """A recorded lift on the user's profile."""

    id: str
    weight: float = Field(ge=0)
    reps: int = Field(ge=0)
    unit: WeightUnit = "lbs"
    parent_id: str | None = None
    date_recorded: datetime.datetime | None = None


class UserProfile(BaseModel):
    weight: float = Field(ge=0)
    weight_unit: WeightUnit = "lbs"
    gender: str = "male"
    age: int | None = None
    lifts: list[UserLift] = Field(default_factory=list)
    secondary_lifts: list[UserLift] = Field(default_factory=list)
    weight_unit_preference: WeightUnit = "lbs"


class UserProgress(BaseModel):
    workout_id: str
    personal_record: float
    percentile_ranking: int = Field(ge=0, le=99)
    strength_level: StrengthTier
    last_updated: datetime.datetime | None = None


class ExerciseTemplate(BaseModel):
    id: str
    sets: int = Field(ge=1)
    reps: Union[int, str] = 8


class WorkoutTemplate(BaseModel):
    """A generated workout the session is built from."""

    id: str
    title: str
    exercises: list[ExerciseTemplate] = Field(min_length=1)


class ExerciseStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class SessionStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHING = "finishing"
    FINISHED = "finished"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class WorkoutSetCompletion:
    set_number: int
    weight: float
    reps: int
    unit: str = "lbs"
    completed: bool = True
    rest_start_time: datetime.datetime | None = None

    @property
    def volume(self) -> float:
        return self.weight * self.reps if self.completed else 0.0


@dataclass(frozen=True)
class ExerciseProgress:
    id: str
    target_sets: int
    target_reps: Union[int, str]
    completed_sets: tuple[WorkoutSetCompletion, ...] = ()

    @property
    def is_completed(self) -> bool:
        return len(self.completed_sets) >= self.target_sets

    @property
    def status(self) -> ExerciseStatus:
        if self.is_completed:
            return ExerciseStatus.COMPLETED
        if any(s.completed for s in self.completed_sets):
            return ExerciseStatus.IN_PROGRESS
        return ExerciseStatus.PENDING

    @classmethod
    def from_template(cls, template: ExerciseTemplate) -> "ExerciseProgress":
        return cls(id=template.id, target_sets=template.sets, target_reps=template.reps)


@dataclass(frozen=True)
class ActiveWorkoutSession:
    id: str
    workout_id: str
    title: str
    start_time: datetime.datetime
    exercises: tuple[ExerciseProgress, ...]
    current_exercise_index: int = 0

    @property
    def current_exercise(self) -> ExerciseProgress:
        return self.exercises[self.current_exercise_index]

    @property
    def is_last_exercise(self) -> bool:
        return self.current_exercise_index >= len(self.exercises) - 1


@dataclass(frozen=True)
class PersonalRecord:
    exercise_id: str
    weight: float
    reps: int
    unit: str
    estimated_one_rm: float
    previous_record: float | None
    lift_type: str


@dataclass(frozen=True)
class SessionStats:
    duration: int
    duration_seconds: float
    total_sets: int
    total_volume: float
    progress_updates: int


@dataclass(frozen=True)
class FinishResult:
    session: ActiveWorkoutSession
    stats: SessionStats
    personal_records: tuple[PersonalRecord, ...] = field(default=())
