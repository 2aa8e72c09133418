class SessionError(Exception):
    """Base class for workout session failures."""


class SessionStateError(SessionError):
    """Operation is not allowed in the session's current state."""


class InvalidSetError(SessionError, ValueError):
    def __init__(self, weight: float, reps: int):
        super().__init__(f"a set needs positive weight and reps, got {weight} x {reps}")
        self.weight = weight
        self.reps = reps


class SetIndexError(SessionError, IndexError):
    def __init__(self, set_index: int, size: int):
        super().__init__(f"set index {set_index} out of range for {size} recorded sets")
        self.set_index = set_index


class ExerciseIndexError(SessionError, IndexError):
    def __init__(self, exercise_index: int, size: int):
        super().__init__(f"exercise index {exercise_index} out of range for {size} exercises")
        self.exercise_index = exercise_index


class WorkoutNotFoundError(SessionError, LookupError):
    def __init__(self, workout_id: str):
        super().__init__(f"workout {workout_id!r} not found")
        self.workout_id = workout_id


class SessionFinishError(SessionError):
    """Finishing failed; the session is left in progress."""
