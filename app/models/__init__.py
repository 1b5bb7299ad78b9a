from app.models.profile import Profile
from app.models.workout import Workout, Exercise, WorkoutExercise
from app.models.workout_log import WorkoutLog, ExerciseScore

__all__ = [
    "Profile",
    "Workout", "Exercise", "WorkoutExercise",
    "WorkoutLog", "ExerciseScore",
]
