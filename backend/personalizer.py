from __future__ import annotations

import logging
import math
from typing import Dict, List, Sequence, Tuple

from .models import Breathing, Exercise, Experience, Flexibility, UserProfile, Workout, WorkoutDuration

logger = logging.getLogger(__name__)


DURATION_RANGES: Dict[WorkoutDuration, Tuple[int, int]] = {
    WorkoutDuration.SHORT: (10, 20),
    WorkoutDuration.MEDIUM: (20, 40),
    WorkoutDuration.LONG: (40, 60),
}

INTENSITY_LEVELS: Dict[Experience, int] = {
    Experience.BEGINNER: 1,
    Experience.INTERMEDIATE: 2,
    Experience.ADVANCED: 3,
    Experience.EXPERT: 4,
    Experience.PRO: 5,
}

FLEXIBILITY_FACTORS: Dict[Flexibility, float] = {
    Flexibility.VERY_POOR: 0.7,
    Flexibility.POOR: 0.7,
    Flexibility.EXCELLENT: 1.2,
}

BREATHING_FACTORS: Dict[Breathing, float] = {
    Breathing.BAD: 0.8,
    Breathing.GOOD: 1.1,
}


def _contains_any(text: str, needles: Sequence[str]) -> bool:
    haystack = text.lower()
    return any(n.lower() in haystack for n in needles)


def mean_exercise_duration(workout: Workout) -> float:
    if not workout.exercises:
        raise ValueError(f"Workout {workout.id!r} has no exercises")
    return sum(ex.duration for ex in workout.exercises) / len(workout.exercises)


def scale_duration(duration: int, factor: float | None) -> int:
    """Scale minutes by ``factor`` and floor; ``None`` leaves the value untouched."""
    if factor is None:
        return duration
    return math.floor(duration * factor)


class Personalizer:
    """Filters, orders and rescales candidate workouts for one user profile.

    Stages run in order over the survivors of the previous stage:
    duration range, contraindications, goals/body parts, experience
    ordering, then the flexibility and breathing duration adjustments.
    The two adjustments are floored one after the other.
    """

    def personalize(self, profile: UserProfile, workouts: Sequence[Workout]) -> List[Workout]:
        pool = self._filter_by_duration(profile, workouts)
        logger.debug("duration filter kept %d of %d workouts", len(pool), len(workouts))
        pool = self._filter_contraindications(profile, pool)
        logger.debug("contraindication filter kept %d", len(pool))
        pool = self._filter_by_goals(profile, pool)
        logger.debug("goal/body-part filter kept %d", len(pool))
        pool = self._sort_by_experience(profile, pool)
        pool = [self._adjust(w, FLEXIBILITY_FACTORS.get(profile.flexibility)) for w in pool]
        return [self._adjust(w, BREATHING_FACTORS.get(profile.breathing)) for w in pool]

    # --- internals ---
    def _filter_by_duration(self, profile: UserProfile, workouts: Sequence[Workout]) -> List[Workout]:
        lo, hi = DURATION_RANGES[profile.workout_duration]
        return [w for w in workouts if lo <= w.duration <= hi]

    def _filter_contraindications(self, profile: UserProfile, workouts: Sequence[Workout]) -> List[Workout]:
        return [
            w for w in workouts
            if not any(_contains_any(ex.name, profile.limitations) for ex in w.exercises)
        ]

    def _filter_by_goals(self, profile: UserProfile, workouts: Sequence[Workout]) -> List[Workout]:
        return [
            w for w in workouts
            if _contains_any(w.title, profile.goals) or _contains_any(w.title, profile.body_parts)
        ]

    def _sort_by_experience(self, profile: UserProfile, workouts: Sequence[Workout]) -> List[Workout]:
        level = INTENSITY_LEVELS[profile.experience]
        # sorted() is stable, ties keep their input order
        return sorted(workouts, key=lambda w: abs(mean_exercise_duration(w) - level))

    def _adjust(self, workout: Workout, factor: float | None) -> Workout:
        exercises = [
            Exercise(name=ex.name, duration=scale_duration(ex.duration, factor), video_url=ex.video_url)
            for ex in workout.exercises
        ]
        return workout.model_copy(update={"exercises": exercises})


def create_personalized_workouts(profile: UserProfile, workouts: Sequence[Workout]) -> List[Workout]:
    return Personalizer().personalize(profile, workouts)
