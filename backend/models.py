import math
import re
from enum import Enum
from typing import List, Optional, Any, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkoutDuration(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class Experience(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"
    PRO = "pro"


class Flexibility(str, Enum):
    VERY_POOR = "very_poor"
    POOR = "poor"
    AVERAGE = "average"
    GOOD = "good"
    EXCELLENT = "excellent"


class Breathing(str, Enum):
    GOOD = "good"
    MIDDLE = "middle"
    BAD = "bad"


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_minutes(value: Any) -> int:
    """Leading integer of a number or a label such as "30 мин"."""
    if isinstance(value, bool):
        raise ValueError("duration must be a number of minutes")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError("duration must be a finite number of minutes")
        return int(value)
    match = _LEADING_INT.match(str(value))
    if match is None:
        raise ValueError(f"duration has no leading number of minutes: {value!r}")
    return int(match.group(1))


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    workout_duration: WorkoutDuration = Field(default=WorkoutDuration.MEDIUM, description="short | medium | long")
    experience: Experience = Field(default=Experience.BEGINNER, description="beginner | intermediate | advanced | expert | pro")
    flexibility: Flexibility = Field(default=Flexibility.AVERAGE, description="very_poor | poor | average | good | excellent")
    breathing: Breathing = Field(default=Breathing.MIDDLE, description="good | middle | bad")
    goals: List[str] = Field(default_factory=list)
    body_parts: List[str] = Field(default_factory=list)
    limitations: List[str] = Field(default_factory=list, description="exercises or conditions to avoid")


class Exercise(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    duration: int = Field(ge=0, description="minutes")
    video_url: Optional[str] = None


class Workout(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    duration: int = Field(ge=0, description="minutes")
    calories: Union[int, float] = 0
    image: Optional[str] = None
    exercises: List[Exercise] = Field(min_length=1)

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, v: Any) -> Any:
        # upstream ids are integers
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("duration", mode="before")
    @classmethod
    def _parse_duration(cls, v: Any) -> int:
        return parse_minutes(v)

    @property
    def duration_label(self) -> str:
        return f"{self.duration} мин"


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    image: str
    url: str


class PersonalizeRequest(BaseModel):
    profile: UserProfile = Field(default_factory=UserProfile)
    workouts: List[Workout] = Field(default_factory=list)
