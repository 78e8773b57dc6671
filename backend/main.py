from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from .api_client import YogaApiClient
from .catalog import CatalogError, WorkoutCatalog
from .categories import UnknownCategoryError, get_category, list_categories
from .config import AppConfig, setup_logging
from .home import STORED_PREFERENCES
from .models import Breathing, Category, Experience, Flexibility, PersonalizeRequest, UserProfile, Workout, WorkoutDuration
from .personalizer import create_personalized_workouts

config = AppConfig.from_env()
setup_logging(config.log_level)

app = FastAPI(title="Yoga Home API", version="0.1.0")

# CORS (allow Streamlit on localhost)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

client = YogaApiClient(config.api_base_url, timeout=config.api_timeout)


@lru_cache(maxsize=None)
def load_catalog(path: str) -> WorkoutCatalog:
    # read once per path; failures are not cached
    return WorkoutCatalog.from_csv(path)


def available_workouts() -> List[Workout]:
    if config.workouts_csv:
        try:
            return load_catalog(config.workouts_csv).workouts
        except CatalogError as e:
            raise HTTPException(status_code=500, detail=str(e))
    return client.fetch_available_workouts()


def profile_from_query(
    workout_duration: WorkoutDuration = STORED_PREFERENCES.workout_duration,
    experience: Experience = STORED_PREFERENCES.experience,
    flexibility: Flexibility = STORED_PREFERENCES.flexibility,
    breathing: Breathing = STORED_PREFERENCES.breathing,
    goals: Optional[List[str]] = Query(default=None),
    body_parts: Optional[List[str]] = Query(default=None),
    limitations: Optional[List[str]] = Query(default=None),
) -> UserProfile:
    return UserProfile(
        workout_duration=workout_duration,
        experience=experience,
        flexibility=flexibility,
        breathing=breathing,
        goals=STORED_PREFERENCES.goals if goals is None else goals,
        body_parts=STORED_PREFERENCES.body_parts if body_parts is None else body_parts,
        limitations=STORED_PREFERENCES.limitations if limitations is None else limitations,
    )


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/categories", response_model=List[Category])
def categories():
    return list_categories()


@app.get("/categories/{slug}", response_model=Category)
def category(slug: str):
    try:
        return get_category(slug)
    except UnknownCategoryError:
        raise HTTPException(status_code=404, detail=f"Unknown category: {slug}")


@app.post("/personalize", response_model=List[Workout])
def personalize(request: PersonalizeRequest):
    return create_personalized_workouts(request.profile, request.workouts)


@app.get("/home/recommendation", response_model=Workout)
def home_recommendation(
    profile: UserProfile = Depends(profile_from_query),
    workouts: List[Workout] = Depends(available_workouts),
):
    personalized = create_personalized_workouts(profile, workouts)
    if not personalized:
        raise HTTPException(status_code=404, detail="No workout matches the profile")
    return personalized[0]
