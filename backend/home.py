"""Home screen view model: day selector, current workout and category grid."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .api_client import ApiConnectionError, LessonsRequestError, YogaApiClient, YogaApiError
from .catalog import WorkoutCatalog
from .categories import list_categories
from .config import DEFAULT_USER_NAME
from .models import Category, UserProfile, Workout
from .personalizer import create_personalized_workouts

logger = logging.getLogger(__name__)

FIRST_DAY = 1
LAST_DAY = 30

STORED_PREFERENCES = UserProfile(
    goals=["растяжка", "гибкость"],
    body_parts=["спина", "ноги"],
)

NETWORK_CHECKLIST = (
    "Проверьте:\n"
    "1. Подключение к интернету\n"
    "2. Сервер запущен\n"
    "3. Устройство и сервер в одной сети\n"
    "4. Правильность IP адреса"
)


@dataclass
class Alert:
    title: str
    message: str
    buttons: List[str] = field(default_factory=lambda: ["OK"])


@dataclass
class Navigation:
    screen: str
    params: Dict[str, Any] = field(default_factory=dict)


ScreenAction = Union[Alert, Navigation]


class HomeViewModel:
    def __init__(
        self,
        client: YogaApiClient,
        user_name: str = DEFAULT_USER_NAME,
        catalog: Optional[WorkoutCatalog] = None,
    ) -> None:
        self.client = client
        self.catalog = catalog
        self.user_name = user_name
        self.current_day = FIRST_DAY
        self.current_workout: Optional[Workout] = None
        self.preferences = UserProfile()
        self.categories: List[Category] = []
        self.loading = True

    # --- day selector ---
    @property
    def can_retreat(self) -> bool:
        return self.current_day > FIRST_DAY

    @property
    def can_advance(self) -> bool:
        return self.current_day < LAST_DAY

    def advance_day(self) -> int:
        if self.can_advance:
            self.current_day += 1
        return self.current_day

    def retreat_day(self) -> int:
        if self.can_retreat:
            self.current_day -= 1
        return self.current_day

    def set_current_workout(self, workout: Optional[Workout]) -> None:
        self.current_workout = workout

    # --- loading ---
    def load(self) -> None:
        self.load_categories()
        self.load_preferences()

    def load_categories(self) -> None:
        self.categories = list_categories()
        self.loading = False

    def load_preferences(self) -> None:
        self.preferences = STORED_PREFERENCES
        try:
            available = self._available_workouts()
            personalized = create_personalized_workouts(self.preferences, available)
        except (YogaApiError, ValueError) as e:
            logger.error("Failed to load preferences: %s", e)
            return
        logger.info("Personalized %d of %d workouts", len(personalized), len(available))
        if personalized:
            self.set_current_workout(personalized[0])

    def _available_workouts(self) -> List[Workout]:
        if self.catalog is not None:
            return list(self.catalog.workouts)
        return self.client.fetch_available_workouts()

    # --- actions ---
    def open_current_workout(self) -> Optional[ScreenAction]:
        if self.current_workout is None:
            return None
        if self.current_day > FIRST_DAY:
            return Alert(
                title="Урок недоступен",
                message=(
                    f"Этот урок будет доступен на {self.current_day} день. "
                    "Продолжайте тренировки, чтобы открыть новые уроки!"
                ),
                buttons=["Понятно"],
            )
        return Navigation("WorkoutDetails", {"workoutId": self.current_workout.id})

    def select_category(self, category: Category) -> ScreenAction:
        try:
            lessons = self.client.fetch_category_lessons(category)
        except LessonsRequestError as e:
            return Alert(
                title="Ошибка при загрузке уроков",
                message=f"{e.message}\n\nStatus: {e.status}\nURL: {e.url}",
            )
        except YogaApiError as e:
            url = e.url if isinstance(e, ApiConnectionError) else self.client.lessons_url(category)
            return Alert(
                title="Ошибка сети",
                message=f"Не удалось подключиться к серверу:\n{e}\n\nURL: {url}\n\n{NETWORK_CHECKLIST}",
            )
        return Navigation(
            "CategoryScreen",
            {"categoryId": category.url, "categoryTitle": category.title, "lessons": lessons},
        )
