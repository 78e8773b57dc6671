"""REST client for the yoga backend (workout listing and category lessons)."""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from .config import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT
from .models import Category, Workout

logger = logging.getLogger(__name__)

DEFAULT_WORKOUT_IMAGE = "current_workout.png"
UNKNOWN_ERROR = "Неизвестная ошибка"


class YogaApiError(Exception):
    """Base exception for backend API errors."""
    pass


class LessonsRequestError(YogaApiError):
    """The lessons endpoint answered with a non-2xx status."""

    def __init__(self, message: str, status: int, reason: str, url: str) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.reason = reason
        self.url = url


class ApiConnectionError(YogaApiError):
    """The request never produced a usable response."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.message = message
        self.url = url


def workout_from_record(record: Dict[str, Any]) -> Optional[Workout]:
    """Map one upstream workout record, or return None if it is unusable."""
    if not isinstance(record, dict):
        logger.warning("Skipping workout record of type %s", type(record).__name__)
        return None
    data = dict(record)
    data.setdefault("image", DEFAULT_WORKOUT_IMAGE)
    try:
        return Workout.model_validate(data)
    except ValidationError as e:
        logger.warning("Skipping invalid workout %r: %s", record.get("id"), e.errors(include_url=False))
        return None


def workouts_from_payload(payload: Any) -> List[Workout]:
    if not isinstance(payload, list):
        logger.error("Expected a list of workouts, got %s", type(payload).__name__)
        return []
    workouts: List[Workout] = []
    for record in payload:
        w = workout_from_record(record)
        if w is not None:
            workouts.append(w)
    return workouts


def error_message_from_response(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError as e:
        logger.error("Failed to parse error response: %s", e)
        return f"Ошибка сервера: {response.status_code} {response.reason}"
    if isinstance(data, dict):
        message = data.get("detail") or data.get("message")
        if message:
            return str(message)
    return UNKNOWN_ERROR


class YogaApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def workouts_url(self) -> str:
        return f"{self.base_url}/api/workouts/"

    def lessons_url(self, category: Category) -> str:
        return f"{self.base_url}/api/lessons/category/{category.url}/"

    def fetch_available_workouts(self) -> List[Workout]:
        """Fetch the workout listing; any failure is logged and yields []."""
        url = self.workouts_url()
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error("Failed to load workouts from %s: %s", url, e)
            return []
        except ValueError as e:
            logger.error("Workout listing from %s is not valid JSON: %s", url, e)
            return []
        workouts = workouts_from_payload(payload)
        logger.info("Loaded %d workouts from %s", len(workouts), url)
        return workouts

    def fetch_category_lessons(self, category: Category) -> Any:
        """Return the decoded lessons payload for a category.

        Raises:
            LessonsRequestError: the server answered with an error status
            ApiConnectionError: the server could not be reached or sent garbage
        """
        url = self.lessons_url(category)
        logger.info("Requesting lessons: %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Network error for %s: %s", url, e)
            raise ApiConnectionError(str(e), url) from e

        logger.info("Response received: status=%s reason=%s", response.status_code, response.reason)
        if not response.ok:
            message = error_message_from_response(response)
            logger.error(
                "API error: status=%s reason=%s url=%s message=%s",
                response.status_code, response.reason, response.url, message,
            )
            raise LessonsRequestError(message, response.status_code, response.reason, url)

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Lessons response from %s is not valid JSON: %s", url, e)
            raise ApiConnectionError(str(e), url) from e
        logger.debug("Received lessons data for %s: %r", category.url, data)
        return data
