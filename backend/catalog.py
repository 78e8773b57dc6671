from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

import pandas as pd

from .api_client import workout_from_record
from .models import Workout

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["workout_id", "title", "duration", "calories", "exercise_name", "exercise_duration"]


class CatalogError(Exception):
    pass


class WorkoutCatalog:
    """Offline workouts read from a long-format CSV, one row per exercise."""

    def __init__(self, workouts: List[Workout]) -> None:
        self.workouts = workouts

    def __len__(self) -> int:
        return len(self.workouts)

    @staticmethod
    def from_csv(path: str) -> "WorkoutCatalog":
        if not os.path.exists(path):
            raise CatalogError(f"Workout catalog not found: {path}")
        try:
            df = pd.read_csv(path, dtype={"workout_id": str})
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            raise CatalogError(f"Failed to read workout catalog {path}: {e}") from e
        # Normalize columns for safer access
        df.columns = [str(c).strip() for c in df.columns]
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise CatalogError(f"Workout catalog {path} is missing columns: {missing}")
        return WorkoutCatalog(WorkoutCatalog._build(df))

    @staticmethod
    def _build(df: pd.DataFrame) -> List[Workout]:
        workouts: List[Workout] = []
        # sort=False keeps first-appearance order of workouts
        for workout_id, rows in df.groupby("workout_id", sort=False):
            first = rows.iloc[0]
            record: Dict[str, Any] = {
                "id": str(workout_id),
                "title": _cell(first, "title") or "",
                "duration": _cell(first, "duration"),
                "calories": _cell(first, "calories") or 0,
                "exercises": [
                    {
                        "name": _cell(r, "exercise_name") or "",
                        "duration": _cell(r, "exercise_duration"),
                        "video_url": _cell(r, "video_url"),
                    }
                    for _, r in rows.iterrows()
                    if _cell(r, "exercise_name") is not None
                ],
            }
            w = workout_from_record(record)
            if w is not None:
                workouts.append(w)
        logger.info("Catalog holds %d workouts", len(workouts))
        return workouts


def _cell(row: pd.Series, col: str) -> Any:
    if col not in row or pd.isna(row[col]):
        return None
    val = row[col]
    # numpy scalars -> python
    if hasattr(val, "item"):
        val = val.item()
    if isinstance(val, str):
        val = val.strip()
        return val or None
    return val
