from __future__ import annotations
from typing import Any
from fastapi import APIRouter, Depends, Query

from exercise_tracker.deps.payload import read_payload
from exercise_tracker.deps.services import get_exercise_log
from exercise_tracker.schemas.exercise import ExerciseCreate, ExerciseRead, LogRead
from exercise_tracker.services.exercise_log import ExerciseLog

router = APIRouter(prefix="/api/users", tags=["exercises"])

@router.post("/{user_id}/exercises", response_model=ExerciseRead)
def log_exercise(
    user_id: str,
    payload: dict[str, Any] = Depends(read_payload),
    exercises: ExerciseLog = Depends(get_exercise_log),
):
    data = ExerciseCreate.model_validate(payload)
    return exercises.log_exercise(user_id, data.description, data.duration, data.date)

@router.get("/{user_id}/logs", response_model=LogRead)
def get_logs(
    user_id: str,
    date_from: str | None = Query(None, alias="from"),
    date_to: str | None = Query(None, alias="to"),
    # Kept as text: unreadable limits mean "no limit", not a 422
    limit: str | None = Query(None),
    exercises: ExerciseLog = Depends(get_exercise_log),
):
    return exercises.get_logs(user_id, date_from=date_from, date_to=date_to, limit=limit)
