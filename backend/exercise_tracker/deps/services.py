# exercise_tracker/deps/services.py
from fastapi import Depends
from sqlalchemy.orm import Session

from exercise_tracker.db import get_db
from exercise_tracker.repositories.exercise_repo import ExerciseRepository
from exercise_tracker.repositories.user_repo import UserRepository
from exercise_tracker.services.exercise_log import ExerciseLog
from exercise_tracker.services.registry import UserRegistry

def get_registry(db: Session = Depends(get_db)) -> UserRegistry:
    return UserRegistry(UserRepository(db))

def get_exercise_log(db: Session = Depends(get_db)) -> ExerciseLog:
    return ExerciseLog(UserRepository(db), ExerciseRepository(db))
