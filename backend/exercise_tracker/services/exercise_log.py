from __future__ import annotations
import logging
from datetime import datetime
from typing import Any, Callable

from exercise_tracker.errors import NotFoundError, ValidationError
from exercise_tracker.models import User
from exercise_tracker.parsing import format_date, parse_date, parse_limit, plain_number, to_number, utcnow
from exercise_tracker.repositories.exercise_repo import ExerciseRepository
from exercise_tracker.repositories.user_repo import UserRepository
from exercise_tracker.schemas.exercise import ExerciseRead, LogEntry, LogRead
from exercise_tracker.services import persistence_boundary

log = logging.getLogger(__name__)

# Shared by missing description and unusable duration
MISSING_FIELDS = "description and duration are required"


class ExerciseLog:
    def __init__(
        self,
        users: UserRepository,
        exercises: ExerciseRepository,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.users = users
        self.exercises = exercises
        self.clock = clock

    def _require_user(self, user_id: str) -> User:
        with persistence_boundary("user lookup"):
            user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("user not found")
        return user

    def log_exercise(self, user_id: str, description: Any, duration: Any, date: Any = None) -> ExerciseRead:
        user = self._require_user(user_id)

        text = description.strip() if isinstance(description, str) else ""
        minutes = to_number(duration)
        if not text or not minutes or minutes < 0:
            raise ValidationError(MISSING_FIELDS)

        # Malformed dates fall back to now without complaint
        when = parse_date(date) or self.clock()

        with persistence_boundary("log exercise"):
            ex = self.exercises.create(user.id, description=text, duration=minutes, date=when)
        log.debug("user %s logged exercise %s", user.id, ex.id)

        return ExerciseRead(
            id=user.id,
            username=user.username,
            date=format_date(ex.date),
            duration=plain_number(ex.duration),
            description=ex.description,
        )

    def get_logs(self, user_id: str, date_from: Any = None, date_to: Any = None, limit: Any = None) -> LogRead:
        """A user's exercises, earliest first; unreadable bounds and limits are ignored."""
        user = self._require_user(user_id)

        with persistence_boundary("get logs"):
            entries = self.exercises.find(
                user.id,
                date_from=parse_date(date_from),
                date_to=parse_date(date_to),
                limit=parse_limit(limit),
            )

        return LogRead(
            username=user.username,
            count=len(entries),
            id=user.id,
            log=[
                LogEntry(description=e.description, duration=plain_number(e.duration), date=format_date(e.date))
                for e in entries
            ],
        )
