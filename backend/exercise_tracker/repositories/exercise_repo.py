from __future__ import annotations
from datetime import datetime
from typing import Optional

from sqlalchemy import select

from exercise_tracker.models import Exercise
from exercise_tracker.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    def find(
        self,
        user_id: str,
        *,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> list[Exercise]:
        """A user's exercises, earliest first, optionally bounded (inclusive) and capped."""
        stmt = select(Exercise).where(Exercise.user_id == user_id)
        if date_from is not None:
            stmt = stmt.where(Exercise.date >= date_from)
        if date_to is not None:
            stmt = stmt.where(Exercise.date <= date_to)
        stmt = stmt.order_by(Exercise.date.asc(), Exercise.id.asc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: str, *, description: str, duration: float, date: datetime) -> Exercise:
        ex = Exercise(user_id=user_id, description=description, duration=duration, date=date)
        return self.add_and_refresh(ex)
