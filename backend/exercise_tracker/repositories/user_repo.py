# exercise_tracker/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from exercise_tracker.models import User
from exercise_tracker.repositories.base import BaseRepository, CreateResult

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(User).where(User.username == username)
        return self.db.execute(stmt).scalar_one_or_none()

    def list(self) -> list[User]:
        # No ORDER BY: enumeration order is whatever the database yields
        return list(self.db.execute(select(User)).scalars().all())

    # WRITES
    def create(self, *, username: str) -> CreateResult[User]:
        try:
            user = self.add_and_refresh(User(username=username))
        except IntegrityError:
            self.db.rollback()
            return CreateResult(duplicate=True)
        return CreateResult(entity=user)
