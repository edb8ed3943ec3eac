from __future__ import annotations
import logging
from typing import Any

from exercise_tracker.errors import ConflictRecoveredError, ServerError, ValidationError
from exercise_tracker.repositories.user_repo import UserRepository
from exercise_tracker.schemas.user import UserRead
from exercise_tracker.services import persistence_boundary

log = logging.getLogger(__name__)


class UserRegistry:
    def __init__(self, users: UserRepository):
        self.users = users

    def register(self, username: Any) -> UserRead:
        """
        Store a user under the trimmed ``username``.

        Registering a name that already exists returns the stored user
        instead of failing, so repeated calls yield the same id.
        """
        name = username.strip() if isinstance(username, str) else ""
        if not name:
            raise ValidationError("username is required")

        with persistence_boundary("register"):
            result = self.users.create(username=name)
            user = result.entity
            if result.duplicate:
                log.info("%s: %r, returning stored user", ConflictRecoveredError.default_message, name)
                user = self.users.get_by_username(name)

        if user is None:
            # Lost the insert race but the winner is not visible yet
            log.error("username %r reported as duplicate but lookup found nothing", name)
            raise ServerError()
        return UserRead.model_validate(user)

    def list_users(self) -> list[UserRead]:
        with persistence_boundary("list users"):
            users = self.users.list()
        return [UserRead.model_validate(u) for u in users]
