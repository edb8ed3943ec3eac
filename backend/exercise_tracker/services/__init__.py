"""
Service layer: the user registry and the exercise log.

Each service holds the repositories it was built with; routers get them
through the dependencies in ``exercise_tracker.deps.services``.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from exercise_tracker.errors import ServerError

log = logging.getLogger(__name__)


@contextmanager
def persistence_boundary(action: str) -> Iterator[None]:
    """Downgrade database failures to ServerError; the detail is logged, not returned."""
    try:
        yield
    except SQLAlchemyError as exc:
        log.exception("%s failed", action)
        raise ServerError() from exc
