from .user import User
from .exercise import Exercise

__all__ = ["User", "Exercise"]
