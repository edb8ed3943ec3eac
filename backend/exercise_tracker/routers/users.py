from __future__ import annotations
from typing import Any
from fastapi import APIRouter, Depends

from exercise_tracker.deps.payload import read_payload
from exercise_tracker.deps.services import get_registry
from exercise_tracker.schemas.user import UserCreate, UserRead
from exercise_tracker.services.registry import UserRegistry

router = APIRouter(prefix="/api/users", tags=["users"])

@router.post("", response_model=UserRead)
def register(
    payload: dict[str, Any] = Depends(read_payload),
    registry: UserRegistry = Depends(get_registry),
):
    data = UserCreate.model_validate(payload)
    return registry.register(data.username)

@router.get("", response_model=list[UserRead])
def list_users(registry: UserRegistry = Depends(get_registry)):
    # Order is whatever the database enumerates; callers must not rely on it
    return registry.list_users()
