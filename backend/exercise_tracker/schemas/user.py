from typing import Any
from pydantic import BaseModel, field_validator

class UserCreate(BaseModel):
    # Left optional so an empty or missing name reaches the registry's own check
    username: str | None = None

    @field_validator("username", mode="before")
    @classmethod
    def only_strings(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

class UserRead(BaseModel):
    id: str
    username: str

    model_config = {"from_attributes": True}
