from typing import Any
from pydantic import BaseModel, field_validator

Number = int | float

class ExerciseCreate(BaseModel):
    # Raw client values: the exercise log validates after resolving the user
    description: str | None = None
    duration: Any = None
    date: Any = None

    @field_validator("description", mode="before")
    @classmethod
    def only_strings(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

class ExerciseRead(BaseModel):
    id: str  # the owning user's id
    username: str
    date: str
    duration: Number
    description: str

class LogEntry(BaseModel):
    description: str
    duration: Number
    date: str

class LogRead(BaseModel):
    username: str
    count: int
    id: str
    log: list[LogEntry]
