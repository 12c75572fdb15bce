"""Exercise Schemas: creation body, creation response and the log report.

Invariants:
    - ExerciseCreate.description is non-blank; duration is an int after lenient coercion
    - ExerciseCreate.date is text or None; any other JSON value becomes INVALID_DATE
    - LogQuery keeps from/to/limit as raw strings; unparseable values are ignored downstream
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from app.core.domain_types import INVALID_DATE
from app.core.exercise_log import parse_leading_int


class ExerciseCreate(BaseModel):
    """Exercise creation body (JSON or form fields)."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    description: str = Field(min_length=1)
    duration: int
    date: str | None = None

    @field_validator("duration", mode="before")
    @classmethod
    def coerce_duration(cls, v: object) -> int:
        duration = parse_leading_int(v)
        if duration is None:
            raise PydanticCustomError(
                "duration_not_number", "Duration must be a number",
            )
        return duration

    @field_validator("date", mode="before")
    @classmethod
    def non_text_date_is_invalid(cls, v: object) -> str | None:
        # numbers, booleans, lists: stored as INVALID_DATE rather than rejected
        if v is None or isinstance(v, str):
            return v
        return INVALID_DATE


class ExerciseResponse(BaseModel):
    """Created exercise merged with its owner's id and username."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    description: str
    duration: int
    date: str


class LogQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date_from: str | None = Field(None, alias="from")
    date_to: str | None = Field(None, alias="to")
    limit: str | None = None


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class ExerciseLogResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    count: int
    log: list[LogEntry]
