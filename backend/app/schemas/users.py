"""User Schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCreate(BaseModel):
    """User creation body; username must contain something besides whitespace."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    username: str

    @field_validator("username")
    @classmethod
    def reject_blank_username(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("username cannot be empty or whitespace")
        return v


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
