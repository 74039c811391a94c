"""Pydantic models for the simple list boards."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class Announcement(BaseModel):
    """An announcement keyed by a caller-supplied integer id."""

    announcement_id: int = Field(..., description="Caller-supplied unique id")
    author: str = Field(..., description="Author name")
    content: str = Field(..., description="Announcement text")
    posted_at: str = Field(..., description="Display time, never parsed")


class UserRole(str, Enum):
    """Directory roles."""

    ADMIN = "admin"
    USER = "user"

    @classmethod
    def _missing_(cls, value: object) -> "UserRole | None":
        if isinstance(value, str):
            for member in cls:
                if member.value == value.strip().lower():
                    return member
        return None


class User(BaseModel):
    """
    A directory user.

    Users are identified by name; the same name may appear once per role.
    """

    name: str = Field(..., description="User name (lookup key)")
    email: str = Field(..., description="Email address")
    password: SecretStr = Field(..., description="Password, hidden in repr/dumps")
    role: UserRole = Field(default=UserRole.USER, description="Directory role")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "alice",
                "email": "alice@example.com",
                "password": "**********",
                "role": "admin",
            }
        }
    )
