"""Pydantic schemas for user registration, login, updates and output."""
from datetime import datetime

from pydantic import BaseModel, Field

from mlcourse.models.user import User


class UserRegisterSchema(BaseModel):
    # All optional so that missing fields produce the 400 envelope, not a 422
    name: str | None = None
    age: int | None = None
    phone: str | None = None
    username: str | None = None
    password: str | None = None


class LoginSchema(BaseModel):
    username: str | None = None
    password: str | None = None


class ProgressUpdateSchema(BaseModel):
    foundation: int | None = None
    beginner: int | None = None
    intermediate: int | None = None
    advance: int | None = None

    class Config:
        extra = "ignore"


class UserUpdateSchema(BaseModel):
    name: str | None = None
    age: int | None = None
    phone: str | None = None
    username: str | None = None
    password: str | None = None
    admin: bool | None = None
    progress: ProgressUpdateSchema | None = None

    class Config:
        extra = "ignore"


class ProgressSchema(BaseModel):
    foundation: int = 0
    beginner: int = 0
    intermediate: int = 0
    advance: int = 0
    total: int = 0


class UserOutSchema(BaseModel):
    internal_id: str = Field(serialization_alias="_id")
    id: str
    name: str
    age: int
    phone: str
    username: str
    password: str
    progress: ProgressSchema
    admin: bool = False
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(default=None, serialization_alias="updatedAt")
    total: int = 0

    @classmethod
    def from_user(cls, user: User) -> "UserOutSchema":
        progress = ProgressSchema(
            foundation=user.progress_foundation or 0,
            beginner=user.progress_beginner or 0,
            intermediate=user.progress_intermediate or 0,
            advance=user.progress_advance or 0,
            total=user.progress_total or 0,
        )
        return cls(
            internal_id=str(user.pk),
            id=user.public_id,
            name=user.name,
            age=user.age,
            phone=user.phone,
            username=user.username,
            password=user.password,
            progress=progress,
            admin=bool(user.admin),
            created_at=user.created_at,
            updated_at=user.updated_at,
            total=progress.total,
        )

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
