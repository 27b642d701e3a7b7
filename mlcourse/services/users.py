"""User account operations shared by the REST API and the web pages.

Every operation raises a UserServiceError subclass on failure; callers decide
how to present it (JSON envelope or an error banner).
"""
import logging
import uuid
from typing import Any

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mlcourse.core.security import (
    MAX_PASSWORD_BYTES,
    create_access_token,
    hash_password,
    verify_password,
)
from mlcourse.models.user import User
from mlcourse.schemas.user import LoginSchema, UserRegisterSchema, UserUpdateSchema
from mlcourse.services.progress import Level, progress_update_for

logger = logging.getLogger(__name__)

REQUIRED_REGISTRATION_FIELDS = ("name", "age", "phone", "username", "password")


class UserServiceError(Exception):
    pass


class MissingFieldsError(UserServiceError):
    def __init__(self, fields):
        super().__init__(f"Missing required fields: {', '.join(fields)}")
        self.fields = list(fields)


class PasswordTooLongError(UserServiceError):
    pass


class UsernameTakenError(UserServiceError):
    pass


class UserNotFoundError(UserServiceError):
    pass


class IncorrectPasswordError(UserServiceError):
    pass


class NoUsersError(UserServiceError):
    pass


class InvalidUpdateError(UserServiceError):
    def __init__(self, errors):
        super().__init__("Invalid update fields")
        self.errors = errors


class DuplicateKeyError(UserServiceError):
    pass


def _check_password_length(password: str) -> None:
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise PasswordTooLongError(f"Password exceeds {MAX_PASSWORD_BYTES} bytes")


async def list_users(db: AsyncSession) -> list[User]:
    """Return every user. An empty collection is reported as an error."""
    result = await db.execute(select(User).order_by(User.pk))
    users = list(result.scalars().all())
    if not users:
        raise NoUsersError("No users found")
    return users


async def get_user(db: AsyncSession, public_id: str) -> User:
    result = await db.execute(select(User).where(User.public_id == public_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise UserNotFoundError(public_id)
    return user


async def find_by_username(db: AsyncSession, username: str) -> User | None:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, data: UserRegisterSchema) -> User:
    missing = [field for field in REQUIRED_REGISTRATION_FIELDS if not getattr(data, field)]
    if missing:
        raise MissingFieldsError(missing)
    _check_password_length(data.password)

    if await find_by_username(db, data.username):
        raise UsernameTakenError(data.username)

    user = User(
        public_id=str(uuid.uuid4()),
        name=data.name,
        age=data.age,
        phone=data.phone,
        username=data.username,
        password=hash_password(data.password),
        progress_foundation=0,
        progress_beginner=0,
        progress_intermediate=0,
        progress_advance=0,
    )
    user.recompute_progress_total()
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as exc:
        # lost a race against a concurrent registration
        await db.rollback()
        raise UsernameTakenError(data.username) from exc
    await db.refresh(user)

    logger.info("Registered user %s (%s)", user.username, user.public_id)
    return user


async def authenticate(db: AsyncSession, data: LoginSchema) -> tuple[User, str]:
    """Check credentials and return the user with a freshly signed token."""
    if not data.username or not data.password:
        raise MissingFieldsError([f for f in ("username", "password") if not getattr(data, f)])

    user = await find_by_username(db, data.username)
    if user is None:
        raise UserNotFoundError(data.username)
    if not verify_password(data.password, user.password):
        raise IncorrectPasswordError(data.username)

    logger.info("User %s logged in", user.public_id)
    return user, create_access_token(user.public_id)


def normalize_update(body: dict[str, Any]) -> UserUpdateSchema:
    """Validate a partial update.

    Accepts flat fields, dotted "progress.<category>" keys and a nested partial
    "progress" object. Unknown keys and derived fields (total, id, timestamps)
    are dropped.
    """
    flat: dict[str, Any] = {}
    progress: dict[str, Any] = {}
    for key, value in body.items():
        if key.startswith("progress."):
            progress[key.split(".", 1)[1]] = value
        elif key == "progress" and isinstance(value, dict):
            progress.update(value)
        else:
            flat[key] = value
    if progress:
        flat["progress"] = progress
    try:
        return UserUpdateSchema.model_validate(flat)
    except ValidationError as exc:
        raise InvalidUpdateError(exc.errors()) from exc


async def update_user(db: AsyncSession, public_id: str, body: dict[str, Any]) -> User:
    user = await get_user(db, public_id)
    values = normalize_update(body).model_dump(exclude_none=True)
    progress = values.pop("progress", {})

    if "password" in values:
        _check_password_length(values["password"])
        values["password"] = hash_password(values["password"])
    for field, value in values.items():
        setattr(user, field, value)
    for category, value in progress.items():
        setattr(user, f"progress_{category}", value)
    user.recompute_progress_total()

    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise DuplicateKeyError(str(exc.orig)) from exc
    await db.refresh(user)

    logger.info("Updated user %s: %s", public_id, sorted(list(values) + [f"progress.{c}" for c in progress]))
    return user


async def record_quiz_pass(db: AsyncSession, public_id: str, level: Level) -> User:
    """Apply the fixed progress increment for a passed level quiz."""
    return await update_user(db, public_id, progress_update_for(level))


async def delete_user(db: AsyncSession, public_id: str) -> User:
    user = await get_user(db, public_id)
    await db.delete(user)
    await db.commit()
    logger.info("Deleted user %s", public_id)
    return user
