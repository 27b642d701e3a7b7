"""REST API for user accounts: register, login, list, fetch, update, delete.

Every response is a {success, message, data} envelope. Handlers convert user
service errors locally; only the token check aborts through ApiError.
"""
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Header, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mlcourse.core.errors import ApiError, envelope, error_details
from mlcourse.core.security import decode_access_token
from mlcourse.db.session import get_db
from mlcourse.schemas.user import LoginSchema, UserOutSchema, UserRegisterSchema
from mlcourse.services.users import (
    DuplicateKeyError,
    IncorrectPasswordError,
    InvalidUpdateError,
    MissingFieldsError,
    NoUsersError,
    PasswordTooLongError,
    UsernameTakenError,
    UserNotFoundError,
    authenticate,
    delete_user,
    get_user,
    list_users,
    register_user,
    update_user,
)

router = APIRouter(prefix="/user", tags=["users"])
logger = logging.getLogger(__name__)


def verify_token(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Require "Authorization: Bearer <jwt>"; expose the user id on request.state."""
    if not authorization:
        raise ApiError(401, "Access Denied!")

    parts = authorization.split()
    payload = decode_access_token(parts[1]) if len(parts) > 1 else None
    if not payload or "userId" not in payload:
        raise ApiError(401, "Invalid Token")

    request.state.user_id = payload["userId"]
    return payload["userId"]


def _user_json(user) -> dict[str, Any]:
    return UserOutSchema.from_user(user).to_json()


@router.post("/login")
async def login_user(
    body: LoginSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    try:
        _, token = await authenticate(db, body)
    except MissingFieldsError:
        return envelope(400, False, "Please provide both the username and the password.", include_data=False)
    except UserNotFoundError:
        return envelope(404, False, "User not found", include_data=False)
    except IncorrectPasswordError:
        return envelope(400, False, "Your password is incorrect", include_data=False)
    except SQLAlchemyError as exc:
        logger.exception("Error logging in user")
        return envelope(500, False, "Unable to login", error_details(exc))
    return envelope(200, True, "Login successful", f"Bearer {token}")


@router.get("")
async def get_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    _: Annotated[str, Depends(verify_token)],
):
    try:
        users = await list_users(db)
    except (NoUsersError, SQLAlchemyError) as exc:
        logger.error("Error fetching users: %s", exc)
        return envelope(500, False, "Unable to retrieve users from the database!", error_details(exc))
    return envelope(200, True, "Successfully retrieved users from the database!", [_user_json(u) for u in users])


@router.post("")
async def register(
    body: UserRegisterSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    try:
        user = await register_user(db, body)
    except MissingFieldsError:
        return envelope(400, False, "Please complete all the required fields.", include_data=False)
    except PasswordTooLongError:
        return envelope(400, False, "Password is too long (max 72 bytes).", include_data=False)
    except UsernameTakenError:
        return envelope(400, False, "Username already exists. Please login", include_data=False)
    except SQLAlchemyError as exc:
        logger.exception("Error registering user")
        return envelope(500, False, "Unable to create the user", error_details(exc))
    return envelope(201, True, "User has been successfully registered", _user_json(user))


@router.get("/{user_id}")
async def get_user_by_id(
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    try:
        user = await get_user(db, user_id)
    except UserNotFoundError:
        return envelope(404, False, "User not found!", None)
    except SQLAlchemyError as exc:
        logger.exception("Error fetching user")
        return envelope(500, False, "Unable to get the user from the database", error_details(exc))
    return envelope(200, True, "Successfully retrieved the user from the database", _user_json(user))


@router.put("/{user_id}")
async def update_user_by_id(
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    body: Annotated[dict[str, Any], Body()],
):
    try:
        user = await update_user(db, user_id, body)
    except UserNotFoundError:
        return envelope(404, False, "User not found.", include_data=False)
    except InvalidUpdateError as exc:
        errors = [{"loc": list(e.get("loc", ())), "msg": e.get("msg", "")} for e in exc.errors]
        return envelope(400, False, "Invalid update fields.", errors)
    except PasswordTooLongError:
        return envelope(400, False, "Password is too long (max 72 bytes).", include_data=False)
    except DuplicateKeyError:
        return envelope(
            400,
            False,
            "Duplicate key error. The provided phone number or email is already in use.",
            include_data=False,
        )
    except SQLAlchemyError as exc:
        logger.exception("Error updating user")
        return envelope(500, False, "Unable to update the user", error_details(exc))
    return envelope(200, True, "User successfully updated.", _user_json(user))


@router.delete("/{user_id}")
async def delete_user_by_id(
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    _: Annotated[str, Depends(verify_token)],
):
    try:
        user = await delete_user(db, user_id)
    except UserNotFoundError:
        return envelope(404, False, "User not found!", include_data=False)
    except SQLAlchemyError as exc:
        logger.exception("Error deleting user")
        return envelope(500, False, "Unable to delete the user", error_details(exc))
    return envelope(200, True, "User successfully deleted.", _user_json(user))
