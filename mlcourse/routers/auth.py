"""Auth pages: login, register, logout. The issued JWT is kept in a secure cookie."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mlcourse.core.config import BASE_DIR, get_settings
from mlcourse.core.session import Session, get_session
from mlcourse.db.session import get_db
from mlcourse.models.user import User
from mlcourse.schemas.user import LoginSchema, UserRegisterSchema
from mlcourse.services.users import (
    IncorrectPasswordError,
    MissingFieldsError,
    PasswordTooLongError,
    UsernameTakenError,
    UserNotFoundError,
    authenticate,
    get_user,
    register_user,
)

router = APIRouter()
settings = get_settings()
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error occurred"

# Error codes carried in the redirect query string
ERROR_MESSAGES = {
    "missing": "Please complete all the required fields.",
    "credentials": "Please provide both the username and the password.",
    "not_found": "User not found",
    "password": "Your password is incorrect",
    "exists": "Username already exists. Please login",
    "mismatch": "Passwords don't match",
    "toolong": "Password is too long (max 72 bytes).",
    "invalid": "Please check the values you entered.",
}


def _redirect(url, **params) -> RedirectResponse:
    """303 redirect with query params."""
    return RedirectResponse(url.include_query_params(**params), status_code=303)


def error_message(code: str | None) -> str | None:
    if not code:
        return None
    return ERROR_MESSAGES.get(code, GENERIC_ERROR)


async def get_current_user_optional(
    db: Annotated[AsyncSession, Depends(get_db)],
    session: Annotated[Session | None, Depends(get_session)],
) -> User | None:
    """Return the logged-in user, fetched once for this request; else None."""
    if session is None:
        return None
    try:
        return await get_user(db, session.user_id)
    except UserNotFoundError:
        return None


@router.get("/login", response_class=HTMLResponse)
def login_get(
    request: Request,
    session: Annotated[Session | None, Depends(get_session)],
    error: str | None = None,
    registered: int = 0,
):
    """Show login form."""
    return templates.TemplateResponse(
        request,
        "login.html",
        {
            "is_guest": session is None,
            "error": error_message(error),
            "notice": "User has been successfully registered" if registered else None,
        },
    )


@router.post("/login", response_class=RedirectResponse)
async def login_post(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """Authenticate and set the auth cookie; redirect to the welcome page."""
    try:
        _, token = await authenticate(db, LoginSchema(username=username.strip(), password=password))
    except MissingFieldsError:
        return _redirect(request.url_for("login_get"), error="credentials")
    except UserNotFoundError:
        return _redirect(request.url_for("login_get"), error="not_found")
    except IncorrectPasswordError:
        return _redirect(request.url_for("login_get"), error="password")
    except SQLAlchemyError:
        logger.exception("Error logging in user")
        return _redirect(request.url_for("login_get"), error="server")

    response = RedirectResponse(request.url_for("welcome"), status_code=303)
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.auth_cookie_max_age,
        httponly=True,
        samesite="lax",
        path="/",
    )
    return response


@router.get("/register", response_class=HTMLResponse)
def register_get(
    request: Request,
    session: Annotated[Session | None, Depends(get_session)],
    error: str | None = None,
):
    """Show register form."""
    return templates.TemplateResponse(
        request,
        "register.html",
        {"is_guest": session is None, "error": error_message(error)},
    )


@router.post("/register", response_class=RedirectResponse)
async def register_post(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    name: Annotated[str, Form()] = "",
    username: Annotated[str, Form()] = "",
    phone: Annotated[str, Form()] = "",
    age: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    confirm_password: Annotated[str, Form()] = "",
):
    """Create the account, then send the user to the login form."""
    if password != confirm_password:
        return _redirect(request.url_for("register_get"), error="mismatch")

    try:
        data = UserRegisterSchema(
            name=name.strip(),
            username=username.strip(),
            phone=phone.strip(),
            age=age.strip() or None,
            password=password,
        )
        await register_user(db, data)
    except ValidationError:
        return _redirect(request.url_for("register_get"), error="invalid")
    except MissingFieldsError:
        return _redirect(request.url_for("register_get"), error="missing")
    except PasswordTooLongError:
        return _redirect(request.url_for("register_get"), error="toolong")
    except UsernameTakenError:
        return _redirect(request.url_for("register_get"), error="exists")
    except SQLAlchemyError:
        logger.exception("Error registering user")
        return _redirect(request.url_for("register_get"), error="server")

    return _redirect(request.url_for("login_get"), registered=1)


@router.post("/logout", response_class=RedirectResponse)
def logout_post(request: Request):
    """Clear auth cookie and redirect to home."""
    response = RedirectResponse(request.url_for("home"), status_code=303)
    # path must match the one used in set_cookie()
    response.delete_cookie(settings.auth_cookie_name, path="/")
    response.delete_cookie(settings.quiz_cookie_name, path="/")
    return response
