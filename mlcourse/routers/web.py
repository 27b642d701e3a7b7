"""Web routes: home, welcome, content, quizzes, goals, certificate. Jinja2 templates."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mlcourse.core.config import BASE_DIR, get_settings
from mlcourse.core.security import sign_data, unsign_data
from mlcourse.core.session import Session, get_session
from mlcourse.db.session import get_db
from mlcourse.models.user import User
from mlcourse.routers.auth import get_current_user_optional
from mlcourse.services.certificate import (
    CERTIFICATE_FILENAME,
    CertificateNotEarnedError,
    render_certificate,
)
from mlcourse.services.content import TOPICS, get_topic, resolve_content, toggle_topic
from mlcourse.services.goals import (
    DEADLINE_WEEKS,
    GoalLimitError,
    add_goal,
    deadline_label,
    delete_goal,
    dump_goals,
    load_goals,
)
from mlcourse.services.progress import LEVEL_DISPLAY, Level, progress_percentage
from mlcourse.services.quiz import ASSESSMENT, QUIZZES, QuizError, QuizRunner
from mlcourse.services.users import UserServiceError, record_quiz_pass

router = APIRouter()
settings = get_settings()
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))
logger = logging.getLogger(__name__)

GOAL_ERRORS = {
    "invalid": "Please enter a valid goal.",
    "full": "Your goals list is full. Delete a goal to add another.",
}


# ---------- helpers ----------

def _runner_options() -> dict:
    return {
        "question_limit": settings.quiz_demo_question_limit,
        "pass_score": settings.quiz_pass_score,
    }


def load_runner(request: Request, level: str) -> QuizRunner:
    """Runner mounted for level; a missing, tampered or foreign state mounts a fresh one."""
    state = unsign_data(request.cookies.get(settings.quiz_cookie_name))
    runner = QuizRunner.from_state(state, **_runner_options()) if state else None
    if runner is None or runner.level != level:
        runner = QuizRunner(level, **_runner_options())
    return runner


def _save_runner(response: Response, runner: QuizRunner) -> None:
    response.set_cookie(
        key=settings.quiz_cookie_name,
        value=sign_data(runner.to_state()),
        httponly=True,
        samesite="lax",
        path="/",
    )


def _quiz_page_url(request: Request, level: str):
    if level == ASSESSMENT:
        return request.url_for("assessment_quiz")
    return request.url_for("content").include_query_params(topic=level, sub="Quiz")


def _check_quiz_level(level: str, session: Session | None) -> None:
    if level not in QUIZZES:
        raise HTTPException(status_code=404, detail="Quiz not found")
    # level quizzes record progress, so they need a logged-in user
    if level != ASSESSMENT and session is None:
        raise HTTPException(status_code=401, detail="Login required")


async def _record_pending_progress(db: AsyncSession, runner: QuizRunner, user_id: str) -> User | None:
    """Save the progress a passed level quiz owes; None if it could not be saved.

    On failure the runner stays unmarked, so the next render of the quiz page
    tries again.
    """
    try:
        user = await record_quiz_pass(db, user_id, Level(runner.level))
    except (UserServiceError, SQLAlchemyError):
        logger.exception("Error updating progress for %s", user_id)
        return None
    runner.mark_progress_updated()
    return user


def _to_home(request: Request) -> RedirectResponse:
    return RedirectResponse(request.url_for("home"), status_code=303)


def _topic_nav(active: str | None) -> list[dict]:
    nav = []
    for topic in TOPICS:
        next_topic = toggle_topic(active, topic["key"])
        nav.append(
            {
                "key": topic["key"],
                "title": topic["title"],
                "open": topic["key"] == active,
                "toggle_query": {"topic": next_topic} if next_topic else {},
                "subtopics": topic["subtopics"],
            }
        )
    return nav


# ---------- routes ----------

@router.get("/", response_class=PlainTextResponse)
async def index():
    return "App is working..."


@router.get("/home", response_class=HTMLResponse)
async def home(
    request: Request,
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
):
    return templates.TemplateResponse(
        request,
        "main.html",
        {"current_user": current_user, "is_guest": current_user is None},
    )


@router.get("/welcome", response_class=HTMLResponse)
async def welcome(
    request: Request,
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
):
    if current_user is None:
        return _to_home(request)
    return templates.TemplateResponse(
        request,
        "welcome.html",
        {"current_user": current_user, "is_guest": False},
    )


@router.get("/content", response_class=HTMLResponse)
async def content(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
    topic: str | None = None,
    sub: str | None = None,
):
    if current_user is None:
        return _to_home(request)

    active = topic if get_topic(topic) else None
    view = resolve_content(active, sub) if active and sub else None
    runner = load_runner(request, view.quiz_level) if view and view.quiz_level else None

    # read before any save attempt; a failed commit leaves unsaved values on the object
    progress_total = current_user.progress_total
    progress_error = False
    if runner is not None and runner.pending_progress_update() is not None:
        saved = await _record_pending_progress(db, runner, current_user.public_id)
        if saved is None:
            progress_error = True
        else:
            progress_total = saved.progress_total

    resp = templates.TemplateResponse(
        request,
        "content.html",
        {
            "current_user": current_user,
            "is_guest": False,
            "nav": _topic_nav(active),
            "active_topic": active,
            "view": view,
            "runner": runner,
            "progress_error": progress_error,
            "progress": progress_percentage(progress_total),
            "level_display": LEVEL_DISPLAY,
        },
    )
    if runner is not None:
        _save_runner(resp, runner)
    return resp


@router.get("/assessment-quiz", response_class=HTMLResponse)
async def assessment_quiz(
    request: Request,
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
):
    runner = load_runner(request, ASSESSMENT)
    resp = templates.TemplateResponse(
        request,
        "assessment.html",
        {
            "current_user": current_user,
            "is_guest": current_user is None,
            "runner": runner,
            "level_display": LEVEL_DISPLAY,
        },
    )
    _save_runner(resp, runner)
    return resp


@router.post("/quiz/{level}/start", response_class=RedirectResponse)
async def quiz_start(
    request: Request,
    level: str,
    session: Annotated[Session | None, Depends(get_session)],
):
    """Mount a fresh runner for level."""
    _check_quiz_level(level, session)
    response = RedirectResponse(_quiz_page_url(request, level), status_code=303)
    _save_runner(response, QuizRunner(level, **_runner_options()))
    return response


@router.post("/quiz/{level}/select", response_class=RedirectResponse)
async def quiz_select(
    request: Request,
    level: str,
    session: Annotated[Session | None, Depends(get_session)],
    choice_index: Annotated[int, Form()],
):
    _check_quiz_level(level, session)
    runner = load_runner(request, level)
    try:
        runner.select(choice_index)
    except (QuizError, IndexError) as exc:
        raise HTTPException(status_code=400, detail="Invalid choice") from exc

    response = RedirectResponse(_quiz_page_url(request, level), status_code=303)
    _save_runner(response, runner)
    return response


@router.post("/quiz/{level}/next", response_class=RedirectResponse)
async def quiz_next(
    request: Request,
    level: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    session: Annotated[Session | None, Depends(get_session)],
):
    """Score the selection; on a passed finish record the level's progress once."""
    _check_quiz_level(level, session)
    runner = load_runner(request, level)
    try:
        runner.advance()
    except QuizError as exc:
        raise HTTPException(status_code=400, detail="Select an answer first") from exc

    if runner.pending_progress_update() is not None:
        await _record_pending_progress(db, runner, session.user_id)

    response = RedirectResponse(_quiz_page_url(request, level), status_code=303)
    _save_runner(response, runner)
    return response


@router.get("/goal", response_class=HTMLResponse)
async def goal_get(
    request: Request,
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
    error: str | None = None,
):
    goals = load_goals(request.cookies.get(settings.goals_cookie_name))
    return templates.TemplateResponse(
        request,
        "goal.html",
        {
            "current_user": current_user,
            "is_guest": current_user is None,
            "goals": goals,
            "levels": LEVEL_DISPLAY,
            "deadline_weeks": DEADLINE_WEEKS,
            "deadline_label": deadline_label,
            "error": GOAL_ERRORS.get(error, GOAL_ERRORS["invalid"]) if error else None,
        },
    )


def _goals_response(request: Request, goals) -> RedirectResponse:
    response = RedirectResponse(request.url_for("goal_get"), status_code=303)
    response.set_cookie(
        key=settings.goals_cookie_name,
        value=dump_goals(goals),
        max_age=settings.goals_cookie_max_age,
        httponly=True,
        samesite="lax",
        path="/",
    )
    return response


@router.post("/goal", response_class=RedirectResponse)
async def goal_add(
    request: Request,
    text: Annotated[str, Form()] = "",
    level: Annotated[str, Form()] = "",
    deadline: Annotated[str, Form()] = "",
):
    goals = load_goals(request.cookies.get(settings.goals_cookie_name))
    try:
        goals = add_goal(goals, text.strip(), int(deadline) if deadline else None, level or None)
    except (ValueError, ValidationError):
        return RedirectResponse(request.url_for("goal_get").include_query_params(error="invalid"), status_code=303)
    except GoalLimitError:
        return RedirectResponse(request.url_for("goal_get").include_query_params(error="full"), status_code=303)
    return _goals_response(request, goals)


@router.post("/goal/{index}/delete", response_class=RedirectResponse)
async def goal_delete(request: Request, index: int):
    goals = load_goals(request.cookies.get(settings.goals_cookie_name))
    return _goals_response(request, delete_goal(goals, index))


@router.get("/certificate", response_class=HTMLResponse)
async def certificate(
    request: Request,
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
):
    if current_user is None:
        return _to_home(request)
    try:
        svg = render_certificate(current_user.name, current_user.progress_total)
    except CertificateNotEarnedError:
        svg = None
    return templates.TemplateResponse(
        request,
        "certificate.html",
        {
            "current_user": current_user,
            "is_guest": False,
            "eligible": svg is not None,
            "certificate_svg": svg,
        },
    )


@router.get("/certificate/download")
async def certificate_download(
    request: Request,
    current_user: Annotated[User | None, Depends(get_current_user_optional)],
):
    if current_user is None:
        return _to_home(request)
    try:
        svg = render_certificate(current_user.name, current_user.progress_total)
    except CertificateNotEarnedError:
        return RedirectResponse(request.url_for("certificate"), status_code=303)
    return Response(
        content=svg,
        media_type="image/svg+xml",
        headers={"Content-Disposition": f'attachment; filename="{CERTIFICATE_FILENAME}"'},
    )
