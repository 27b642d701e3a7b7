"""Learning goals list. Lives in a signed client cookie, never in the database."""
from pydantic import ValidationError

from mlcourse.core.security import sign_data, unsign_data
from mlcourse.schemas.goal import GoalSchema
from mlcourse.services.progress import Level

DEADLINE_WEEKS = range(1, 6)

# Browsers drop a Set-Cookie over 4096 bytes; leave room for the name and attributes
MAX_GOALS = 20
MAX_GOALS_COOKIE_BYTES = 3600


class GoalLimitError(Exception):
    pass


def load_goals(cookie_value: str | None) -> list[GoalSchema]:
    """Decode the goals cookie; a missing or tampered cookie is an empty list."""
    data = unsign_data(cookie_value)
    if not isinstance(data, list):
        return []
    goals = []
    for item in data:
        try:
            goals.append(GoalSchema.model_validate(item))
        except ValidationError:
            continue
    return goals


def dump_goals(goals: list[GoalSchema]) -> str:
    return sign_data([goal.model_dump(mode="json") for goal in goals])


def add_goal(goals: list[GoalSchema], text: str, deadline: int | None = None, level: str | None = None) -> list[GoalSchema]:
    """Append a goal; refuse it once the list would no longer fit its cookie."""
    if len(goals) >= MAX_GOALS:
        raise GoalLimitError(f"at most {MAX_GOALS} goals")
    goal = GoalSchema(
        text=text,
        progress=0,
        deadline=deadline or None,
        level=Level(level.lower()) if level else None,
    )
    updated = [*goals, goal]
    if len(dump_goals(updated)) > MAX_GOALS_COOKIE_BYTES:
        raise GoalLimitError(f"goals cookie would exceed {MAX_GOALS_COOKIE_BYTES} bytes")
    return updated


def delete_goal(goals: list[GoalSchema], index: int) -> list[GoalSchema]:
    return [goal for i, goal in enumerate(goals) if i != index]


def deadline_label(weeks: int) -> str:
    return f"{weeks} week{'s' if weeks > 1 else ''}"
