"""Pydantic schema for a learning goal kept on the client."""
from pydantic import BaseModel, Field

from mlcourse.services.progress import Level


class GoalSchema(BaseModel):
    text: str = Field(min_length=1, max_length=200)
    progress: int = 0
    deadline: int | None = Field(default=None, ge=1, le=5)  # weeks
    level: Level | None = None
