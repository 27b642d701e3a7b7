"""SQLAlchemy declarative base and model imports for Alembic."""
from mlcourse.db.session import Base

# Import all models so Alembic can see them
from mlcourse.models.user import User  # noqa: F401

__all__ = ["Base", "User"]
