from mlcourse.models.user import User

__all__ = ["User"]
