from mlcourse.schemas.goal import GoalSchema
from mlcourse.schemas.quiz import QuestionSchema, QuizResultSchema, QuizSchema
from mlcourse.schemas.user import (
    LoginSchema,
    ProgressSchema,
    ProgressUpdateSchema,
    UserOutSchema,
    UserRegisterSchema,
    UserUpdateSchema,
)

__all__ = [
    "GoalSchema",
    "LoginSchema",
    "ProgressSchema",
    "ProgressUpdateSchema",
    "QuestionSchema",
    "QuizResultSchema",
    "QuizSchema",
    "UserOutSchema",
    "UserRegisterSchema",
    "UserUpdateSchema",
]
