"""Pydantic schemas for the static quizzes and a runner's result."""
from pydantic import BaseModel, model_validator


class QuestionSchema(BaseModel):
    question: str
    choices: list[str]
    type: str = "MCQs"
    correct_answer: str

    @model_validator(mode="after")
    def correct_answer_is_a_choice(self):
        if self.correct_answer not in self.choices:
            raise ValueError(f"correct answer {self.correct_answer!r} is not among the choices")
        return self


class QuizSchema(BaseModel):
    topic: str
    level: str
    total_question: int
    per_question_score: int = 5
    questions: list[QuestionSchema]


class QuizResultSchema(BaseModel):
    score: int = 0
    correct_answers: int = 0
    wrong_answers: int = 0
