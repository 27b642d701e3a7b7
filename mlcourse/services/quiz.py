"""Quiz runner: walks a static quiz one question at a time and scores it.

Level quizzes are truncated to a demo subset and, when passed, yield a single
progress update for their level. The assessment quiz is never truncated and
maps its score onto a readiness tier instead of touching stored progress.
"""
from __future__ import annotations

from typing import Any

from mlcourse.schemas.quiz import QuestionSchema, QuizResultSchema, QuizSchema
from mlcourse.services.progress import Level, progress_update_for
from mlcourse.services.quiz_bank import (
    ADVANCE_QUIZ,
    ASSESSMENT_QUIZ,
    BEGINNER_QUIZ,
    FOUNDATION_QUIZ,
    INTERMEDIATE_QUIZ,
)

ASSESSMENT = "assessment"
DEFAULT_PASS_SCORE = 5
DEFAULT_QUESTION_LIMIT = 2

QUIZZES: dict[str, QuizSchema] = {
    Level.FOUNDATION.value: QuizSchema.model_validate(FOUNDATION_QUIZ),
    Level.BEGINNER.value: QuizSchema.model_validate(BEGINNER_QUIZ),
    Level.INTERMEDIATE.value: QuizSchema.model_validate(INTERMEDIATE_QUIZ),
    Level.ADVANCE.value: QuizSchema.model_validate(ADVANCE_QUIZ),
    ASSESSMENT: QuizSchema.model_validate(ASSESSMENT_QUIZ),
}

# Upper bounds (exclusive) of the readiness tiers; anything above is advance
READINESS_BANDS = [
    (10, Level.FOUNDATION),
    (20, Level.BEGINNER),
    (30, Level.INTERMEDIATE),
]


class QuizError(Exception):
    pass


class UnknownQuizError(QuizError):
    pass


class NoAnswerSelectedError(QuizError):
    pass


class QuizFinishedError(QuizError):
    pass


def get_quiz(level: str) -> QuizSchema:
    try:
        return QUIZZES[level]
    except KeyError:
        raise UnknownQuizError(level) from None


def presented_questions(quiz: QuizSchema, limit: int | None = DEFAULT_QUESTION_LIMIT) -> list[QuestionSchema]:
    """Questions actually shown: level quizzes keep only the first `limit`."""
    if quiz.level == ASSESSMENT or limit is None:
        return list(quiz.questions)
    return list(quiz.questions[:limit])


def readiness_tier(score: int) -> Level:
    """Map an assessment score onto the level the learner should start at."""
    for upper, level in READINESS_BANDS:
        if score < upper:
            return level
    return Level.ADVANCE


def is_pass(score: int, pass_score: int = DEFAULT_PASS_SCORE) -> bool:
    return score >= pass_score


class QuizRunner:
    def __init__(
        self,
        level: str,
        question_limit: int | None = DEFAULT_QUESTION_LIMIT,
        pass_score: int = DEFAULT_PASS_SCORE,
    ):
        self.level = level
        self.quiz = get_quiz(level)
        self.questions = presented_questions(self.quiz, question_limit)
        self.pass_score = pass_score

        self.active_question = 0
        self.selected_index: int | None = None
        self.selected_correct = False
        self.show_result = False
        self.result = QuizResultSchema()
        self.progress_updated = False

    @property
    def is_assessment(self) -> bool:
        return self.level == ASSESSMENT

    @property
    def current_question(self) -> QuestionSchema:
        return self.questions[self.active_question]

    @property
    def is_last_question(self) -> bool:
        return self.active_question == len(self.questions) - 1

    @property
    def can_advance(self) -> bool:
        return not self.show_result and self.selected_index is not None

    @property
    def passed(self) -> bool:
        return is_pass(self.result.score, self.pass_score)

    @property
    def readiness(self) -> Level | None:
        if not (self.is_assessment and self.show_result):
            return None
        return readiness_tier(self.result.score)

    def select(self, index: int) -> bool:
        """Mark a choice; return whether it is the correct answer."""
        if self.show_result:
            raise QuizFinishedError(self.level)
        choices = self.current_question.choices
        if not 0 <= index < len(choices):
            raise IndexError(f"choice {index} out of range")
        self.selected_index = index
        self.selected_correct = choices[index] == self.current_question.correct_answer
        return self.selected_correct

    def advance(self) -> None:
        """Score the current selection and move on ("Next" / "Finish")."""
        if self.show_result:
            raise QuizFinishedError(self.level)
        if self.selected_index is None:
            raise NoAnswerSelectedError(self.level)

        if self.selected_correct:
            self.result.score += self.quiz.per_question_score
            self.result.correct_answers += 1
        else:
            self.result.wrong_answers += 1
        self.selected_index = None
        self.selected_correct = False

        if self.is_last_question:
            self.active_question = 0
            self.show_result = True
        else:
            self.active_question += 1

    def pending_progress_update(self) -> dict[str, int] | None:
        """The one progress update a passed level quiz owes, until it is recorded."""
        if not self.show_result or self.is_assessment or self.progress_updated or not self.passed:
            return None
        return progress_update_for(self.level)

    def mark_progress_updated(self) -> None:
        self.progress_updated = True

    def to_state(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "active_question": self.active_question,
            "selected_index": self.selected_index,
            "show_result": self.show_result,
            "result": self.result.model_dump(),
            "progress_updated": self.progress_updated,
        }

    @classmethod
    def from_state(
        cls,
        state: Any,
        question_limit: int | None = DEFAULT_QUESTION_LIMIT,
        pass_score: int = DEFAULT_PASS_SCORE,
    ) -> QuizRunner | None:
        """Rebuild a runner from to_state() output; None if the state is unusable."""
        try:
            runner = cls(state["level"], question_limit=question_limit, pass_score=pass_score)
            active = int(state["active_question"])
            if not 0 <= active < len(runner.questions):
                return None
            runner.active_question = active
            selected = state.get("selected_index")
            if selected is not None:
                runner.select(int(selected))
            runner.show_result = bool(state["show_result"])
            runner.result = QuizResultSchema.model_validate(state["result"])
            runner.progress_updated = bool(state["progress_updated"])
        except (KeyError, TypeError, ValueError, IndexError, QuizError):
            return None
        return runner
