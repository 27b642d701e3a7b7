"""Quiz runner: truncation, scoring, the single progress update and readiness tiers."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from mlcourse.schemas.quiz import QuestionSchema
from mlcourse.services.progress import Level
from mlcourse.services.quiz import (
    ASSESSMENT,
    QUIZZES,
    NoAnswerSelectedError,
    QuizFinishedError,
    QuizRunner,
    UnknownQuizError,
    get_quiz,
    readiness_tier,
)


def correct_index(question) -> int:
    return question.choices.index(question.correct_answer)


def wrong_index(question) -> int:
    return next(i for i, c in enumerate(question.choices) if c != question.correct_answer)


def answer_all(runner: QuizRunner, pick) -> None:
    while not runner.show_result:
        runner.select(pick(runner.current_question))
        runner.advance()


class TestLevelQuiz:
    def test_truncated_to_demo_subset(self):
        runner = QuizRunner("foundation", question_limit=2)
        assert len(QUIZZES["foundation"].questions) == 20
        assert len(runner.questions) == 2
        assert runner.current_question.correct_answer == "Defining goals"

    def test_no_limit_keeps_every_question(self):
        assert len(QuizRunner("beginner", question_limit=None).questions) == 20

    def test_both_correct_scores_and_updates_once(self):
        runner = QuizRunner("foundation", question_limit=2, pass_score=5)
        updates = []

        while not runner.show_result:
            runner.select(correct_index(runner.current_question))
            runner.advance()
            update = runner.pending_progress_update()
            if update is not None:
                updates.append(update)
                runner.mark_progress_updated()
        # a re-render after completion must not produce another update
        assert runner.pending_progress_update() is None

        assert runner.result.score == 10
        assert runner.result.correct_answers == 2
        assert runner.result.wrong_answers == 0
        assert runner.active_question == 0
        assert runner.passed
        assert updates == [{"progress.foundation": 25}]

    def test_all_wrong_fails_without_update(self):
        runner = QuizRunner("intermediate")
        answer_all(runner, wrong_index)

        assert runner.result.score == 0
        assert runner.result.wrong_answers == 2
        assert not runner.passed
        assert runner.pending_progress_update() is None

    def test_pass_mark_is_inclusive(self):
        runner = QuizRunner("advance", pass_score=5)
        runner.select(correct_index(runner.current_question))
        runner.advance()
        runner.select(wrong_index(runner.current_question))
        runner.advance()

        assert runner.result.score == 5
        assert runner.passed
        assert runner.pending_progress_update() == {"progress.advance": 25}

    def test_higher_pass_mark(self):
        runner = QuizRunner("beginner", pass_score=65)
        answer_all(runner, correct_index)
        assert not runner.passed
        assert runner.pending_progress_update() is None

    def test_next_is_disabled_until_a_choice_is_made(self):
        runner = QuizRunner("foundation")
        assert not runner.can_advance
        with pytest.raises(NoAnswerSelectedError):
            runner.advance()
        runner.select(0)
        assert runner.can_advance

    def test_finished_quiz_rejects_input(self):
        runner = QuizRunner("foundation")
        answer_all(runner, correct_index)
        with pytest.raises(QuizFinishedError):
            runner.select(0)
        with pytest.raises(QuizFinishedError):
            runner.advance()

    def test_choice_out_of_range(self):
        runner = QuizRunner("foundation")
        with pytest.raises(IndexError):
            runner.select(7)

    def test_reselect_replaces_choice(self):
        runner = QuizRunner("foundation")
        assert runner.select(wrong_index(runner.current_question)) is False
        assert runner.select(correct_index(runner.current_question)) is True
        runner.advance()
        assert runner.result.correct_answers == 1


class TestAssessment:
    def test_never_truncated(self):
        runner = QuizRunner(ASSESSMENT, question_limit=2)
        assert runner.is_assessment
        assert len(runner.questions) == 10

    def test_readiness_bands(self):
        assert readiness_tier(0) == Level.FOUNDATION
        assert readiness_tier(8) == Level.FOUNDATION
        assert readiness_tier(10) == Level.BEGINNER
        assert readiness_tier(22) == Level.INTERMEDIATE
        assert readiness_tier(30) == Level.ADVANCE
        assert readiness_tier(50) == Level.ADVANCE

    def test_full_run_maps_to_tier_without_progress_update(self):
        runner = QuizRunner(ASSESSMENT)
        assert runner.readiness is None
        answer_all(runner, correct_index)

        assert runner.result.score == 50
        assert runner.readiness == Level.ADVANCE
        assert runner.pending_progress_update() is None


class TestState:
    def test_restores_position_and_selection(self):
        runner = QuizRunner("beginner")
        runner.select(correct_index(runner.current_question))
        runner.advance()
        runner.select(1)

        restored = QuizRunner.from_state(runner.to_state())

        assert restored.level == "beginner"
        assert restored.active_question == 1
        assert restored.selected_index == 1
        assert restored.result.score == 5

    @pytest.mark.parametrize(
        "state",
        [
            {},
            {"level": "nope", "active_question": 0, "show_result": False, "result": {}, "progress_updated": False},
            {"level": "foundation", "active_question": 9, "show_result": False, "result": {}, "progress_updated": False},
            {"level": "foundation", "active_question": 0, "selected_index": 12, "show_result": False,
             "result": {}, "progress_updated": False},
        ],
    )
    def test_unusable_state(self, state):
        assert QuizRunner.from_state(state) is None


def test_unknown_quiz():
    with pytest.raises(UnknownQuizError):
        get_quiz("expert")


def test_answer_must_be_one_of_the_choices():
    with pytest.raises(ValidationError):
        QuestionSchema(question="?", choices=["a", "b"], correct_answer="c")


def test_every_bank_question_is_answerable():
    for quiz in QUIZZES.values():
        for question in quiz.questions:
            assert question.correct_answer in question.choices
