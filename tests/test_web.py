"""Web pages: auth forms, protected pages, quiz flow, goals and certificate."""
from __future__ import annotations

from conftest import register, web_login
from sqlalchemy.exc import OperationalError

from mlcourse.core.config import get_settings
from mlcourse.routers import web as web_routes
from mlcourse.services.goals import MAX_GOALS, MAX_GOALS_COOKIE_BYTES, load_goals
from mlcourse.services.quiz import ASSESSMENT, QUIZZES
from mlcourse.services.users import find_by_username

settings = get_settings()


def answer(client, level, question_no, pick):
    """Select a choice for question `question_no`, then press Next/Finish."""
    question = QUIZZES[level].questions[question_no]
    client.post(f"/quiz/{level}/select", data={"choice_index": pick(question)})
    return client.post(f"/quiz/{level}/next")


def correct(question):
    return question.choices.index(question.correct_answer)


def wrong(question):
    return next(i for i, c in enumerate(question.choices) if c != question.correct_answer)


def failing_record_quiz_pass(monkeypatch, failures: int) -> list:
    """Make the first `failures` progress saves raise a database error; return the call log."""
    calls = []
    real = web_routes.record_quiz_pass

    async def flaky(db, user_id, level):
        calls.append(level)
        if len(calls) <= failures:
            raise OperationalError("UPDATE users", {}, Exception("database is locked"))
        return await real(db, user_id, level)

    monkeypatch.setattr(web_routes, "record_quiz_pass", flaky)
    return calls


class TestPublicPages:
    def test_home_for_guest(self, client):
        resp = client.get("/home")
        assert resp.status_code == 200
        assert "Get started" in resp.text

    def test_protected_pages_redirect_guests_home(self, client):
        for path in ("/welcome", "/content", "/certificate", "/certificate/download"):
            resp = client.get(path, follow_redirects=False)
            assert resp.status_code == 303, path
            assert resp.headers["location"].endswith("/home")

    def test_static_assets(self, client):
        assert client.get("/static/style.css").status_code == 200


class TestAuthForms:
    def test_register_then_login(self, client):
        resp = client.post(
            "/register",
            data={
                "name": "Ada Lovelace",
                "username": "ada",
                "phone": "0300-1234567",
                "age": "28",
                "password": "secret123",
                "confirm_password": "secret123",
            },
        )
        assert resp.status_code == 200
        assert "User has been successfully registered" in resp.text

        resp = web_login(client)
        assert resp.status_code == 200
        assert "Welcome, Ada Lovelace!" in resp.text
        assert settings.auth_cookie_name in client.cookies

    def test_password_mismatch(self, client):
        resp = client.post(
            "/register",
            data={"name": "A", "username": "a", "phone": "1", "age": "1", "password": "x", "confirm_password": "y"},
            follow_redirects=False,
        )
        assert resp.status_code == 303
        assert "error=mismatch" in resp.headers["location"]

    def test_duplicate_username_banner(self, client, user):
        resp = client.post(
            "/register",
            data={"name": "A", "username": "ada", "phone": "1", "age": "30", "password": "x", "confirm_password": "x"},
        )
        assert "Username already exists. Please login" in resp.text

    def test_wrong_password_banner(self, client, user):
        resp = web_login(client, password="wrong")
        assert "Your password is incorrect" in resp.text
        assert settings.auth_cookie_name not in client.cookies

    def test_logout_clears_session(self, logged_in):
        resp = logged_in.post("/logout", follow_redirects=False)
        assert resp.status_code == 303
        assert resp.headers["location"].endswith("/home")
        assert logged_in.get("/welcome", follow_redirects=False).status_code == 303

    def test_deleted_user_is_a_guest(self, logged_in, user):
        client = logged_in
        token = client.post("/user/login", json={"username": "ada", "password": "secret123"}).json()["data"]
        client.delete(f"/user/{user['id']}", headers={"Authorization": token})
        assert client.get("/welcome", follow_redirects=False).status_code == 303


class TestContent:
    def test_topic_list_toggles(self, logged_in):
        resp = logged_in.get("/content", params={"topic": "foundation"})
        assert resp.status_code == 200
        assert "Step-by-Step Process" in resp.text
        assert "Python Skills" not in resp.text

    def test_lesson_and_progress_bar(self, logged_in):
        resp = logged_in.get("/content", params={"topic": "beginner", "sub": "Python Skills"})
        assert "<h1>Python Skills</h1>" in resp.text
        assert "width: 0%" in resp.text

    def test_quiz_subtopic_shows_first_question(self, logged_in):
        resp = logged_in.get("/content", params={"topic": "foundation", "sub": "Quiz"})
        assert QUIZZES["foundation"].questions[0].question in resp.text
        assert settings.quiz_cookie_name in logged_in.cookies


class TestQuizFlow:
    def test_passing_level_quiz_records_progress_once(self, logged_in, run_db):
        client = logged_in
        client.post("/quiz/foundation/start")
        answer(client, "foundation", 0, correct)
        resp = answer(client, "foundation", 1, correct)

        assert "Congratulations! You passed this level." in resp.text
        assert "width: 25%" in resp.text

        # pressing Finish again is rejected and records nothing more
        assert client.post("/quiz/foundation/next").status_code == 400
        client.get("/content", params={"topic": "foundation", "sub": "Quiz"})

        stored = run_db(find_by_username, "ada")
        assert stored.progress_foundation == 25
        assert stored.progress_total == 25

    def test_failing_level_quiz_records_nothing(self, logged_in, run_db):
        client = logged_in
        client.post("/quiz/beginner/start")
        answer(client, "beginner", 0, wrong)
        resp = answer(client, "beginner", 1, wrong)

        assert "Try again" in resp.text
        assert run_db(find_by_username, "ada").progress_total == 0

    def test_failed_progress_save_is_retried_on_the_result_page(self, logged_in, run_db, monkeypatch):
        client = logged_in
        calls = failing_record_quiz_pass(monkeypatch, failures=1)
        client.post("/quiz/foundation/start")
        answer(client, "foundation", 0, correct)
        resp = answer(client, "foundation", 1, correct)

        assert len(calls) == 2
        assert "Congratulations! You passed this level." in resp.text
        assert "width: 25%" in resp.text
        assert run_db(find_by_username, "ada").progress_foundation == 25

    def test_unsaved_pass_shows_error_until_saved(self, logged_in, run_db, monkeypatch):
        client = logged_in
        calls = failing_record_quiz_pass(monkeypatch, failures=2)
        client.post("/quiz/foundation/start")
        answer(client, "foundation", 0, correct)
        resp = answer(client, "foundation", 1, correct)

        assert "your progress could not be saved yet" in resp.text
        assert "Congratulations" not in resp.text
        assert run_db(find_by_username, "ada").progress_foundation == 0

        resp = client.get("/content", params={"topic": "foundation", "sub": "Quiz"})
        assert "Congratulations! You passed this level." in resp.text
        assert run_db(find_by_username, "ada").progress_total == 25

        client.get("/content", params={"topic": "foundation", "sub": "Quiz"})
        assert len(calls) == 3

    def test_next_without_selection(self, logged_in):
        logged_in.post("/quiz/foundation/start")
        assert logged_in.post("/quiz/foundation/next").status_code == 400

    def test_level_quiz_needs_login(self, client):
        assert client.post("/quiz/foundation/start").status_code == 401

    def test_unknown_quiz(self, logged_in):
        assert logged_in.post("/quiz/expert/start").status_code == 404

    def test_guest_assessment_suggests_level(self, client):
        client.post(f"/quiz/{ASSESSMENT}/start")
        resp = None
        for question_no in range(len(QUIZZES[ASSESSMENT].questions)):
            resp = answer(client, ASSESSMENT, question_no, wrong)

        assert "Suggested starting level" in resp.text
        assert "<strong>Foundation</strong>" in resp.text


class TestGoals:
    def test_add_and_delete_goal(self, client):
        resp = client.post("/goal", data={"text": "Finish the beginner level", "level": "beginner", "deadline": "2"})
        assert resp.status_code == 200
        assert "Finish the beginner level" in resp.text
        assert "<span class=\"tag\">2 weeks</span>" in resp.text

        resp = client.post("/goal/0/delete")
        assert "Finish the beginner level" not in resp.text
        assert "No goals yet." in resp.text

    def test_empty_goal_is_rejected(self, client):
        resp = client.post("/goal", data={"text": "   "})
        assert "Please enter a valid goal." in resp.text

    def test_full_goals_list_refuses_new_goals(self, client):
        for n in range(MAX_GOALS + 5):
            resp = client.post("/goal", data={"text": f"Goal number {n:02d}: revise the week's lessons"})

        assert "Your goals list is full. Delete a goal to add another." in resp.text
        cookie = client.cookies[settings.goals_cookie_name]
        assert len(cookie) <= MAX_GOALS_COOKIE_BYTES
        assert len(load_goals(cookie)) == MAX_GOALS


class TestCertificate:
    def test_locked_until_course_complete(self, logged_in):
        resp = logged_in.get("/certificate")
        assert "Complete all four levels" in resp.text
        resp = logged_in.get("/certificate/download", follow_redirects=False)
        assert resp.status_code == 303

    def test_download_for_complete_course(self, logged_in, user):
        logged_in.put(
            f"/user/{user['id']}",
            json={"progress": {"foundation": 25, "beginner": 25, "intermediate": 25, "advance": 25}},
        )
        resp = logged_in.get("/certificate/download")

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("image/svg+xml")
        assert 'filename="certificate.svg"' in resp.headers["content-disposition"]
        assert "Ada Lovelace" in resp.text


def test_register_helper_and_form_share_accounts(client):
    register(client, username="grace", name="Grace Hopper")
    resp = web_login(client, username="grace")
    assert "Welcome, Grace Hopper!" in resp.text
