"""Signed cookies, the login session, goals and the certificate."""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from mlcourse.core.security import create_access_token, sign_data, unsign_data
from mlcourse.core.session import Session, session_from_token
from mlcourse.services.certificate import CertificateNotEarnedError, render_certificate
from mlcourse.services.goals import (
    MAX_GOALS,
    MAX_GOALS_COOKIE_BYTES,
    GoalLimitError,
    add_goal,
    deadline_label,
    delete_goal,
    dump_goals,
    load_goals,
)
from mlcourse.services.progress import Level


class TestSignedData:
    def test_round_trip(self):
        assert unsign_data(sign_data({"a": [1, 2]})) == {"a": [1, 2]}

    def test_tampered_value_is_rejected(self):
        value = sign_data({"score": 5})
        sig = value.rsplit(".", 1)[1]
        forged = sign_data({"score": 50}).rsplit(".", 1)[0] + "." + sig
        assert unsign_data(forged) is None
        assert unsign_data("garbage") is None
        assert unsign_data(None) is None


class TestSession:
    def test_session_from_valid_token(self):
        session = session_from_token(create_access_token("user-1"))
        assert session.user_id == "user-1"
        assert not session.is_expired()

    def test_expired_token_gives_no_session(self):
        issued = datetime.now(timezone.utc) - timedelta(hours=25)
        assert session_from_token(create_access_token("user-1", issued_at=issued)) is None

    def test_expiry_check(self):
        expires = datetime(2030, 1, 1, tzinfo=timezone.utc)
        session = Session(token="t", user_id="u", expires_at=expires)
        assert not session.is_expired(now=expires - timedelta(seconds=1))
        assert session.is_expired(now=expires)


class TestGoals:
    def test_add_and_persist(self):
        goals = add_goal([], "Finish the beginner level", deadline=2, level="Beginner")
        restored = load_goals(dump_goals(goals))

        assert len(restored) == 1
        assert restored[0].text == "Finish the beginner level"
        assert restored[0].progress == 0
        assert restored[0].deadline == 2
        assert restored[0].level == Level.BEGINNER

    def test_delete_by_position(self):
        goals = add_goal(add_goal([], "first"), "second")
        assert [g.text for g in delete_goal(goals, 0)] == ["second"]
        assert [g.text for g in delete_goal(goals, 5)] == ["first", "second"]

    def test_missing_or_tampered_cookie_is_empty(self):
        assert load_goals(None) == []
        assert load_goals(dump_goals(add_goal([], "x")) + "0") == []

    def test_invalid_goals(self):
        with pytest.raises(ValidationError):
            add_goal([], "")
        with pytest.raises(ValidationError):
            add_goal([], "ok", deadline=6)
        with pytest.raises(ValueError):
            add_goal([], "ok", level="expert")
        with pytest.raises(ValidationError):
            add_goal([], "x" * 201)

    def test_goal_count_is_capped(self):
        goals = []
        for n in range(MAX_GOALS):
            goals = add_goal(goals, f"goal {n}")
        with pytest.raises(GoalLimitError):
            add_goal(goals, "one more")

    def test_long_goals_stop_before_the_cookie_overflows(self):
        goals = []
        with pytest.raises(GoalLimitError):
            for _ in range(MAX_GOALS):
                goals = add_goal(goals, "x" * 200, deadline=5, level="advance")
        assert 0 < len(goals) < MAX_GOALS
        assert len(dump_goals(goals)) <= MAX_GOALS_COOKIE_BYTES

    def test_deadline_label(self):
        assert deadline_label(1) == "1 week"
        assert deadline_label(4) == "4 weeks"


class TestCertificate:
    def test_rendered_for_complete_course(self):
        svg = render_certificate("Ada Lovelace", 100, issued_on=date(2026, 10, 19))
        assert svg.startswith("<svg")
        assert "Ada Lovelace" in svg
        assert "2026-10-19" in svg

    def test_name_is_escaped(self):
        svg = render_certificate("<b>Ada</b>", 100)
        assert "<b>" not in svg
        assert "&lt;b&gt;Ada&lt;/b&gt;" in svg

    def test_refused_below_100(self):
        with pytest.raises(CertificateNotEarnedError):
            render_certificate("Ada", 75)
