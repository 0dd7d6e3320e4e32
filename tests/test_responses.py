"""Tests for response submission and listing."""

import uuid
from datetime import datetime

import pytest

from squad_feedback.core.exceptions import ConstraintError, InvalidRequestError, ResourceNotFoundError
from squad_feedback.main import app as fastapi_app
from squad_feedback.models import QuestionResponse, Response
from squad_feedback.services.gateway import Gateway, get_gateway
from squad_feedback.services.responses import classify_answer, submit_response

NONEXISTENT_UUID = str(uuid.uuid4())


class FailingAnswersGateway(Gateway):
    """Stores responses but fails on the answer rows."""

    def insert_many(self, table, rows):
        if table == "question_responses":
            raise ConstraintError("question_responses insert failed")
        return super().insert_many(table, rows)


# ---------------------------------------------------------------------------
# classify_answer
# ---------------------------------------------------------------------------


class TestClassifyAnswer:
    @pytest.mark.parametrize(
        "answer, expected",
        [
            (8, {"answer_numeric": 8}),
            (7.5, {"answer_numeric": 7.5}),
            ("yes", {"answer_choice": "yes"}),
            ("no", {"answer_choice": "no"}),
            (True, {"answer_choice": "yes"}),
            (False, {"answer_choice": "no"}),
            ("Set Pieces", {"answer_text": "Set Pieces"}),
            (["a", "b"], {"answer_text": "['a', 'b']"}),
        ],
    )
    def test_classification(self, answer, expected):
        assert classify_answer(answer) == expected


# ---------------------------------------------------------------------------
# submit_response
# ---------------------------------------------------------------------------


class TestSubmitResponse:
    def test_stores_response_and_answers(self, db, form, player):
        response = submit_response(
            Gateway(db),
            form.id,
            {"s1q1": 8, "s1q3": "Pressing", "s3q4": "yes"},
            user_id=player.id,
            completion_time_seconds=95,
        )
        assert response.user_id == player.id
        assert response.is_anonymous is False
        assert response.answers == {"s1q1": 8.0, "s1q3": "Pressing", "s3q4": "yes"}
        assert db.query(QuestionResponse).count() == 3

    def test_anonymous_drops_user_id(self, db, form, player):
        response = submit_response(Gateway(db), form.id, {"s1q1": 5}, user_id=player.id, is_anonymous=True)
        assert response.is_anonymous is True
        assert response.user_id is None

    def test_resubmission_creates_new_row(self, db, form, player):
        for _ in range(2):
            submit_response(Gateway(db), form.id, {"s1q1": 5}, user_id=player.id)
        assert db.query(Response).count() == 2

    def test_compensating_delete(self, db, form, player):
        with pytest.raises(ConstraintError):
            submit_response(FailingAnswersGateway(db), form.id, {"s1q1": 5}, user_id=player.id)
        assert db.query(Response).count() == 0
        assert db.query(QuestionResponse).count() == 0

    def test_form_not_found(self, db):
        with pytest.raises(ResourceNotFoundError):
            submit_response(Gateway(db), uuid.uuid4(), {"s1q1": 5}, is_anonymous=True)

    def test_closed_form_rejected(self, db, form, player):
        form.status = "closed"
        db.commit()
        with pytest.raises(InvalidRequestError, match="not accepting responses"):
            submit_response(Gateway(db), form.id, {"s1q1": 5}, user_id=player.id)
        assert db.query(Response).count() == 0

    def test_anonymous_not_allowed(self, db, form):
        form.allow_anonymous = False
        db.commit()
        with pytest.raises(InvalidRequestError, match="Anonymous responses are not allowed"):
            submit_response(Gateway(db), form.id, {"s1q1": 5}, is_anonymous=True)

    def test_user_required_when_not_anonymous(self, db, form):
        with pytest.raises(InvalidRequestError, match="User ID is required"):
            submit_response(Gateway(db), form.id, {"s1q1": 5})

    def test_empty_answers_rejected(self, db, form, player):
        with pytest.raises(InvalidRequestError, match="Missing responses"):
            submit_response(Gateway(db), form.id, {}, user_id=player.id)


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------


class TestResponseEndpoints:
    def test_submit(self, client, form, player):
        resp = client.post(
            "/api/responses/",
            json={
                "form_id": str(form.id),
                "user_id": str(player.id),
                "responses": {"s1q1": 9, "s2q2": "Set Pieces"},
                "completion_time_seconds": 240,
            },
        )
        assert resp.status_code == 201
        data = resp.json()
        assert data["user_id"] == str(player.id)
        assert data["answers"] == {"s1q1": 9.0, "s2q2": "Set Pieces"}
        assert data["completion_time_seconds"] == 240

    def test_submit_anonymous(self, client, form, player):
        resp = client.post(
            "/api/responses/",
            json={
                "form_id": str(form.id),
                "user_id": str(player.id),
                "responses": {"s1q1": 9},
                "is_anonymous": True,
            },
        )
        assert resp.status_code == 201
        assert resp.json()["user_id"] is None

    def test_submit_unknown_form(self, client):
        resp = client.post(
            "/api/responses/",
            json={"form_id": NONEXISTENT_UUID, "responses": {"s1q1": 9}, "is_anonymous": True},
        )
        assert resp.status_code == 404
        assert resp.json() == {"error": "Form not found"}

    def test_submit_storage_failure_rolls_back(self, client, db, form, player):
        fastapi_app.dependency_overrides[get_gateway] = lambda: FailingAnswersGateway(db)
        try:
            resp = client.post(
                "/api/responses/",
                json={"form_id": str(form.id), "user_id": str(player.id), "responses": {"s1q1": 9}},
            )
        finally:
            del fastapi_app.dependency_overrides[get_gateway]
        assert resp.status_code == 400
        assert resp.json() == {"error": "question_responses insert failed"}
        assert db.query(Response).count() == 0

    def test_list_filtered_with_user(self, client, db, form, player, coach):
        older = submit_response(Gateway(db), form.id, {"s1q1": 6}, user_id=player.id)
        older.submitted_at = datetime(2026, 10, 18, 17, 0)
        newer = submit_response(Gateway(db), form.id, {"s1q1": 8}, user_id=coach.id)
        newer.submitted_at = datetime(2026, 10, 18, 18, 0)
        db.commit()

        resp = client.get(f"/api/responses/?form_id={form.id}")
        assert resp.status_code == 200
        data = resp.json()
        assert [r["id"] for r in data] == [str(newer.id), str(older.id)]
        assert data[1]["user"] == {
            "id": str(player.id),
            "name": "Sam Carter",
            "role": "player",
            "position": "Goalkeeper",
        }

        resp = client.get(f"/api/responses/?user_id={player.id}")
        assert [r["id"] for r in resp.json()] == [str(older.id)]

    def test_list_for_form(self, client, db, form, player):
        submit_response(Gateway(db), form.id, {"s1q1": 6}, is_anonymous=True)
        resp = client.get(f"/api/forms/{form.id}/responses")
        assert resp.status_code == 200
        data = resp.json()
        assert len(data) == 1
        assert data[0]["is_anonymous"] is True
        assert data[0]["answers"] == {"s1q1": 6.0}
