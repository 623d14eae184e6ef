# tests/test_feedback.py
from feedback_app.models.feedback import Feedback
from feedback_app.models.survey import Survey


def test_submit_records_client_info(client, survey, db):
    resp = client.post(
        f"/feedback/{survey['id']}",
        json={"responses": [{"question_id": "q1", "answer": 5}, {"question_id": "q2", "answer": ["Intro"]}]},
        headers={"X-Forwarded-For": "203.0.113.9", "User-Agent": "pytest-agent"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True

    row = db.get(Feedback, body["feedback_id"])
    assert row.ip_address == "203.0.113.9"
    assert row.user_agent == "pytest-agent"
    assert row.responses[1] == {"question_id": "q2", "answer": ["Intro"]}


def test_submit_falls_back_to_real_ip_header(client, survey, db):
    resp = client.post(
        f"/feedback/{survey['id']}",
        json={"responses": []},
        headers={"X-Real-IP": "198.51.100.4"},
    )
    assert db.get(Feedback, resp.json()["feedback_id"]).ip_address == "198.51.100.4"


def test_submit_to_missing_survey(client):
    resp = client.post("/feedback/404", json={"responses": []})
    assert resp.status_code == 404


def test_submit_to_inactive_survey(client, survey, db):
    db.get(Survey, survey["id"]).is_active = False
    db.commit()
    resp = client.post(f"/feedback/{survey['id']}", json={"responses": [{"question_id": "q1", "answer": 1}]})
    assert resp.status_code == 404
    assert db.query(Feedback).count() == 0


def test_submit_keeps_entries_without_question_id(client, survey, db):
    resp = client.post(f"/feedback/{survey['id']}", json={"responses": [{"answer": "stray"}]})
    assert resp.status_code == 201
    assert db.get(Feedback, resp.json()["feedback_id"]).responses == [{"question_id": None, "answer": "stray"}]


def test_list_feedback_owner_only(client, survey, admin_headers, other_admin_headers):
    client.post(f"/feedback/{survey['id']}", json={"responses": [{"question_id": "q3", "answer": "first"}]})
    client.post(f"/feedback/{survey['id']}", json={"responses": [{"question_id": "q3", "answer": "second"}]})

    rows = client.get(f"/feedback/{survey['id']}", headers=admin_headers).json()
    assert [r["responses"][0]["answer"] for r in rows] == ["second", "first"]

    assert client.get(f"/feedback/{survey['id']}", headers=other_admin_headers).status_code == 404
