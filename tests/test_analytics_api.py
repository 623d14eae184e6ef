# tests/test_analytics_api.py
from tests.conftest import SURVEY_PAYLOAD


def _submit(client, survey_id, *entries):
    resp = client.post(f"/feedback/{survey_id}", json={"responses": list(entries)})
    assert resp.status_code == 201
    return resp.json()["feedback_id"]


def test_survey_analytics(client, survey, admin_headers):
    sid = survey["id"]
    _submit(client, sid, {"question_id": "q1", "answer": 4}, {"question_id": "q2", "answer": ["Intro", "Q&A"]})
    _submit(client, sid, {"question_id": "q1", "answer": 5}, {"question_id": "q3", "answer": "Great"})
    last = _submit(client, sid, {"question_id": "q1", "answer": 4}, {"answer": "no id"})

    resp = client.get(f"/analytics/{sid}", headers=admin_headers)
    assert resp.status_code == 200
    data = resp.json()

    assert data["response_count"] == 3
    assert data["question_count"] == 3

    q1, q2, q3 = data["questions"]
    assert q1["total"] == 3
    assert q1["answers"] == {"4": 2, "5": 1}
    assert q1["distribution"][0] == {"label": "4", "count": 2, "percentage": 67}
    assert q2["total"] == 2
    assert q2["answers"] == {"Intro": 1, "Q&A": 1}
    assert q3["total"] == 1

    assert data["responses"][0]["id"] == last
    assert data["responses"][0]["answers"] == {"q1": 4}


def test_survey_analytics_without_feedback(client, survey, admin_headers):
    data = client.get(f"/analytics/{survey['id']}", headers=admin_headers).json()
    assert data["response_count"] == 0
    for q in data["questions"]:
        assert q["total"] == 0
        assert q["answers"] == {}
        assert q["distribution"] == []


def test_survey_analytics_hidden_from_other_admins(client, survey, other_admin_headers):
    assert client.get(f"/analytics/{survey['id']}", headers=other_admin_headers).status_code == 404


def test_overview(client, survey, admin_headers):
    other = client.post("/surveys/create", json={**SURVEY_PAYLOAD, "title": "Second"}, headers=admin_headers).json()
    for _ in range(3):
        _submit(client, survey["id"], {"question_id": "q1", "answer": 2})
    _submit(client, other["id"], {"question_id": "q1", "answer": 1})
    _submit(client, other["id"], {"question_id": "q1", "answer": 1})

    data = client.get("/analytics/overview", headers=admin_headers).json()
    assert data["overview"] == {"total_surveys": 2, "total_responses": 5, "avg_responses_per_survey": 3}
    assert {s["title"]: s["response_count"] for s in data["surveys"]} == {"Workshop feedback": 3, "Second": 2}


def test_overview_empty(client, admin_headers):
    data = client.get("/analytics/overview", headers=admin_headers).json()
    assert data == {
        "overview": {"total_surveys": 0, "total_responses": 0, "avg_responses_per_survey": 0},
        "surveys": [],
    }


def test_boolean_answer_stored_and_labelled_as_boolean(client, survey, admin_headers, db):
    from feedback_app.models.feedback import Feedback

    feedback_id = _submit(
        client, survey["id"],
        {"question_id": "q3", "answer": True},
        {"question_id": "q1", "answer": 1},
    )
    stored = db.get(Feedback, feedback_id).responses
    assert stored[0]["answer"] is True
    assert stored[1]["answer"] == 1 and stored[1]["answer"] is not True

    data = client.get(f"/analytics/{survey['id']}", headers=admin_headers).json()
    q1, _, q3 = data["questions"]
    assert q3["answers"] == {"true": 1}
    assert q1["answers"] == {"1": 1}
    assert data["responses"][0]["answers"]["q3"] is True
