from __future__ import annotations

import uuid


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_build_research_and_answer_it(client):
    research = client.post(
        "/researches",
        json={"title": "Lunch", "startsOn": "2024-05-01T00:00:00Z", "endsOn": None},
    )
    assert research.status_code == 201
    research_id = research.json()["id"]

    question = client.post(
        f"/researches/{research_id}/questions",
        json={"description": "Favourite dish?", "multiSelect": False},
    )
    assert question.status_code == 201
    assert question.json()["sequence"] == 1
    question_id = question.json()["id"]

    first = client.post(
        f"/researches/{research_id}/questions/{question_id}/options",
        json={"description": "Pasta"},
    )
    second = client.post(
        f"/researches/{research_id}/questions/{question_id}/options",
        json={"description": "Salad"},
    )
    assert [first.json()["sequence"], second.json()["sequence"]] == [1, 2]

    answered = client.post(
        f"/researches/{research_id}/answers",
        json=[{"questionId": question_id, "optionId": second.json()["id"]}],
    )
    assert answered.status_code == 204

    shape = client.get(f"/researches/{research_id}").json()
    assert shape["title"] == "Lunch"
    assert [o["description"] for o in shape["questions"][0]["options"]] == ["Pasta", "Salad"]

    report = client.get(f"/researches/{research_id}/answers").json()
    assert [o["amount"] for o in report["questions"][0]["options"]] == [0, 1]


def test_create_research_with_end_before_start(client):
    response = client.post(
        "/researches",
        json={
            "title": "Lunch",
            "startsOn": "2024-05-02T00:00:00Z",
            "endsOn": "2024-05-01T00:00:00Z",
        },
    )

    assert response.status_code == 400
    assert "fields" not in response.json()


def test_create_research_without_title(client):
    response = client.post("/researches", json={"startsOn": "2024-05-02T00:00:00Z"})

    assert response.status_code == 400
    assert [f["name"] for f in response.json()["fields"]] == ["title"]


def test_get_unknown_research(client):
    response = client.get(f"/researches/{uuid.uuid4()}")

    assert response.status_code == 404
    assert response.json()["message"] == "Requested resource not found"


def test_create_question_for_unknown_research(client):
    response = client.post(
        f"/researches/{uuid.uuid4()}/questions", json={"description": "Question"}
    )

    assert response.status_code == 404


def test_create_option_for_unknown_question(client, survey):
    response = client.post(
        f"/researches/{survey.research_id}/questions/{uuid.uuid4()}/options",
        json={"description": "Yes"},
    )

    assert response.status_code == 404
