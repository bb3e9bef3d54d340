import logging

import pytest

from resume_vault.app.database.database import get_db
from resume_vault.app.models.education_model import Education
from resume_vault.app.models.resume_model import Resume as DatabaseResume

log = logging.getLogger(__name__)


@pytest.fixture
def db_client(app, client, session_factory, test_user):
    """Test client whose requests use the in-memory database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return client


def test_create_resume_aggregate_endpoint_success(db_client):
    """A valid aggregate is created and children are returned in input order."""
    response = db_client.post(
        "/api/resumes/aggregate",
        json={
            "user_id": 7,
            "title": "Engineer",
            "experiences": [{"position": "A"}, {"position": "B"}],
            "education": [],
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Engineer"
    assert [e["position"] for e in data["experiences"]] == ["A", "B"]
    assert "education" not in data
    assert "personal_info" not in data
    assert "skills" not in data


def test_create_resume_aggregate_endpoint_step_failure(db_client, db_session):
    """An invalid element is reported as 422 naming its step; nothing is stored."""
    response = db_client.post(
        "/api/resumes/aggregate",
        json={
            "user_id": 7,
            "title": "X",
            "education": [{"school": "Y"}, {"school": ""}],
        },
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["step"] == {"kind": "list_item", "name": "education", "index": 2}
    assert "school" in detail["errors"]
    assert db_session.query(DatabaseResume).count() == 0
    assert db_session.query(Education).count() == 0


def test_create_resume_aggregate_endpoint_duplicate_title(db_client):
    """Posting the same title twice keeps both resumes under different titles."""
    payload = {"user_id": 7, "title": "Engineer"}

    first = db_client.post("/api/resumes/aggregate", json=payload)
    second = db_client.post("/api/resumes/aggregate", json=payload)

    assert first.status_code == 201
    assert second.status_code == 201
    assert first.json()["title"] == "Engineer"
    assert second.json()["title"].startswith("Engineer_")
    assert first.json()["id"] != second.json()["id"]


def test_create_resume_aggregate_endpoint_request_validation(db_client):
    """Requests missing the owner are rejected by request validation."""
    response = db_client.post("/api/resumes/aggregate", json={"title": "Engineer"})

    assert response.status_code == 422


def test_create_resume_aggregate_endpoint_non_object_element(db_client, db_session):
    """A list element that is not an object fails at its own step, not at request parsing."""
    response = db_client.post(
        "/api/resumes/aggregate",
        json={"user_id": 7, "title": "X", "education": [{"school": "Y"}, "oops"]},
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["step"] == {"kind": "list_item", "name": "education", "index": 2}
    assert list(detail["errors"]) == ["base"]
    assert db_session.query(DatabaseResume).count() == 0
    assert db_session.query(Education).count() == 0


def test_create_resume_aggregate_endpoint_non_string_title(db_client, db_session):
    """A title of the wrong type is reported against the resume step."""
    response = db_client.post(
        "/api/resumes/aggregate",
        json={"user_id": 7, "title": 123},
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["step"] == {"kind": "primary", "name": "resume", "index": None}
    assert "title" in detail["errors"]
    assert db_session.query(DatabaseResume).count() == 0


def test_create_resume_aggregate_endpoint_rated_lists(db_client):
    """Languages and additional skills are created and returned in input order."""
    response = db_client.post(
        "/api/resumes/aggregate",
        json={
            "user_id": 7,
            "title": "Engineer",
            "languages": [
                {"description": "English", "level": "native"},
                {"description": "Spanish"},
            ],
            "additional_skills": [{"description": "Sailing", "level": "basic"}],
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert [item["description"] for item in data["languages"]] == ["English", "Spanish"]
    assert data["languages"][0]["level"] == "native"
    assert "level" not in data["languages"][1]
    assert data["additional_skills"][0]["description"] == "Sailing"
