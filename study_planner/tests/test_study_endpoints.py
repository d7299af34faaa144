from __future__ import annotations

from flask.testing import FlaskClient

from study_planner.container import Container
from study_planner.infrastructure.db import models


def _register(client: FlaskClient, username: str) -> tuple[str, dict[str, str]]:
    response = client.post(
        "/api/register",
        json={"username": username, "email": f"{username}@x.com", "password": "secret1"},
    )
    body = response.get_json()
    return body["id"], {"Authorization": f"Bearer {body['token']}"}


def _seed(container: Container, account_id: str, prefix: str) -> None:
    with container.session_factory() as session:
        session.add(
            models.Subject(id=f"{prefix}-math", user_id=account_id, name="Math", description="Algebra")
        )
        session.flush()
        session.add_all(
            [
                models.Task(
                    id=f"{prefix}-t1",
                    subject_id=f"{prefix}-math",
                    title="Exercises 1-10",
                    deadline="2026-11-01",
                    difficulty_level=3,
                ),
                models.Progress(
                    id=f"{prefix}-p1",
                    user_id=account_id,
                    subject_id=f"{prefix}-math",
                    completed_tasks=2,
                    total_tasks=5,
                ),
            ]
        )
        session.flush()
        session.add(
            models.StudySession(
                id=f"{prefix}-s1",
                task_id=f"{prefix}-t1",
                scheduled_at="2026-10-20T18:00:00+00:00",
                duration=45,
            )
        )
        session.commit()


def test_protected_routes_require_bearer_token(client: FlaskClient) -> None:
    for path in ("/api/profile", "/api/subjects", "/api/progress"):
        response = client.get(path)
        assert response.status_code == 401
        assert response.get_json() == {"error": "Missing bearer token"}


def test_invalid_token_is_rejected(client: FlaskClient) -> None:
    response = client.get("/api/profile", headers={"Authorization": "Bearer not.a.token"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid or expired token"}


def test_profile_returns_account_without_hash(client: FlaskClient) -> None:
    account_id, headers = _register(client, "alice")

    response = client.get("/api/profile", headers=headers)

    assert response.status_code == 200
    body = response.get_json()
    assert body["id"] == account_id
    assert body["username"] == "alice"
    assert body["email"] == "alice@x.com"
    assert "password_hash" not in body


def test_study_data_is_scoped_to_account(client: FlaskClient, container: Container) -> None:
    alice_id, alice = _register(client, "alice")
    bob_id, bob = _register(client, "bobby")
    _seed(container, alice_id, "alice")
    _seed(container, bob_id, "bob")

    subjects = client.get("/api/subjects", headers=alice).get_json()
    assert subjects == [{"id": "alice-math", "name": "Math", "description": "Algebra"}]

    tasks = client.get("/api/tasks?subject_id=alice-math", headers=alice).get_json()
    assert [task["id"] for task in tasks] == ["alice-t1"]
    assert tasks[0]["difficulty_level"] == 3

    sessions = client.get("/api/study-sessions?task_id=alice-t1", headers=alice).get_json()
    assert sessions == [
        {
            "id": "alice-s1",
            "scheduled_at": "2026-10-20T18:00:00+00:00",
            "duration": 45,
            "completed": False,
        }
    ]

    assert client.get("/api/tasks?subject_id=alice-math", headers=bob).get_json() == []
    assert client.get("/api/study-sessions?task_id=alice-t1", headers=bob).get_json() == []

    progress = client.get("/api/progress", headers=alice).get_json()
    assert progress == {"completed_tasks": 2, "total_tasks": 5}


def test_progress_defaults_to_zero(client: FlaskClient) -> None:
    _, headers = _register(client, "alice")

    response = client.get("/api/progress", headers=headers)

    assert response.get_json() == {"completed_tasks": 0, "total_tasks": 0}


def test_listing_requires_parent_id(client: FlaskClient) -> None:
    _, headers = _register(client, "alice")

    tasks = client.get("/api/tasks", headers=headers)
    sessions = client.get("/api/study-sessions", headers=headers)

    assert tasks.status_code == 400
    assert tasks.get_json() == {"error": "subject_id is required"}
    assert sessions.status_code == 400
    assert sessions.get_json() == {"error": "task_id is required"}
