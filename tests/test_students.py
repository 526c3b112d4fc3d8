"""Endpoint tests for /api/v1/students."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from app.core.exceptions import FetchFailure, SaveFailure

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

AUTH_HEADER = {"Authorization": "Bearer valid-token"}


def _student_rows(resource: str) -> dict[str, dict[str, Any]]:
    return {
        "bea": {
            "full_name": "Bea",
            "degree": "BSc in Information Technology",
            "address": "Colombo",
            "phone_no": "0771234567",
            "skills": ["SQL"],
            "posted_at": "2026-01-01T00:00:00Z",
        },
        "al": {
            "full_name": "Al",
            "degree": "BEng in Software Engineering",
            "address": "Kandy",
            "phone_no": "0711234567",
            "linkedin": "https://linkedin.com/in/al",
            "skills": ["Go"],
            "posted_at": "2026-01-02T00:00:00Z",
        },
    }


def _valid_student() -> dict[str, Any]:
    return {
        "full_name": "Bea Perera",
        "date_of_birth": "2001-04-17",
        "sex": "Female",
        "phone_no": "077 123 4567",
        "email": "bea@example.com",
        "university": "University of Moratuwa",
        "degree": "BSc in Information Technology",
        "status": "Intern",
        "address": "12 Lake Road, Colombo",
        "nic_no": "200112345678",
        "skills": ["SQL", "Python"],
    }


def _auth_client(user_id: str = "user-1") -> MagicMock:
    mock_client = MagicMock()
    mock_client.auth.get_user.return_value = MagicMock(
        user=MagicMock(id=user_id, email="bea@example.com")
    )
    return mock_client


# ---------------------------------------------------------------------------
# GET /api/v1/students
# ---------------------------------------------------------------------------


class TestListStudentsEndpoint:
    """Query parameters drive the derived listing."""

    @patch("app.routers.students.fetch_resource", side_effect=_student_rows)
    def test_default_order_is_newest_first(
        self, mock_fetch: MagicMock, test_client: TestClient
    ) -> None:
        """Without controls, students come back newest first with the full vocabulary."""
        response = test_client.get("/api/v1/students")

        assert response.status_code == 200
        body = response.json()
        assert [c["full_name"] for c in body["candidates"]] == ["Al", "Bea"]
        assert [c["id"] for c in body["candidates"]] == ["al", "bea"]
        assert body["skills"] == ["Go", "SQL"]
        assert body["total"] == 2
        assert body["count"] == 2
        assert body["query"] == {"search": "", "skill": None, "sort": "none"}
        assert body["message"] is None
        mock_fetch.assert_called_once_with("students")

    @patch("app.routers.students.fetch_resource", side_effect=_student_rows)
    def test_skill_filter_keeps_full_vocabulary(
        self, mock_fetch: MagicMock, test_client: TestClient
    ) -> None:
        """Filtering by skill narrows the list but not the skill options."""
        response = test_client.get("/api/v1/students", params={"skill": "SQL"})

        body = response.json()
        assert [c["full_name"] for c in body["candidates"]] == ["Bea"]
        assert body["skills"] == ["Go", "SQL"]
        assert body["count"] == 1
        assert body["total"] == 2

    @patch("app.routers.students.fetch_resource", side_effect=_student_rows)
    def test_empty_skill_param_is_unfiltered(
        self, mock_fetch: MagicMock, test_client: TestClient
    ) -> None:
        """An empty skill parameter behaves like no skill filter."""
        response = test_client.get("/api/v1/students", params={"skill": ""})
        assert response.json()["count"] == 2

    @patch("app.routers.students.fetch_resource", side_effect=_student_rows)
    def test_lowercase_search_matches_uppercase_skill(
        self, mock_fetch: MagicMock, test_client: TestClient
    ) -> None:
        """Lowercase search text matches an uppercase stored skill."""
        response = test_client.get("/api/v1/students", params={"search": "sql"})
        assert [c["full_name"] for c in response.json()["candidates"]] == ["Bea"]

    @patch("app.routers.students.fetch_resource", side_effect=_student_rows)
    def test_sort_descending(self, mock_fetch: MagicMock, test_client: TestClient) -> None:
        """sort=desc orders students Z-A by name."""
        response = test_client.get("/api/v1/students", params={"sort": "desc"})
        assert [c["full_name"] for c in response.json()["candidates"]] == ["Bea", "Al"]

    @patch("app.routers.students.fetch_resource", side_effect=_student_rows)
    def test_no_match_is_200_with_message(
        self, mock_fetch: MagicMock, test_client: TestClient
    ) -> None:
        """No matching student is a 200 with the no-results message."""
        response = test_client.get("/api/v1/students", params={"search": "zz"})

        assert response.status_code == 200
        body = response.json()
        assert body["candidates"] == []
        assert body["message"] == "No candidates found matching your criteria."

    @patch("app.routers.students.fetch_resource", side_effect=_student_rows)
    def test_invalid_sort_is_422(self, mock_fetch: MagicMock, test_client: TestClient) -> None:
        """An unknown sort directive is rejected by validation."""
        response = test_client.get("/api/v1/students", params={"sort": "sideways"})
        assert response.status_code == 422

    @patch(
        "app.routers.students.fetch_resource",
        side_effect=FetchFailure("Backend Error: connection reset"),
    )
    def test_fetch_failure_is_502_verbatim(
        self, mock_fetch: MagicMock, test_client: TestClient
    ) -> None:
        """A retrieval failure becomes a 502 carrying the message verbatim."""
        response = test_client.get("/api/v1/students")

        assert response.status_code == 502
        assert response.json()["detail"] == "Backend Error: connection reset"

    @patch("app.routers.students.fetch_resource")
    def test_malformed_row_is_omitted(
        self, mock_fetch: MagicMock, test_client: TestClient
    ) -> None:
        """A stored student whose skills are not a list is left out of a 200 response."""
        rows = _student_rows("students")
        rows["broken"] = {"full_name": "Zed", "skills": "Go"}
        mock_fetch.return_value = rows

        response = test_client.get("/api/v1/students")

        assert response.status_code == 200
        body = response.json()
        assert [c["id"] for c in body["candidates"]] == ["al", "bea"]
        assert body["total"] == 2


class TestSkillsEndpoint:
    """GET /api/v1/students/skills."""

    @patch("app.routers.students.fetch_resource", side_effect=_student_rows)
    def test_returns_vocabulary(self, mock_fetch: MagicMock, test_client: TestClient) -> None:
        """The skills endpoint returns the sorted vocabulary."""
        response = test_client.get("/api/v1/students/skills")
        assert response.status_code == 200
        assert response.json() == {"skills": ["Go", "SQL"]}

    @patch("app.routers.students.fetch_resource", side_effect=FetchFailure("Backend Error: x"))
    def test_fetch_failure(self, mock_fetch: MagicMock, test_client: TestClient) -> None:
        """The skills endpoint maps retrieval failures to 502."""
        response = test_client.get("/api/v1/students/skills")
        assert response.status_code == 502


# ---------------------------------------------------------------------------
# POST /api/v1/students
# ---------------------------------------------------------------------------


class TestCreateStudentEndpoint:
    """Registration requires a signed-in user and a valid form."""

    @patch("app.services.submissions.upsert_record", return_value="user-1")
    def test_saves_under_user_id(
        self, mock_upsert: MagicMock, test_client: TestClient
    ) -> None:
        """The profile is upserted under the signed-in user's id with posted_at."""
        with patch("app.core.auth.get_supabase", return_value=_auth_client()):
            response = test_client.post(
                "/api/v1/students", json=_valid_student(), headers=AUTH_HEADER
            )

        assert response.status_code == 201
        assert response.json()["id"] == "user-1"

        resource, record_id, fields = mock_upsert.call_args.args
        assert resource == "students"
        assert record_id == "user-1"
        assert fields["full_name"] == "Bea Perera"
        assert fields["skills"] == ["SQL", "Python"]
        assert fields["date_of_birth"] == "2001-04-17"
        assert "posted_at" in fields

    def test_missing_token_is_401(self, test_client: TestClient) -> None:
        """Posting without a bearer token is rejected."""
        response = test_client.post("/api/v1/students", json=_valid_student())
        assert response.status_code == 401

    def test_rejected_token_is_401(self, test_client: TestClient) -> None:
        """A token Supabase Auth rejects is answered with 401."""
        mock_client = MagicMock()
        mock_client.auth.get_user.side_effect = Exception("invalid JWT")
        with patch("app.core.auth.get_supabase", return_value=mock_client):
            response = test_client.post(
                "/api/v1/students", json=_valid_student(), headers=AUTH_HEADER
            )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired token"

    def test_invalid_form_is_422(self, test_client: TestClient) -> None:
        """Form rule violations are reported per field with 422."""
        payload = {**_valid_student(), "nic_no": "12345", "skills": []}
        with patch("app.core.auth.get_supabase", return_value=_auth_client()):
            response = test_client.post("/api/v1/students", json=payload, headers=AUTH_HEADER)

        assert response.status_code == 422
        fields = {err["loc"][-1] for err in response.json()["detail"]}
        assert fields == {"nic_no", "skills"}

    @patch(
        "app.services.submissions.upsert_record",
        side_effect=SaveFailure("Could not save students: timeout"),
    )
    def test_save_failure_is_502(self, mock_upsert: MagicMock, test_client: TestClient) -> None:
        """A storage write failure becomes a 502 with the save message."""
        with patch("app.core.auth.get_supabase", return_value=_auth_client()):
            response = test_client.post(
                "/api/v1/students", json=_valid_student(), headers=AUTH_HEADER
            )
        assert response.status_code == 502
        assert response.json()["detail"] == "Could not save students: timeout"
