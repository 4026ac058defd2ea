"""Tests for notes API endpoints."""

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from notedeck import models
from tests.conftest import OTHER_OWNER, create_test_note


class TestCreateNote:
    """Test suite for POST /notes endpoint."""

    def test_create_note_success(self, client: TestClient, db_session: Session) -> None:
        response = client.post(
            "/api/v1/notes", json={"name": "Biology", "body": "Cells divide by mitosis."}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] > 0
        assert data["owner"] == "owner-1"
        assert data["name"] == "Biology"
        assert data["body"] == "Cells divide by mitosis."

        db_note = db_session.query(models.Note).filter_by(id=data["id"]).first()
        assert db_note is not None
        assert db_note.owner == "owner-1"

    def test_create_note_with_empty_body(self, client: TestClient) -> None:
        response = client.post("/api/v1/notes", json={"name": "Empty"})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["body"] == ""

    def test_create_duplicate_name_conflicts(self, client: TestClient, db_session: Session) -> None:
        create_test_note(db_session, "Biology", body="original")

        response = client.post("/api/v1/notes", json={"name": "Biology", "body": "replacement"})

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"]["kind"] == "duplicate_name"

        # Store unchanged
        notes = db_session.query(models.Note).filter_by(owner="owner-1").all()
        assert len(notes) == 1
        assert notes[0].body == "original"

    def test_same_name_allowed_for_different_owners(
        self, client: TestClient, db_session: Session
    ) -> None:
        create_test_note(db_session, "Biology", owner=OTHER_OWNER)

        response = client.post("/api/v1/notes", json={"name": "Biology"})

        assert response.status_code == status.HTTP_201_CREATED

    def test_create_note_blank_name_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/notes", json={"name": "   "})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert response.json()["detail"]["kind"] == "invalid_input"

    def test_create_note_missing_name_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/notes", json={"body": "text"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.parametrize("name", ["search", "by-ids", "Math/Algebra", "..", "."])
    def test_create_note_unroutable_name_rejected(
        self, client: TestClient, db_session: Session, name: str
    ) -> None:
        response = client.post("/api/v1/notes", json={"name": name})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert db_session.query(models.Note).count() == 0

    def test_note_named_like_route_prefix_is_reachable(self, client: TestClient) -> None:
        created = client.post("/api/v1/notes", json={"name": "Searching", "body": "text"})
        assert created.status_code == status.HTTP_201_CREATED

        response = client.get("/api/v1/notes/Searching")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["body"] == "text"

        response = client.delete("/api/v1/notes/Searching")
        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_missing_owner_header_unauthorized(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/notes", json={"name": "Biology"}, headers={"X-Owner-Id": ""}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestReadNotes:
    """Test suite for note read endpoints."""

    def test_get_note(self, client: TestClient, db_session: Session) -> None:
        note = create_test_note(db_session, "Chemistry", body="Atoms bond.")

        response = client.get("/api/v1/notes/Chemistry")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": note.id,
            "owner": "owner-1",
            "name": "Chemistry",
            "body": "Atoms bond.",
        }

    def test_get_note_of_other_owner_not_found(
        self, client: TestClient, db_session: Session
    ) -> None:
        create_test_note(db_session, "Chemistry", owner=OTHER_OWNER)

        response = client.get("/api/v1/notes/Chemistry")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["kind"] == "not_found"

    def test_list_notes_ordered_by_name(self, client: TestClient, db_session: Session) -> None:
        create_test_note(db_session, "Zoology")
        create_test_note(db_session, "Anatomy")
        create_test_note(db_session, "Botany", owner=OTHER_OWNER)

        response = client.get("/api/v1/notes")

        assert response.status_code == status.HTTP_200_OK
        assert [n["name"] for n in response.json()["notes"]] == ["Anatomy", "Zoology"]

    def test_get_by_ids_omits_missing(self, client: TestClient, db_session: Session) -> None:
        first = create_test_note(db_session, "First")
        second = create_test_note(db_session, "Second", owner=OTHER_OWNER)

        response = client.get(
            "/api/v1/notes/by-ids", params={"ids": [second.id, 9999, first.id]}
        )

        assert response.status_code == status.HTTP_200_OK
        assert [n["id"] for n in response.json()["notes"]] == [first.id, second.id]

    def test_get_by_ids_empty(self, client: TestClient) -> None:
        response = client.get("/api/v1/notes/by-ids")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["notes"] == []


class TestDeleteNote:
    """Test suite for DELETE /notes/{name} endpoint."""

    def test_delete_note(self, client: TestClient, db_session: Session) -> None:
        note = create_test_note(db_session, "Physics")
        note_id = note.id

        response = client.delete("/api/v1/notes/Physics")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        db_session.expire_all()
        assert db_session.get(models.Note, note_id) is None

    def test_delete_missing_note(self, client: TestClient) -> None:
        response = client.delete("/api/v1/notes/Physics")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"]["kind"] == "not_found"

    def test_delete_only_affects_owner(self, client: TestClient, db_session: Session) -> None:
        create_test_note(db_session, "Physics", owner=OTHER_OWNER)

        response = client.delete("/api/v1/notes/Physics")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert db_session.query(models.Note).filter_by(owner=OTHER_OWNER).count() == 1
