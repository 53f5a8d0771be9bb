"""
Integration tests for study notes.

Tests cover:
- JSON creation with background analysis (outline, READY status)
- File uploads: extensions, size limit, encoding, empty files
- Duplicate detection (exact and near copies)
- Listing with status filter, outline endpoint, soft delete
"""

import uuid

import pytest

from src.config.settings import settings


LECTURE = """# REST APIs

Resources are addressed by URLs.

## HTTP verbs

GET, POST, PUT, PATCH and DELETE.

```bash
# not a heading
curl -X GET /items
```

## Status codes
"""


@pytest.fixture
def create_note(client, auth_headers):
    def _create(body=LECTURE, title=None, headers=None):
        payload = {"body": body}
        if title is not None:
            payload["title"] = title
        response = client.post("/notes", json=payload, headers=headers or auth_headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


# ============================================================================
# CREATE + ANALYSIS
# ============================================================================


class TestCreate:
    """POST /notes"""

    def test_create_returns_pending_note(self, create_note):
        note = create_note()

        assert note["status"] == "PENDING"
        assert note["title"] == "REST APIs"
        assert note["word_count"] > 0
        assert len(note["content_hash"]) == 64
        assert note["outline"] == []

    def test_background_analysis_completes(self, client, auth_headers, create_note):
        note = create_note()

        response = client.get(f"/notes/{note['id']}", headers=auth_headers)

        assert response.status_code == 200
        analyzed = response.json()
        assert analyzed["status"] == "READY"
        assert [(h["level"], h["title"], h["anchor"]) for h in analyzed["outline"]] == [
            (1, "REST APIs", "rest-apis"),
            (2, "HTTP verbs", "http-verbs"),
            (2, "Status codes", "status-codes"),
        ]
        assert analyzed["duplicate_of_id"] is None
        assert analyzed["error_message"] is None

    def test_explicit_title_wins(self, create_note):
        assert create_note(title="Week 1")["title"] == "Week 1"

    def test_blank_body_is_rejected(self, client, auth_headers):
        response = client.post("/notes", json={"body": "   \n "}, headers=auth_headers)

        assert response.status_code == 422

    def test_requires_auth(self, client):
        assert client.post("/notes", json={"body": LECTURE}).status_code == 401


# ============================================================================
# DUPLICATES
# ============================================================================


class TestDuplicates:
    """Duplicate detection during analysis."""

    def test_exact_copy_ignoring_markup(self, client, auth_headers, create_note):
        original = create_note(body="# Idempotency\n\nPUT and DELETE are idempotent.")
        copy = create_note(body="idempotency\n\nPUT and **DELETE** are   idempotent.")

        analyzed = client.get(f"/notes/{copy['id']}", headers=auth_headers).json()

        assert analyzed["duplicate_of_id"] == original["id"]
        assert analyzed["similarity"] == 1.0

    def test_near_copy(self, client, auth_headers, create_note):
        body = " ".join(f"word{i}" for i in range(50))
        original = create_note(body=body)
        near = create_note(body=body.replace("word10", "other"))

        analyzed = client.get(f"/notes/{near['id']}", headers=auth_headers).json()

        assert analyzed["duplicate_of_id"] == original["id"]
        assert 0.9 <= analyzed["similarity"] < 1.0

    def test_different_notes_are_not_duplicates(self, client, auth_headers, create_note):
        create_note(body="# Middleware\n\nRuns around every request.")
        other = create_note(body="# WebSockets\n\nBidirectional messages after an upgrade.")

        analyzed = client.get(f"/notes/{other['id']}", headers=auth_headers).json()

        assert analyzed["duplicate_of_id"] is None
        assert analyzed["similarity"] is None

    def test_other_users_notes_are_not_compared(self, client, create_note, other_headers):
        create_note()
        theirs = create_note(headers=other_headers)

        analyzed = client.get(f"/notes/{theirs['id']}", headers=other_headers).json()

        assert analyzed["duplicate_of_id"] is None


# ============================================================================
# UPLOADS
# ============================================================================


class TestUpload:
    """POST /notes/upload"""

    def _upload(self, client, headers, filename, content, content_type="text/markdown"):
        return client.post(
            "/notes/upload",
            files={"file": (filename, content, content_type)},
            headers=headers,
        )

    def test_upload_markdown(self, client, auth_headers):
        response = self._upload(client, auth_headers, "lecture-01.md", LECTURE.encode("utf-8"))

        assert response.status_code == 201
        note = response.json()
        assert note["source_filename"] == "lecture-01.md"
        assert note["title"] == "REST APIs"

        analyzed = client.get(f"/notes/{note['id']}", headers=auth_headers).json()
        assert analyzed["status"] == "READY"
        assert len(analyzed["outline"]) == 3

    def test_plain_text_title_is_first_line(self, client, auth_headers):
        response = self._upload(client, auth_headers, "scratch.txt", b"plain words only", "text/plain")
        assert response.status_code == 201
        assert response.json()["title"] == "plain words only"

    def test_utf8_bom_is_accepted(self, client, auth_headers):
        response = self._upload(client, auth_headers, "bom.md", "\ufeff# Café".encode("utf-8"))

        assert response.status_code == 201
        assert response.json()["title"] == "Café"

    def test_unsupported_extension(self, client, auth_headers):
        response = self._upload(client, auth_headers, "slides.pdf", b"%PDF-1.4", "application/pdf")

        assert response.status_code == 400
        assert ".md" in response.json()["error"]["details"]["allowed_extensions"]

    def test_not_utf8(self, client, auth_headers):
        response = self._upload(client, auth_headers, "latin.md", "# Café".encode("latin-1"))

        assert response.status_code == 400

    def test_empty_file(self, client, auth_headers):
        assert self._upload(client, auth_headers, "empty.md", b"").status_code == 400

    def test_too_large(self, client, auth_headers, monkeypatch):
        monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 16)

        response = self._upload(client, auth_headers, "big.md", b"# Big\n" + b"x" * 64)

        assert response.status_code == 413
        assert response.json()["error"]["details"] == {"limit_bytes": 16}

    def test_file_is_required(self, client, auth_headers):
        assert client.post("/notes/upload", headers=auth_headers).status_code == 422


# ============================================================================
# LIST / OUTLINE / DELETE
# ============================================================================


class TestReadAndDelete:
    """GET /notes, GET /notes/{id}/outline, DELETE /notes/{id}"""

    def test_list_and_status_filter(self, client, auth_headers, create_note):
        create_note(body="# One")
        create_note(body="# Two")

        listed = client.get("/notes", headers=auth_headers).json()
        assert listed["pagination"]["total"] == 2
        assert {note["title"] for note in listed["data"]} == {"One", "Two"}
        assert "body" not in listed["data"][0]

        ready = client.get("/notes", params={"status": "READY"}, headers=auth_headers).json()
        assert ready["pagination"]["total"] == 2

        pending = client.get("/notes", params={"status": "PENDING"}, headers=auth_headers).json()
        assert pending["data"] == []

    def test_invalid_status_filter(self, client, auth_headers):
        assert client.get("/notes", params={"status": "DONE"}, headers=auth_headers).status_code == 422

    def test_outline(self, client, auth_headers, create_note):
        note = create_note()

        response = client.get(f"/notes/{note['id']}/outline", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["note_id"] == note["id"]
        assert [h["anchor"] for h in body["headings"]] == ["rest-apis", "http-verbs", "status-codes"]

    def test_unknown_note(self, client, auth_headers):
        assert client.get(f"/notes/{uuid.uuid4()}", headers=auth_headers).status_code == 404

    def test_other_users_note_is_not_found(self, client, create_note, other_headers):
        note = create_note()

        assert client.get(f"/notes/{note['id']}", headers=other_headers).status_code == 404

    def test_soft_delete(self, client, auth_headers, create_note):
        note = create_note()

        response = client.delete(f"/notes/{note['id']}", headers=auth_headers)

        assert response.status_code == 204
        assert client.get(f"/notes/{note['id']}", headers=auth_headers).status_code == 404
        assert client.get(f"/notes/{note['id']}/outline", headers=auth_headers).status_code == 404
        assert client.delete(f"/notes/{note['id']}", headers=auth_headers).status_code == 404
        assert client.get("/notes", headers=auth_headers).json()["pagination"]["total"] == 0

    def test_deleted_notes_are_not_duplicate_candidates(self, client, auth_headers, create_note):
        original = create_note()
        client.delete(f"/notes/{original['id']}", headers=auth_headers)

        copy = create_note()

        analyzed = client.get(f"/notes/{copy['id']}", headers=auth_headers).json()
        assert analyzed["duplicate_of_id"] is None
