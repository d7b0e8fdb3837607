"""
Notes API Unit Tests

Exercises the HTTP layer with FastAPI dependency overrides: the in-memory
repository and an AsyncMock AI service replace PostgreSQL and OpenAI.
"""

from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from ainotes.api.deps import get_ai_options, get_ai_service, get_repository
from ainotes.core.config import AiServiceOptions
from ainotes.handlers import NOTE_ARCHIVED, NOTE_NOT_FOUND
from ainotes.main import app
from fakes import ALICE, BOB, InMemoryNoteRepository, make_note

HEADERS = {"X-User-Subject": ALICE}


@pytest.fixture
def repo() -> InMemoryNoteRepository:
    return InMemoryNoteRepository()


@pytest.fixture
def client(repo, ai):
    app.dependency_overrides[get_repository] = lambda: repo
    app.dependency_overrides[get_ai_service] = lambda: ai
    app.dependency_overrides[get_ai_options] = lambda: AiServiceOptions(api_key="mock")
    with (
        patch("ainotes.main.wait_for_db", new_callable=AsyncMock, return_value=True),
        patch("ainotes.main.dispose_engine", new_callable=AsyncMock),
    ):
        with TestClient(app) as test_client:
            yield test_client
    app.dependency_overrides.clear()


def test_missing_subject_header_is_unauthorized(client):
    response = client.get("/api/v1/notes/")

    assert response.status_code == 401


def test_create_note(client, repo):
    response = client.post(
        "/api/v1/notes/", json={"title": "Asyncio", "content": "TaskGroup"}, headers=HEADERS
    )

    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Asyncio"
    assert data["ai_summary"] == "A short summary."
    assert data["owner_subject"] == ALICE
    assert "embedding" not in data
    assert len(repo.notes) == 1


def test_create_note_validates_body(client):
    response = client.post("/api/v1/notes/", json={"title": "", "content": "x"}, headers=HEADERS)

    assert response.status_code == 422


def test_create_note_ai_failure_is_bad_gateway(client, ai, repo):
    ai.generate_summary.side_effect = RuntimeError("OpenAI down")

    response = client.post(
        "/api/v1/notes/", json={"title": "t", "content": "c"}, headers=HEADERS
    )

    assert response.status_code == 502
    assert response.json()["detail"] == "AI Service Error: OpenAI down"
    assert repo.notes == {}


def test_read_note_and_not_found(client, repo):
    mine = make_note(owner=ALICE, title="Mine")
    theirs = make_note(owner=BOB, title="Theirs")
    repo.notes = {mine.id: mine, theirs.id: theirs}

    ok = client.get(f"/api/v1/notes/{mine.id}", headers=HEADERS)
    foreign = client.get(f"/api/v1/notes/{theirs.id}", headers=HEADERS)
    missing = client.get(f"/api/v1/notes/{uuid4()}", headers=HEADERS)

    assert ok.status_code == 200
    assert ok.json()["title"] == "Mine"
    assert foreign.status_code == missing.status_code == 404
    assert foreign.json()["detail"] == NOTE_NOT_FOUND


def test_list_notes_paging(client, repo):
    notes = [make_note(title=f"n{i}") for i in range(3)]
    repo.notes = {n.id: n for n in notes}

    response = client.get("/api/v1/notes/?page_number=1&page_size=2", headers=HEADERS)

    data = response.json()
    assert response.status_code == 200
    assert data["total_count"] == 3
    assert data["total_pages"] == 2
    assert len(data["items"]) == 2


def test_search_notes(client, repo):
    hit = make_note(title="Python tips")
    miss = make_note(title="Groceries")
    repo.notes = {hit.id: hit, miss.id: miss}

    response = client.get("/api/v1/notes/search?q=PYTHON", headers=HEADERS)

    data = response.json()
    assert [item["title"] for item in data["items"]] == ["Python tips"]
    assert data["search_term"] == "PYTHON"


def test_update_note(client, repo):
    note = make_note(title="Old")
    repo.notes = {note.id: note}

    response = client.put(
        f"/api/v1/notes/{note.id}",
        json={"title": "New", "content": "Body", "is_archived": True},
        headers=HEADERS,
    )

    assert response.status_code == 200
    assert response.json()["title"] == "New"
    assert repo.notes[note.id].is_archived is True


def test_update_foreign_note_is_not_found(client, repo):
    note = make_note(owner=BOB)
    repo.notes = {note.id: note}

    response = client.put(
        f"/api/v1/notes/{note.id}", json={"title": "x", "content": "y"}, headers=HEADERS
    )

    assert response.status_code == 404


def test_archive_note(client, repo):
    note = make_note()
    repo.notes = {note.id: note}

    response = client.delete(f"/api/v1/notes/{note.id}", headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == {"message": NOTE_ARCHIVED}
    assert repo.notes[note.id].is_archived is True


def test_repository_failure_is_bad_gateway(client, repo):
    note = make_note()
    repo.notes = {note.id: note}
    original_archive = repo.archive

    async def failing_archive(n):
        repo.fail_with = "Error archiving note: timeout"
        return await original_archive(n)

    repo.archive = failing_archive

    response = client.delete(f"/api/v1/notes/{note.id}", headers=HEADERS)

    assert response.status_code == 502


def test_related_notes(client, repo):
    current = make_note(title="current", embedding=[1.0, 0.0])
    related = make_note(title="related", embedding=[1.0, 0.1])
    repo.notes = {current.id: current, related.id: related}

    response = client.get(f"/api/v1/notes/{current.id}/related", headers=HEADERS)

    assert response.status_code == 200
    assert [item["title"] for item in response.json()["items"]] == ["related"]


def test_backfill_tags(client, repo):
    note = make_note(tags=None)
    repo.notes = {note.id: note}

    response = client.post("/api/v1/notes/backfill-tags", json={}, headers=HEADERS)

    assert response.status_code == 200
    assert response.json()["processed_count"] == 1


def test_seed_notes(client, repo):
    response = client.post("/api/v1/notes/seed", json={"count": 2}, headers=HEADERS)

    assert response.status_code == 201
    assert response.json()["created_count"] == 2
    assert len(repo.notes) == 2
