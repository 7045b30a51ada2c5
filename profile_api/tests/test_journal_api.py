"""
HTTP-level tests for the journal routes.
"""

import pytest
from fastapi.testclient import TestClient

from profile_api.main import create_app

API = "/api/v1"


def create_journal(client, headers, title="Day 1"):
    response = client.post(f"{API}/journal", json={"title": title, "content": "..."}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def public_ids(client, **params):
    response = client.get(f"{API}/journal", params=params)
    assert response.status_code == 200
    return [journal["journalID"] for journal in response.json()]


class TestJournalLifecycle:

    def test_create_append_publish_delete(self, client, make_user):
        user_id, headers = make_user()

        created = create_journal(client, headers, "Day 1")
        journal_id = created["journalID"]
        assert created["userID"] == user_id
        assert created["version"] == 1
        assert created["status"] == "pending"
        assert [e["version"] for e in created["entries"]] == [1]

        response = client.put(f"{API}/journal/{journal_id}", json={"title": "Day 2"}, headers=headers)
        assert response.status_code == 200
        body = response.json()
        assert body["version"] == 2
        assert [e["title"] for e in body["entries"]] == ["Day 1", "Day 2"]

        assert journal_id not in public_ids(client)

        response = client.put(f"{API}/journal/{journal_id}/status", json={"status": "public"}, headers=headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Journal status updated"}
        assert journal_id in public_ids(client)

        response = client.delete(f"{API}/journal/{journal_id}", headers=headers)
        assert response.status_code == 200
        assert journal_id not in public_ids(client)

        response = client.get(f"{API}/journal/{journal_id}", headers=headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Journal entry not found"}

    def test_create_requires_authentication(self, client):
        response = client.post(f"{API}/journal", json={"title": "Day 1"})

        assert response.status_code == 401
        assert response.json() == {"error": "Not authenticated"}

    def test_invalid_body_is_bad_request(self, client, make_user):
        _, headers = make_user()

        response = client.post(f"{API}/journal", json={"title": ["not", "a", "string"]}, headers=headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    def test_delete_of_missing_journal_succeeds(self, client, make_user):
        _, headers = make_user()

        response = client.delete(f"{API}/journal/does-not-exist", headers=headers)

        assert response.status_code == 200

    def test_other_user_cannot_append(self, client, make_user):
        _, owner_headers = make_user()
        _, other_headers = make_user(email="grace@hopper.io", name="Grace")
        journal_id = create_journal(client, owner_headers)["journalID"]

        response = client.put(f"{API}/journal/{journal_id}", json={"title": "Hijack"}, headers=other_headers)

        assert response.status_code == 404


class TestJournalVisibility:

    def test_anonymous_read_gets_last_appended_entry(self, client, make_user):
        _, headers = make_user()
        journal_id = create_journal(client, headers, "Day 1")["journalID"]
        for title in ("Day 2", "Day 3"):
            client.put(f"{API}/journal/{journal_id}", json={"title": title}, headers=headers)
        response = client.put(f"{API}/journal/{journal_id}/version", json={"version": 1}, headers=headers)
        assert response.json()["version"] == 1

        anonymous = client.get(f"{API}/journal/{journal_id}").json()
        assert anonymous["version"] == 1
        assert [e["title"] for e in anonymous["entries"]] == ["Day 3"]
        assert "createdAt" not in anonymous

        full = client.get(f"{API}/journal/{journal_id}", headers=headers).json()
        assert [e["version"] for e in full["entries"]] == [1, 2, 3]
        assert "createdAt" in full

    def test_versions_require_authentication(self, client, make_user):
        _, headers = make_user()
        journal_id = create_journal(client, headers)["journalID"]
        client.put(f"{API}/journal/{journal_id}", json={"title": "Day 2"}, headers=headers)

        assert client.get(f"{API}/journal/{journal_id}/versions").status_code == 401

        response = client.get(f"{API}/journal/{journal_id}/versions", headers=headers)
        assert [e["version"] for e in response.json()] == [1, 2]

    def test_meta(self, client, make_user):
        user_id, headers = make_user()
        journal_id = create_journal(client, headers)["journalID"]

        meta = client.get(f"{API}/journal/{journal_id}/meta").json()

        assert set(meta) == {"createdAt", "updatedAt", "version", "status", "userID"}
        assert meta["userID"] == user_id

    def test_user_listing_includes_unpublished(self, client, make_user):
        user_id, headers = make_user()
        create_journal(client, headers, "One")
        create_journal(client, headers, "Two")

        response = client.get(f"{API}/journal/u/{user_id}")

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_public_listing_with_bad_date_range(self, client):
        response = client.get(f"{API}/journal", params={"start": "last week", "end": "2026-01-01"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid date range"}


class TestJournalUpdates:

    def test_set_missing_version_is_rejected(self, client, make_user):
        _, headers = make_user()
        journal_id = create_journal(client, headers)["journalID"]

        response = client.put(f"{API}/journal/{journal_id}/version", json={"version": 9}, headers=headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Version not found"}
        assert client.get(f"{API}/journal/{journal_id}/meta").json()["version"] == 1

    def test_process_marks_journal_processing(self, client, make_user):
        _, headers = make_user()
        journal_id = create_journal(client, headers)["journalID"]

        response = client.put(f"{API}/journal/{journal_id}/process", headers=headers)

        assert response.status_code == 200
        assert client.get(f"{API}/journal/{journal_id}/meta").json()["status"] == "processing"

    def test_taxonomy_and_summary_filters(self, client, make_user):
        user_id, headers = make_user()
        journal_id = create_journal(client, headers)["journalID"]

        response = client.put(
            f"{API}/journal/{journal_id}/taxonomy",
            json={"categories": ["travel"], "topics": ["hiking"], "tags": ["alps"]},
            headers=headers,
        )
        assert response.json()["taxonomy"]["topics"] == ["hiking"]

        response = client.put(f"{API}/journal/{journal_id}/summary", json={"summary": "A walk"}, headers=headers)
        assert response.json()["summary"] == "A walk"

        client.put(f"{API}/journal/{journal_id}/status", json={"status": "public"}, headers=headers)

        assert public_ids(client, category="travel") == [journal_id]
        assert public_ids(client, topic="hiking", tag="alps", user=user_id) == [journal_id]
        assert public_ids(client, subcategory="city") == []
        assert public_ids(client, user="someone-else") == []

    def test_unknown_status_is_permitted_by_default(self, client, make_user):
        _, headers = make_user()
        journal_id = create_journal(client, headers)["journalID"]

        response = client.put(f"{API}/journal/{journal_id}/status", json={"status": "archived"}, headers=headers)

        assert response.status_code == 200
        assert client.get(f"{API}/journal/{journal_id}/meta").json()["status"] == "archived"


class TestStrictStatus:

    @pytest.fixture
    def strict_client(self, test_settings):
        settings = test_settings.model_copy(update={"journal_strict_status": True})
        with TestClient(create_app(settings)) as client:
            yield client

    def test_unknown_status_is_rejected(self, strict_client):
        client = strict_client
        client.post(f"{API}/auth/register", json={"name": "Ada", "email": "ada@lovelace.io", "password": "pw"})
        token = client.post(f"{API}/auth/login", json={"email": "ada@lovelace.io", "password": "pw"}).json()["token"]
        client.cookies.clear()
        headers = {"Authorization": f"Bearer {token}"}
        journal_id = create_journal(client, headers)["journalID"]

        response = client.put(f"{API}/journal/{journal_id}/status", json={"status": "archived"}, headers=headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid status"}
