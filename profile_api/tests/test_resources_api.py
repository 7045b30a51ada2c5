"""
Tests for the profile and sub-resource CRUD routes.
"""

import pytest

API = "/api/v1"

PNG = b"\x89PNG\r\n\x1a\nfake-image-bytes"


class TestSkills:

    def test_crud_round(self, client, make_user):
        user_id, headers = make_user()

        response = client.post(
            f"{API}/skills/{user_id}",
            json={"name": "Python", "proficiency_level": "expert"},
            headers=headers,
        )
        assert response.status_code == 201
        skill = response.json()
        skill_id = skill["skill_id"]
        assert skill["user_id"] == user_id
        assert skill["name"] == "Python"
        assert skill["description"] == ""

        listed = client.get(f"{API}/skills/{user_id}").json()
        assert [item["skill_id"] for item in listed] == [skill_id]

        response = client.put(
            f"{API}/skills/{user_id}/{skill_id}",
            json={"name": "Python", "proficiency_level": "master", "last_used": "2026"},
            headers=headers,
        )
        assert response.status_code == 200
        assert response.json()["proficiency_level"] == "master"

        fetched = client.get(f"{API}/skills/{user_id}/{skill_id}").json()
        assert fetched["last_used"] == "2026"

        response = client.delete(f"{API}/skills/{user_id}/{skill_id}", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"message": "Skill deleted"}

        response = client.get(f"{API}/skills/{user_id}/{skill_id}")
        assert response.status_code == 404
        assert response.json() == {"error": "Skill not found"}

    def test_put_upserts_missing_item(self, client, make_user):
        user_id, headers = make_user()

        response = client.put(f"{API}/skills/{user_id}/chosen-id", json={"name": "Go"}, headers=headers)

        assert response.status_code == 200
        assert response.json()["skill_id"] == "chosen-id"
        assert client.get(f"{API}/skills/{user_id}/chosen-id").json()["name"] == "Go"

    def test_delete_of_missing_item_succeeds(self, client, make_user):
        user_id, headers = make_user()

        response = client.delete(f"{API}/skills/{user_id}/nothing-here", headers=headers)

        assert response.status_code == 200

    def test_writes_to_another_user_are_forbidden(self, client, make_user):
        owner_id, _ = make_user()
        _, other_headers = make_user(email="grace@hopper.io", name="Grace")

        response = client.post(f"{API}/skills/{owner_id}", json={"name": "COBOL"}, headers=other_headers)

        assert response.status_code == 403
        assert response.json() == {"error": "Not authorized"}

    def test_anonymous_writes_are_unauthorized(self, client, make_user):
        user_id, _ = make_user()

        response = client.post(f"{API}/skills/{user_id}", json={"name": "Python"})

        assert response.status_code == 401


class TestExperience:

    def test_create_and_list(self, client, make_user):
        user_id, headers = make_user()

        response = client.post(
            f"{API}/experience/{user_id}",
            json={"company": "Analytical Engines", "position": "Programmer", "start": "1842"},
            headers=headers,
        )
        assert response.status_code == 201
        assert response.json()["experience_id"]

        listed = client.get(f"{API}/experience/{user_id}").json()
        assert listed[0]["company"] == "Analytical Engines"
        assert listed[0]["notes"] == ""


@pytest.mark.parametrize("resource,id_field", [
    ("qualifications", "qualification_id"),
    ("certificates", "certificate_id"),
])
class TestCredentials:

    def test_cert_image_upload(self, client, make_user, resource, id_field):
        user_id, headers = make_user()
        created = client.post(
            f"{API}/{resource}/{user_id}",
            json={"title": "BSc Mathematics", "institution": "University of London"},
            headers=headers,
        ).json()
        item_id = created[id_field]
        assert created["cert_image"] is None

        response = client.put(
            f"{API}/{resource}/{user_id}/{item_id}/cert_image",
            files={"file": ("diploma.png", PNG, "image/png")},
            headers=headers,
        )

        assert response.status_code == 200
        url = response.json()["cert_image"]
        assert url == f"/images/{user_id}-diploma.png"

        fetched = client.get(f"{API}/{resource}/{user_id}/{item_id}").json()
        assert fetched["cert_image"] == url
        assert fetched["title"] == "BSc Mathematics"

        served = client.get(url)
        assert served.status_code == 200
        assert served.content == PNG

    def test_non_image_upload_is_rejected(self, client, make_user, resource, id_field):
        user_id, headers = make_user()

        response = client.put(
            f"{API}/{resource}/{user_id}/some-id/cert_image",
            files={"file": ("notes.txt", b"plain text", "text/plain")},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json() == {"error": "File must be an image"}


class TestProfile:

    def test_missing_profile_is_not_found(self, client, make_user):
        user_id, _ = make_user()

        response = client.get(f"{API}/profile/{user_id}")

        assert response.status_code == 404
        assert response.json() == {"error": "Profile not found"}

    def test_create_then_conflict(self, client, make_user):
        user_id, headers = make_user()

        response = client.post(f"{API}/profile/{user_id}", json={"name": "Ada", "bio": "Hi"}, headers=headers)
        assert response.status_code == 201
        assert response.json()["user_id"] == user_id

        response = client.post(f"{API}/profile/{user_id}", json={"name": "Ada"}, headers=headers)
        assert response.status_code == 409
        assert response.json() == {"error": "Profile already exists"}

    def test_put_upserts(self, client, make_user):
        user_id, headers = make_user()

        response = client.put(f"{API}/profile/{user_id}", json={"domain": "mathematics"}, headers=headers)
        assert response.status_code == 200

        profile = client.get(f"{API}/profile/{user_id}").json()
        assert profile["domain"] == "mathematics"
        assert profile["name"] is None

    def test_profile_image_upload(self, client, make_user):
        user_id, headers = make_user()
        client.post(f"{API}/profile/{user_id}", json={"name": "Ada"}, headers=headers)

        response = client.put(
            f"{API}/profile/{user_id}/image",
            files={"profileImage": ("me.png", PNG, "image/png")},
            headers=headers,
        )

        assert response.status_code == 200
        url = response.json()["profileImage"]
        assert url == f"/images/{user_id}-me.png"

        profile = client.get(f"{API}/profile/{user_id}").json()
        assert profile["profile_img"] == url
        assert profile["name"] == "Ada"

    def test_profile_image_for_another_user_is_forbidden(self, client, make_user):
        owner_id, _ = make_user()
        _, other_headers = make_user(email="grace@hopper.io", name="Grace")

        response = client.put(
            f"{API}/profile/{owner_id}/image",
            files={"profileImage": ("me.png", PNG, "image/png")},
            headers=other_headers,
        )

        assert response.status_code == 403
