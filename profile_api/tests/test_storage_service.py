"""
Tests for the local and Google Cloud Storage image stores.
"""

import io
from unittest.mock import MagicMock

import pytest
from google.cloud.exceptions import GoogleCloudError

from profile_api.core.config import Settings
from profile_api.services.storage_service import (
    GCSImageStore,
    LocalImageStore,
    create_image_store,
    image_name,
)


class TestImageName:

    def test_prefixes_owner(self):
        assert image_name("u1", "avatar.png") == "u1-avatar.png"

    def test_drops_directories(self):
        assert image_name("u1", "../../etc/avatar.png") == "u1-avatar.png"


class TestLocalImageStore:

    @pytest.mark.asyncio
    async def test_writes_file_and_returns_url(self, tmp_path):
        store = LocalImageStore(str(tmp_path / "images"))

        url = await store.save_image("u1", "avatar.png", io.BytesIO(b"first"), "image/png")

        assert url == "/images/u1-avatar.png"
        assert (tmp_path / "images" / "u1-avatar.png").read_bytes() == b"first"

    @pytest.mark.asyncio
    async def test_same_name_overwrites(self, tmp_path):
        store = LocalImageStore(str(tmp_path))
        await store.save_image("u1", "avatar.png", io.BytesIO(b"first"))

        await store.save_image("u1", "avatar.png", io.BytesIO(b"second"))

        assert (tmp_path / "u1-avatar.png").read_bytes() == b"second"

    @pytest.mark.asyncio
    async def test_reads_from_start_of_stream(self, tmp_path):
        store = LocalImageStore(str(tmp_path))
        stream = io.BytesIO(b"payload")
        stream.read()

        await store.save_image("u1", "a.png", stream)

        assert (tmp_path / "u1-a.png").read_bytes() == b"payload"


class TestGCSImageStore:

    @pytest.fixture
    def client(self):
        client = MagicMock()
        blob = client.bucket.return_value.blob.return_value
        blob.public_url = "https://storage.googleapis.com/profile-images/u1-avatar.png"
        return client

    @pytest.mark.asyncio
    async def test_uploads_and_publishes(self, client):
        store = GCSImageStore("profile-images", project_id="demo", client=client)
        stream = io.BytesIO(b"image")

        url = await store.save_image("u1", "avatar.png", stream, "image/png")

        client.bucket.assert_called_once_with("profile-images")
        client.bucket.return_value.blob.assert_called_once_with("u1-avatar.png")
        blob = client.bucket.return_value.blob.return_value
        blob.upload_from_file.assert_called_once_with(stream, content_type="image/png")
        blob.make_public.assert_called_once_with()
        assert url == "https://storage.googleapis.com/profile-images/u1-avatar.png"

    @pytest.mark.asyncio
    async def test_make_public_failure_still_returns_url(self, client):
        blob = client.bucket.return_value.blob.return_value
        blob.make_public.side_effect = GoogleCloudError("uniform bucket-level access")
        store = GCSImageStore("profile-images", client=client)

        url = await store.save_image("u1", "avatar.png", io.BytesIO(b"image"))

        assert url == blob.public_url

    @pytest.mark.asyncio
    async def test_upload_failure_propagates(self, client):
        blob = client.bucket.return_value.blob.return_value
        blob.upload_from_file.side_effect = GoogleCloudError("bucket missing")
        store = GCSImageStore("profile-images", client=client)

        with pytest.raises(GoogleCloudError):
            await store.save_image("u1", "avatar.png", io.BytesIO(b"image"))


class TestCreateImageStore:

    def test_local_by_default(self, tmp_path):
        settings = Settings(image_store="local", image_local_path=str(tmp_path))

        store = create_image_store(settings)

        assert isinstance(store, LocalImageStore)
        assert store.base_path == tmp_path
